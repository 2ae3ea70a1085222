"""CLI utilities for redfishkit."""

import logging
import os
import sys

import requests

from redfishkit.common.errors import (
    CollectionError,
    DecodeError,
    TransportError,
    UnsupportedActionError,
)


# Exit codes
EXIT_SUCCESS = 0
EXIT_GENERAL_ERROR = 1
EXIT_CONNECTION_ERROR = 2
EXIT_NOT_IMPLEMENTED = 3
EXIT_INVALID_ARGUMENTS = 4
EXIT_NOT_FOUND = 5
EXIT_TIMEOUT = 6


# ANSI color codes
class Colors:
    """ANSI color codes for terminal output."""
    RESET = '\033[0m'
    RED = '\033[91m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    GRAY = '\033[90m'


def is_tty():
    """Check if stdout is a TTY (supports colors)."""
    return sys.stdout.isatty()


def should_use_color(args):
    """Determine if color output should be used.

    NO_COLOR and --no-color both turn colors off; otherwise colors are used on a TTY.
    """
    if os.environ.get('NO_COLOR'):
        return False
    if getattr(args, 'no_color', False):
        return False
    return is_tty()


def colorize(text, color, args=None):
    """Colorize text if color output is enabled."""
    if args is not None and not should_use_color(args):
        return text
    if not is_tty():
        return text
    return f"{color}{text}{Colors.RESET}"


def print_error(message, args=None):
    print(colorize(f"Error: {message}", Colors.RED, args), file=sys.stderr)


def print_warning(message, args=None):
    print(colorize(f"Warning: {message}", Colors.YELLOW, args), file=sys.stderr)


def print_success(message, args=None):
    print(colorize(message, Colors.GREEN, args))


def configure_logging(args):
    """Route library logging to stderr at the level selected by --verbose/--debug."""
    level = logging.WARNING
    if getattr(args, 'debug', False):
        level = logging.DEBUG
    elif getattr(args, 'verbose', False):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    if level > logging.DEBUG:
        # urllib3 logs every connection at DEBUG; keep it quiet unless debugging.
        logging.getLogger('urllib3').setLevel(logging.WARNING)


def get_exit_code(exception):
    """Map exception type to exit code.

    Args:
        exception: Exception instance

    Returns:
        Exit code integer
    """
    if isinstance(exception, TransportError):
        if isinstance(exception.__cause__, requests.Timeout):
            return EXIT_TIMEOUT
        if exception.status_code is None:
            return EXIT_CONNECTION_ERROR
        if exception.status_code == 404:
            return EXIT_NOT_FOUND
        return EXIT_GENERAL_ERROR
    if isinstance(exception, UnsupportedActionError):
        return EXIT_NOT_IMPLEMENTED
    if isinstance(exception, (DecodeError, CollectionError)):
        return EXIT_GENERAL_ERROR
    if isinstance(exception, ConnectionError):
        return EXIT_CONNECTION_ERROR
    if isinstance(exception, ValueError):
        return EXIT_INVALID_ARGUMENTS
    return EXIT_GENERAL_ERROR


def handle_error(exception, args):
    """Handle and display error to user.

    Args:
        exception: Exception that occurred
        args: Parsed arguments
    """
    print_error(str(exception), args)

    if getattr(args, 'verbose', False):
        logging.getLogger(__name__).info('Exception type: %s', type(exception).__name__)

    # Print stack trace if debug enabled
    if getattr(args, 'debug', False):
        import traceback
        traceback.print_exc(file=sys.stderr)


# Connection settings that may come from the environment, by argument name.
CONNECTION_ENV_VARS = {
    'ip': 'BMC_HOST',
    'username': 'BMC_USERNAME',
    'password': 'BMC_PASSWORD',
}


def apply_env_vars(args):
    """Fill connection settings the command line left out from BMC_* variables.

    Raises:
        ValueError: If BMC_MAX_WORKERS is not an integer
    """
    for name, variable in CONNECTION_ENV_VARS.items():
        if not getattr(args, name, None) and os.environ.get(variable):
            setattr(args, name, os.environ[variable])

    insecure = os.environ.get('BMC_INSECURE', '')
    if not getattr(args, 'insecure', False) and insecure:
        args.insecure = insecure.lower() in ('1', 'true', 'yes')

    workers = os.environ.get('BMC_MAX_WORKERS')
    if getattr(args, 'max_workers', None) is None and workers:
        try:
            args.max_workers = int(workers)
        except ValueError:
            raise ValueError(f"Invalid BMC_MAX_WORKERS: {workers}") from None

    return args


def validate_connection_args(args):
    """Raise ValueError naming every connection setting that is still unset."""
    missing = [name for name in CONNECTION_ENV_VARS if not getattr(args, name, None)]
    if missing:
        flags = ', '.join(f'--{name} ({CONNECTION_ENV_VARS[name]})' for name in missing)
        raise ValueError(f"Missing required arguments: {flags}")


def establish_redfish_connection(args):
    """Establish Redfish connection with error handling.

    Args:
        args: Parsed arguments with connection parameters

    Returns:
        Redfish instance

    Raises:
        ValueError: If connection parameters are invalid
        ConnectionError: If connection fails
    """
    from redfishkit.redfish.redfish import Redfish

    validate_connection_args(args)

    log = logging.getLogger(__name__)
    log.info('Connecting to %s...', args.ip)

    try:
        rf = Redfish(
            ip=args.ip,
            username=args.username,
            password=args.password,
            verify_ssl=not getattr(args, 'insecure', False),
            max_workers=getattr(args, 'max_workers', None),
        )
    except TransportError as e:
        raise ConnectionError(f"Failed to connect to {args.ip}: {e}") from e

    log.info('SSL verification %s', 'disabled' if getattr(args, 'insecure', False) else 'enabled')
    log.info('Connected, system ID: %s', rf.system_id)
    return rf
