"""Common command utilities shared across all commands."""

from redfishkit.cli.formatters import format_output
from redfishkit.cli.utils import (
    EXIT_GENERAL_ERROR,
    EXIT_SUCCESS,
    get_exit_code,
    handle_error,
    print_warning,
)
from redfishkit.common.errors import CollectionError


def wrap_command(func, args):
    """Wrap command execution with common error handling.

    A CollectionError still prints the members that were fetched, followed
    by one warning per failed URI.

    Args:
        func: Command function to execute
        args: Parsed arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        result = func(args)
        if result is not None:
            print(format_output(result, args.output))
        return EXIT_SUCCESS
    except CollectionError as e:
        print(format_output(e.results, args.output))
        for uri, error in e.failures.items():
            print_warning(f"{uri}: {error}", args)
        return EXIT_GENERAL_ERROR
    except Exception as e:
        handle_error(e, args)
        return get_exit_code(e)


def confirm_action(prompt, force=False):
    """Prompt user for confirmation on destructive operations.

    Args:
        prompt: Confirmation prompt message
        force: If True, skip confirmation and return True

    Returns:
        True if confirmed, False otherwise
    """
    if force:
        return True

    try:
        response = input(f"{prompt} [y/N]: ").strip().lower()
        return response in ('y', 'yes')
    except (KeyboardInterrupt, EOFError):
        print()  # New line after interrupt
        return False
