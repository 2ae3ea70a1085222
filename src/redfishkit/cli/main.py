"""redfishkit CLI main entry point."""

import argparse
import sys

from redfishkit.cli import __version__
from redfishkit.cli.commands import cooling as cooling_cmd
from redfishkit.cli.commands import secureboot as secureboot_cmd
from redfishkit.cli.utils import (
    apply_env_vars,
    configure_logging,
    get_exit_code,
    handle_error,
    EXIT_INVALID_ARGUMENTS,
)


def create_parser():
    """Create the main argument parser with all subcommands.

    Returns:
        ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='redfishkit',
        description='Inspect and manage Redfish cooling units and Secure Boot databases',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  BMC_HOST          BMC IP address or hostname
  BMC_USERNAME      BMC username
  BMC_PASSWORD      BMC password
  BMC_INSECURE      Disable SSL verification (1, true, yes)
  BMC_MAX_WORKERS   Threads used to fetch collection members
  NO_COLOR          Disable colored output

Examples:
  # List coolant distribution units
  redfishkit cooling list --type CDU -i 10.10.10.10 -u admin -p password

  # Change the asset tag of a cooling unit
  redfishkit cooling update -U /redfish/v1/ThermalEquipment/CDUs/1 --asset-tag RACK-12

  # Show the keys of the db Secure Boot database as a table
  redfishkit -o table secureboot certificates --database db
"""
    )

    # Global options
    parser.add_argument('--version', action='version', version=f'redfishkit {__version__}')

    parser.add_argument('-i', '--ip', '--host', dest='ip',
                        help='BMC IP address or hostname (env: BMC_HOST)')
    parser.add_argument('-u', '--username',
                        help='BMC username (env: BMC_USERNAME)')
    parser.add_argument('-p', '--password',
                        help='BMC password (env: BMC_PASSWORD)')
    parser.add_argument('-k', '--insecure', action='store_true',
                        help='Disable SSL verification (env: BMC_INSECURE)')
    parser.add_argument('-w', '--max-workers', type=int,
                        help='Threads used to fetch collection members (env: BMC_MAX_WORKERS)')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose output')
    parser.add_argument('-d', '--debug', action='store_true',
                        help='Enable debug mode (log requests, show stack traces)')

    parser.add_argument('-o', '--output',
                        choices=['json', 'json-pretty', 'table'],
                        default='json',
                        help='Output format (default: json)')
    parser.add_argument('--no-color', action='store_true',
                        help='Disable colored output')

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    cooling_parser = subparsers.add_parser('cooling', help='Cooling unit operations')
    cooling_cmd.setup_cooling_commands(cooling_parser)

    secureboot_parser = subparsers.add_parser('secureboot', help='Secure Boot database operations')
    secureboot_cmd.setup_secureboot_commands(secureboot_parser)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        args = apply_env_vars(args)
    except ValueError as e:
        handle_error(e, args)
        return get_exit_code(e)

    configure_logging(args)

    if not args.command:
        parser.print_help()
        return EXIT_INVALID_ARGUMENTS

    if args.command == 'cooling':
        return cooling_cmd.dispatch(args)
    elif args.command == 'secureboot':
        return secureboot_cmd.dispatch(args)
    else:
        print(f"Error: Unknown command: {args.command}", file=sys.stderr)
        return EXIT_INVALID_ARGUMENTS


if __name__ == '__main__':
    sys.exit(main())
