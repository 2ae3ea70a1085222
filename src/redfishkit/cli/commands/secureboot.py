"""Secure Boot database command handlers."""

from redfishkit.cli.commands.common import confirm_action, wrap_command
from redfishkit.cli.utils import establish_redfish_connection, print_error, EXIT_INVALID_ARGUMENTS
from redfishkit.redfish.securebootdatabase import SecureBootDatabaseResetKeysType


def setup_secureboot_commands(parser):
    """Setup Secure Boot database subcommands.

    Args:
        parser: Secure Boot subparser
    """
    subparsers = parser.add_subparsers(dest='secureboot_action', help='Secure Boot action')

    # list
    subparsers.add_parser('list', help='List Secure Boot databases')

    # certificates / signatures
    p = subparsers.add_parser('certificates', help='List the certificates of a database')
    p.add_argument('--database', required=True, help='Database ID (e.g., db, dbx, PK, KEK)')

    p = subparsers.add_parser('signatures', help='List the signatures of a database')
    p.add_argument('--database', required=True, help='Database ID (e.g., db, dbx, PK, KEK)')

    # reset-keys
    p = subparsers.add_parser('reset-keys', help='Reset or delete the keys of a database')
    p.add_argument('--database', required=True, help='Database ID')
    p.add_argument('--type', dest='reset_keys_type', required=True,
                   choices=[t.value for t in SecureBootDatabaseResetKeysType],
                   help='Reset type')
    p.add_argument('-f', '--force', action='store_true',
                   help='Do not ask for confirmation')


def handle_list(args):
    """Handle 'secureboot list' command."""
    rf = establish_redfish_connection(args)
    return rf.secure_boot_databases()


def handle_certificates(args):
    """Handle 'secureboot certificates' command."""
    rf = establish_redfish_connection(args)
    return rf.get_secure_boot_database(args.database).certificates()


def handle_signatures(args):
    """Handle 'secureboot signatures' command."""
    rf = establish_redfish_connection(args)
    return rf.get_secure_boot_database(args.database).signatures()


def handle_reset_keys(args):
    """Handle 'secureboot reset-keys' command."""
    if not confirm_action(f"{args.reset_keys_type} on Secure Boot database '{args.database}'?",
                          force=args.force):
        return {'message': 'Aborted'}

    rf = establish_redfish_connection(args)
    database = rf.get_secure_boot_database(args.database)
    database.reset_keys(args.reset_keys_type)
    return {
        'message': f'{args.reset_keys_type} requested',
        'database': args.database,
    }


def dispatch(args):
    """Dispatch Secure Boot command."""
    action = args.secureboot_action
    handlers = {
        'list': handle_list,
        'certificates': handle_certificates,
        'signatures': handle_signatures,
        'reset-keys': handle_reset_keys,
    }

    if action in handlers:
        return wrap_command(handlers[action], args)
    else:
        print_error(f"Unknown Secure Boot action: {action}", args)
        return EXIT_INVALID_ARGUMENTS
