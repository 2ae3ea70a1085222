"""Cooling unit command handlers."""

from redfishkit.cli.commands.common import wrap_command
from redfishkit.cli.utils import establish_redfish_connection, print_error, EXIT_INVALID_ARGUMENTS
from redfishkit.redfish.coolingunit import CoolingEquipmentType, CoolingUnitMode


def setup_cooling_commands(parser):
    """Setup cooling unit subcommands.

    Args:
        parser: Cooling subparser
    """
    subparsers = parser.add_subparsers(dest='cooling_action', help='Cooling unit action')

    # list
    p = subparsers.add_parser('list', help='List cooling units')
    p.add_argument('--type', dest='equipment_type',
                   choices=[t.value for t in CoolingEquipmentType],
                   help='Only list units of this equipment type')

    # get
    p = subparsers.add_parser('get', help='Get a cooling unit')
    p.add_argument('-U', '--uri', required=True,
                   help='Cooling unit URI (e.g., /redfish/v1/ThermalEquipment/CDUs/1)')

    # update
    p = subparsers.add_parser('update', help='Update writable cooling unit properties')
    p.add_argument('-U', '--uri', required=True, help='Cooling unit URI')
    p.add_argument('--asset-tag', help='New asset tag')
    p.add_argument('--user-label', help='New user label')

    # set-mode
    p = subparsers.add_parser('set-mode', help='Enable or disable a cooling unit')
    p.add_argument('-U', '--uri', required=True, help='Cooling unit URI')
    p.add_argument('--mode', required=True,
                   choices=[m.value for m in CoolingUnitMode],
                   help='Cooling unit mode')

    # sub-resources
    for name, help_text in (('pumps', 'List pumps'),
                            ('filters', 'List filters'),
                            ('reservoirs', 'List reservoirs')):
        p = subparsers.add_parser(name, help=f'{help_text} of a cooling unit')
        p.add_argument('-U', '--uri', required=True, help='Cooling unit URI')


def handle_list(args):
    """Handle 'cooling list' command."""
    rf = establish_redfish_connection(args)
    return rf.cooling_units(args.equipment_type)


def handle_get(args):
    """Handle 'cooling get' command."""
    rf = establish_redfish_connection(args)
    return rf.get_cooling_unit(args.uri)


def handle_update(args):
    """Handle 'cooling update' command."""
    if args.asset_tag is None and args.user_label is None:
        raise ValueError('Nothing to update: give --asset-tag and/or --user-label')

    rf = establish_redfish_connection(args)
    unit = rf.get_cooling_unit(args.uri)
    if args.asset_tag is not None:
        unit.asset_tag = args.asset_tag
    if args.user_label is not None:
        unit.user_label = args.user_label

    changes = unit.patch_payload()
    unit.update()
    return {
        'message': 'Cooling unit updated' if changes else 'No changes',
        'changes': changes,
    }


def handle_set_mode(args):
    """Handle 'cooling set-mode' command."""
    rf = establish_redfish_connection(args)
    unit = rf.get_cooling_unit(args.uri)
    unit.set_mode(args.mode)
    return {
        'message': f'Mode set to {args.mode}',
        'uri': args.uri,
    }


def handle_pumps(args):
    rf = establish_redfish_connection(args)
    return rf.get_cooling_unit(args.uri).pumps()


def handle_filters(args):
    rf = establish_redfish_connection(args)
    return rf.get_cooling_unit(args.uri).filters()


def handle_reservoirs(args):
    rf = establish_redfish_connection(args)
    return rf.get_cooling_unit(args.uri).reservoirs()


def dispatch(args):
    """Dispatch cooling command."""
    action = args.cooling_action
    handlers = {
        'list': handle_list,
        'get': handle_get,
        'update': handle_update,
        'set-mode': handle_set_mode,
        'pumps': handle_pumps,
        'filters': handle_filters,
        'reservoirs': handle_reservoirs,
    }

    if action in handlers:
        return wrap_command(handlers[action], args)
    else:
        print_error(f"Unknown cooling action: {action}", args)
        return EXIT_INVALID_ARGUMENTS
