"""Output formatters for CLI."""

from redfishkit.common.entity import Entity

from .json import format_json
from .table import format_table


def to_data(result):
    """Turn entities (or lists of them) into plain JSON-compatible data."""
    if isinstance(result, Entity):
        return result.to_dict()
    if isinstance(result, (list, tuple)):
        return [to_data(item) for item in result]
    return result


def format_output(data, format_type='json'):
    """Format output data according to the specified format type.

    Args:
        data: Entity, list of entities, or plain data
        format_type: Output format ('json', 'json-pretty', 'table')

    Returns:
        Formatted string
    """
    data = to_data(data)
    if format_type == 'json-pretty':
        return format_json(data, pretty=True)
    elif format_type == 'table':
        return format_table(data)
    return format_json(data, pretty=False)


__all__ = ['format_output', 'format_json', 'format_table', 'to_data']
