"""Table output formatter."""

import json


def _cell(value):
    # Nested structures (Status, Location, ...) are shown as compact JSON.
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(',', ':'))
    if value is None:
        return ''
    return str(value)


def format_table(data, columns=None):
    """Format a dict or a list of dicts as an ASCII table.

    Args:
        data: Dict (rendered as Property/Value rows) or list of dicts
        columns: Optional list of keys to show; defaults to every key seen, in order

    Returns:
        ASCII table string
    """
    if not data:
        return "No data"

    if isinstance(data, dict):
        columns = ['Property', 'Value']
        rows = [[key, _cell(value)] for key, value in data.items()]
    else:
        if columns is None:
            columns = []
            for item in data:
                columns.extend(key for key in item if key not in columns)
        rows = [[_cell(item.get(column)) for column in columns] for item in data]

    widths = [len(column) for column in columns]
    for row in rows:
        widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

    line_format = " | ".join(f"{{:<{w}}}" for w in widths)
    lines = [line_format.format(*columns), "-+-".join("-" * w for w in widths)]
    lines.extend(line_format.format(*row) for row in rows)
    return '\n'.join(lines)
