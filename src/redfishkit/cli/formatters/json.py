"""JSON output formatter."""

import json


def format_json(data, pretty=False):
    """Format data as JSON, indented with sorted keys when pretty is set."""
    if pretty:
        return json.dumps(data, indent=4, sort_keys=True)
    return json.dumps(data)
