"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML serialization
- Rich Unicode tables
- List formatting for detailed views
"""

import json
from typing import Any, Dict, List, Optional, Tuple

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(_plain(data), default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    records = _find_records(data)
    if records is None:
        if isinstance(data, dict):
            title, rows = None, [{"field": key, "value": value} for key, value in data.items()]
        else:
            return json.dumps(data, indent=2, default=str)
    else:
        title, rows = records

    if not rows:
        return f"No {title or 'data'} found."

    columns = list(rows[0].keys())
    table = Table(title=title, show_header=True, header_style="bold magenta")
    for column in columns:
        table.add_column(column.replace("_", " ").title())
    for row in rows:
        table.add_row(*(_cell(row.get(column)) for column in columns))

    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)

    return capture.get()


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    records = _find_records(data)
    if records is None:
        if isinstance(data, dict):
            return "\n".join(f"{key}: {_cell(value)}" for key, value in data.items())
        return json.dumps(data, indent=2, default=str)

    title, rows = records
    if not rows:
        return f"No {title} found."

    lines: List[str] = []
    for i, row in enumerate(rows):
        if i > 0:
            lines.append("")  # Blank line between records
        for key, value in row.items():
            lines.append(f"{key}: {_cell(value)}")
    return "\n".join(lines)


def _find_records(data: Any) -> Optional[Tuple[str, List[Dict[str, Any]]]]:
    """Find the first list of records in a response dict, with its key."""
    if not isinstance(data, dict):
        return None
    for key, value in data.items():
        if isinstance(value, list) and all(isinstance(item, dict) for item in value):
            return key, value
    return None


def _cell(value: Any) -> str:
    if value is None:
        return "N/A"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return str(value)


def _plain(data: Any) -> Any:
    """Convert values yaml.safe_dump cannot represent into plain types."""
    if isinstance(data, dict):
        return {key: _plain(value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [_plain(item) for item in data]
    if isinstance(data, (str, int, float, bool)) or data is None:
        return data
    return str(data)
