"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console()

PRIORITY_COLORS = {
    "highest": "bold red",
    "high": "bold orange3",
    "medium": "bold yellow",
    "low": "green",
    "lowest": "dim green",
}

# Metadata Icons
METADATA_ICONS = {
    "description": "📝",
    "priority": "🔺",
    "repeat": "🔁",
    "created": "✨",
    "start": "🛫",
    "scheduled": "⏳",
    "due": "📅",
}


def format_output(data: Any, output_format: str = "pretty") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif output_format == "table":
        format_single_item(data)
    else:
        format_pretty(data)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        formatted_key = key.replace("_", " ").title()
        if isinstance(value, dict):
            formatted_value = ", ".join(f"{k}={v}" for k, v in value.items()) or "-"
        elif value is None:
            formatted_value = "-"
        else:
            formatted_value = str(value)
        table.add_row(formatted_key, formatted_value)

    console.print(table)


def format_pretty(task: dict) -> None:
    """Format a decoded task with icons and priority colors."""
    for key, value in task.items():
        if key == "extra" or value is None:
            continue
        icon = METADATA_ICONS.get(key, "•")
        text = Text(f"{icon} {key}: ")
        text.append(str(value), style=PRIORITY_COLORS.get(value, "") if key == "priority" else "")
        console.print(text)

    for key, value in (task.get("extra") or {}).items():
        console.print(Text(f"• {key}: {value}", style="dim"))


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")
