"""Configuration management commands."""

from typing import Optional

import typer
from rich.console import Console

from tasknote.services.config_service import get_config_service
from tasknote.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from tasknote.utils.typer_helpers import SuggestingGroup
from tasknote.utils.ui.formatters import format_error, format_output, format_success

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")
console = Console()


@app.command("view")
def view_config(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    config_dict = get_config_service().config.model_dump()
    format_output(config_dict, output)


@app.command("get")
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., toggle.done_symbol)"),
) -> None:
    """Get a configuration value."""
    try:
        value = get_config_service().get(key)
    except KeyError:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(ERROR_NOT_FOUND)
    console.print(repr(value) if isinstance(value, str) else value, markup=False)


@app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., tag_marker)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    try:
        get_config_service().set(key, value)
    except KeyError:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(ERROR_NOT_FOUND)
    except ValueError as e:
        format_error(str(e))
        raise typer.Exit(ERROR_INVALID_ARGS)
    format_success(f"Configuration '{key}' set to '{value}'")


@app.command("reset")
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        confirm = typer.confirm(f"Are you sure you want to reset {msg}?")
        if not confirm:
            format_error("Cancelled")
            raise typer.Exit(0)

    try:
        get_config_service().reset(key)
    except KeyError:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(ERROR_NOT_FOUND)

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
