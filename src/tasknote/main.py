"""Main entry point for tasknote."""

import typer
from rich.console import Console

from tasknote import __version__
from tasknote.commands import (
    config,
    create_command,
    date_command,
    edit_command,
    parse_command,
    toggle_command,
)
from tasknote.utils.typer_helpers import SuggestingGroup

# Create main app with custom group class
app = typer.Typer(
    name="tasknote",
    cls=SuggestingGroup,
    help="Create and edit annotated markdown task lines",
    no_args_is_help=True,
)

console = Console()

# Single-command apps are merged into the top level
for command_module in (
    create_command,
    edit_command,
    parse_command,
    toggle_command,
    date_command,
):
    app.registered_commands.extend(command_module.app.registered_commands)

app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]tasknote[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
