"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from tasknote.utils.ui.console import get_console

# Verbs people bring from other task tools, mapped to the matching command
COMMAND_HINTS = {
    "add": "create",
    "new": "create",
    "update": "edit",
    "modify": "edit",
    "done": "toggle",
    "check": "toggle",
    "complete": "toggle",
    "show": "parse",
}


def suggest_commands(attempted: str, available: list[str]) -> list[str]:
    """Commands close to *attempted*, known verb hints first (max 3)."""
    suggestions = []
    hint = COMMAND_HINTS.get(attempted.lower())
    if hint in available:
        suggestions.append(hint)
    for name in get_close_matches(attempted, available, n=3, cutoff=0.6):
        if name not in suggestions:
            suggestions.append(name)
    return suggestions[:3]


class SuggestingGroup(TyperGroup):
    """Typer group that answers an unknown command with "Did you mean".

    Similar to git's "The most similar command is" hint.
    """

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            if not args:
                raise
            attempted = args[0]
            suggestions = suggest_commands(attempted, list(self.commands))
            if not suggestions:
                raise

            console = get_console()
            console.print(
                f'[red]Error:[/red] unknown command "{attempted}" for "{ctx.info_name}"'
            )
            console.print()
            if len(suggestions) == 1:
                console.print("[yellow]Did you mean this?[/yellow]")
            else:
                console.print("[yellow]Did you mean one of these?[/yellow]")
            for suggestion in suggestions:
                console.print(f"        {suggestion}")
            raise typer.Exit(1) from e
