"""Helpers shared by the create and edit commands."""

from __future__ import annotations

import click
import typer
from rich.table import Table

from tasknote.models.fields import DateField, SelectField, StringField, get_field
from tasknote.services.form_service import TaskForm
from tasknote.utils.exit_codes import ERROR_INVALID_ARGS
from tasknote.utils.ui.console import get_console

from .decorators import AppError

DATE_PROMPT = "Enter date (today/tomorrow/yesterday/Monday/etc)"

console = get_console()


def apply_options(form: TaskForm, values: dict[str, str | None]) -> None:
    """Apply command line field options to the form.

    Options left as None are not touched.

    Raises:
        AppError: If a value is rejected by its field
    """
    for name, raw in values.items():
        if raw is None:
            continue
        if form.set_value(name, raw):
            continue

        match get_field(name, form.schema):
            case SelectField(options=options):
                message = f"Invalid {name} '{raw}'. Choose from: {', '.join(options)}"
            case DateField():
                message = f"Could not resolve date for {name}: '{raw}'"
            case StringField():
                message = f"Invalid {name} '{raw}'"
        raise AppError(message, exit_code=ERROR_INVALID_ARGS)


def prompt_form(form: TaskForm) -> None:
    """Ask for every field in schema order, re-asking on rejected input."""
    for field in form.schema:
        current = form.values[field.name]
        while True:
            match field:
                case SelectField(options=options):
                    raw = typer.prompt(
                        f"Select {field.name}",
                        default=current or "none",
                        type=click.Choice(options, case_sensitive=False),
                    )
                case DateField():
                    raw = typer.prompt(
                        f"{field.name} - {DATE_PROMPT}",
                        default=current,
                        show_default=bool(current),
                    )
                case StringField():
                    raw = typer.prompt(
                        f"Enter {field.name}",
                        default=current,
                        show_default=bool(current),
                    )
            if form.set_value(field.name, raw):
                break
            console.print(f"[yellow]Could not use '{raw}' for {field.name}, try again[/yellow]")


def show_form(form: TaskForm) -> None:
    """Print the form rows as a two-column table."""
    table = Table(show_header=False, box=None)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")
    for row in form.rows():
        name, _, value = row.partition(": ")
        table.add_row(name, value or "-")
    console.print(table)
