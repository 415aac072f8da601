"""Command 'edit' of tasknote - rewrite an existing task line."""

from __future__ import annotations

from pathlib import Path

import typer

from tasknote.services.config_service import get_config_service
from tasknote.services.document_service import DocumentError, read_line, replace_line
from tasknote.services.form_service import TaskForm
from tasknote.utils.exit_codes import ERROR_NOT_FOUND
from tasknote.utils.task_line import CHECKBOX_PATTERN, CHECKBOX_PREFIX
from tasknote.utils.ui.console import get_console, print_task_line
from tasknote.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper
from .utils import apply_options, prompt_form, show_form

app = typer.Typer()
console = get_console()


def _keep_checkbox(original: str, encoded: str, tag_marker: str) -> str:
    """Carry the checkbox of *original* over to *encoded*.

    Indentation, status symbol and any text between the checkbox and the
    tag marker (``- [ ] 10:00 #task ...``) are kept.
    """
    match = CHECKBOX_PATTERN.match(original)
    if not match:
        return encoded
    indent, symbol = match.groups()
    marker_idx = original.find(tag_marker, match.end())
    lead = original[match.end() : marker_idx] if marker_idx != -1 else " "
    return f"{indent}- [{symbol}]{lead}" + encoded[len(CHECKBOX_PREFIX) :]


@app.command("edit")
@command_wrapper
def edit(
    file: Path = typer.Argument(..., help="Markdown file holding the task"),
    line: int = typer.Argument(..., help="Line number (1-based)"),
    description: str | None = typer.Option(
        None, "--description", "-d", help="Task description"
    ),
    priority: str | None = typer.Option(
        None, "--priority", "-p", help="none/lowest/low/medium/high/highest"
    ),
    repeat: str | None = typer.Option(None, "--repeat", "-r", help="Repeat rule"),
    created: str | None = typer.Option(None, "--created", help="Created date"),
    start: str | None = typer.Option(None, "--start", help="Start date"),
    scheduled: str | None = typer.Option(None, "--scheduled", help="Scheduled date"),
    due: str | None = typer.Option(None, "--due", help="Due date"),
    interactive: bool = typer.Option(
        False, "--interactive", "-i", help="Prompt for every field"
    ),
) -> None:
    """
    Edit the task on LINE of FILE.

    Fields that are not given keep their current value; pass an empty
    string (e.g. --due "") to clear one.
    """
    config = get_config_service().config

    try:
        current = read_line(file, line)
    except (DocumentError, FileNotFoundError) as e:
        raise AppError(str(e), exit_code=ERROR_NOT_FOUND) from e

    if config.tag_marker not in current:
        raise AppError(
            f"Line {line} is not a task (no '{config.tag_marker}' marker)",
            exit_code=ERROR_NOT_FOUND,
        )

    form = TaskForm.from_line(
        current, config.tag_marker, repeat_default=config.repeat_default
    )
    apply_options(
        form,
        {
            "description": description,
            "priority": priority,
            "repeat": repeat,
            "created": created,
            "start": start,
            "scheduled": scheduled,
            "due": due,
        },
    )
    if interactive:
        prompt_form(form)
        show_form(form)

    new_line = _keep_checkbox(
        current, form.submit(config.tag_marker), config.tag_marker
    )
    if new_line == current:
        console.print("[dim]No changes[/dim]")
        return

    replace_line(file, line, new_line)
    format_success(f"Updated {file}:{line}")
    print_task_line(new_line)
