"""Command 'create' of tasknote"""

from __future__ import annotations

from pathlib import Path

import typer

from tasknote.services.config_service import get_config_service
from tasknote.services.document_service import DocumentError, insert_line
from tasknote.services.form_service import TaskForm
from tasknote.utils.exit_codes import ERROR_NOT_FOUND
from tasknote.utils.ui.console import print_task_line
from tasknote.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper
from .utils import apply_options, prompt_form, show_form

app = typer.Typer()


@app.command("create")
@command_wrapper
def create(
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
    file: Path | None = typer.Option(
        None, "--file", "-f", help="Markdown file to insert the task into"
    ),
    after: int | None = typer.Option(
        None, "--after", "-a", help="Insert below this line (default: end of file)"
    ),
    interactive: bool = typer.Option(
        False, "--interactive", "-i", help="Prompt for every field"
    ),
) -> None:
    """
    Create a task line.

    Dates accept today, tomorrow, yesterday, weekday names (mon, friday)
    or YYYY-MM-DD.

    Examples:
      tasknote create -d "Buy milk" -p high --due fri
      tasknote create -d "Renew passport" --scheduled 2024-06-01 -f todo.md -a 3
    """
    config = get_config_service().config
    form = TaskForm(repeat_default=config.repeat_default)

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

    line = form.submit(config.tag_marker)

    if file is None:
        print_task_line(line)
        return

    if after is None:
        after = len(file.read_text(encoding="utf-8").splitlines()) if file.exists() else 0
    try:
        lineno = insert_line(file, after, line)
    except DocumentError as e:
        raise AppError(str(e), exit_code=ERROR_NOT_FOUND) from e
    format_success(f"Task added to {file}:{lineno}")
