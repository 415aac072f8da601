"""Command 'toggle' of tasknote"""

from __future__ import annotations

from pathlib import Path

import typer

from tasknote.services.config_service import get_config_service
from tasknote.services.document_service import DocumentError, read_line, replace_line
from tasknote.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from tasknote.utils.status_toggle import (
    completion_token,
    next_symbol,
    remove_tokens,
    toggle_status,
)
from tasknote.utils.task_line import CHECKBOX_PATTERN
from tasknote.utils.ui.console import print_task_line

from .decorators import AppError, command_wrapper

app = typer.Typer()


@app.command("toggle")
@command_wrapper
def toggle(
    file: Path = typer.Argument(..., help="Markdown file holding the task"),
    line: int = typer.Argument(..., help="Line number (1-based)"),
    symbol: str | None = typer.Option(
        None, "--symbol", "-s", help="Status symbol to set (default: flip done/open)"
    ),
) -> None:
    """
    Check off or reopen the checkbox on LINE of FILE.

    Checking a task off appends a completion token with today's date.
    """
    toggle_config = get_config_service().config.toggle

    if symbol is not None and (len(symbol) != 1 or symbol in "[]"):
        raise AppError(
            f"Symbol must be a single character, got '{symbol}'",
            exit_code=ERROR_INVALID_ARGS,
        )

    try:
        current = read_line(file, line)
    except (DocumentError, FileNotFoundError) as e:
        raise AppError(str(e), exit_code=ERROR_NOT_FOUND) from e

    match = CHECKBOX_PATTERN.match(current)
    if not match:
        raise AppError(f"Line {line} is not a checkbox item", exit_code=ERROR_NOT_FOUND)

    if symbol is None:
        symbol = next_symbol(match.group(2), toggle_config)

    if symbol == toggle_config.done_symbol:
        new_line = toggle_status(current, symbol, completion_token(toggle_config))
    else:
        # Reopened tasks drop their completion date
        reopened = remove_tokens(current, toggle_config.completion_key)
        new_line = toggle_status(reopened, symbol)

    replace_line(file, line, new_line)
    print_task_line(new_line)
