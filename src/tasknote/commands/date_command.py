"""Command 'date' of tasknote"""

from datetime import date

import typer

from tasknote.utils.date_resolver import DateResolver, InvalidDateError
from tasknote.utils.exit_codes import ERROR_INVALID_ARGS

from .decorators import AppError, command_wrapper

app = typer.Typer()


@app.command("date")
@command_wrapper
def resolve_date(
    token: str = typer.Argument(..., help="today, tomorrow, fri, 2024-03-01, ..."),
    today: str | None = typer.Option(
        None, "--today", help="Reference date (YYYY-MM-DD), defaults to now"
    ),
) -> None:
    """Print the YYYY-MM-DD date a token resolves to."""
    resolver = DateResolver()
    reference = date.today()
    try:
        if today is not None:
            reference = resolver.resolve(today, date.today())
        print(resolver.resolve(token, reference).isoformat())
    except InvalidDateError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e
