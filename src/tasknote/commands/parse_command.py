"""Command 'parse' of tasknote"""

import typer

from tasknote.services.config_service import get_config_service
from tasknote.utils.task_line import TaskLineCodec
from tasknote.utils.ui.formatters import format_output, format_warning

from .decorators import command_wrapper

app = typer.Typer()


@app.command("parse")
@command_wrapper
def parse(
    line: str = typer.Argument(..., help="Task line to decode"),
    output: str = typer.Option(
        "pretty", "--output", "-o", help="Output format (pretty/json/yaml/table)"
    ),
    json_opt: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
) -> None:
    """Show the fields of a task line."""
    if json_opt:
        output = "json"

    config = get_config_service().config
    task = TaskLineCodec(config.tag_marker).decode(line)
    if output == "pretty" and task.is_empty():
        format_warning("No task found on this line")
        return
    format_output(task.model_dump(), output)
