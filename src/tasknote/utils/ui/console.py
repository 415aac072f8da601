"""Console utilities for tasknote."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Get a Rich Console instance for consistent output formatting."""
    return Console(highlight=highlight)


def print_task_line(line: str) -> None:
    """Print a task line exactly as it is stored in the document.

    Rich markup, highlighting and wrapping are all off so ``[key:: value]``
    tokens and long lines come out unchanged.
    """
    get_console(highlight=False).print(line, markup=False, soft_wrap=True)
