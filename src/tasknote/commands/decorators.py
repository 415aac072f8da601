"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from tasknote.utils.exit_codes import ERROR_GENERAL, get_exit_code_name
from tasknote.utils.logger import get_logger
from tasknote.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(func: Callable):
    """Log command timing and turn errors into formatted exits."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except AppError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) %s - %s",
                cmd,
                elapsed,
                get_exit_code_name(e.exit_code),
                str(e),
            )
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except (typer.Exit, typer.Abort):
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            # Generic fallback for unexpected crashes
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
