"""Checkbox status rewriting for task lines."""

from __future__ import annotations

import re
from datetime import date

from tasknote.models.config_models import ToggleConfig
from tasknote.utils.task_line import (
    CHECKBOX_PATTERN,
    format_token,
    iter_metadata_tokens,
)

_SPACE_RUN = re.compile(r" {2,}")
_AFTER_BRACKET = re.compile(r"\][ \t]*(?=\S)")
_TODAY = re.compile(r"\btoday\b", re.IGNORECASE)


def normalize_spacing(line: str) -> str:
    """Collapse space runs and put exactly one space after each ``]``.

    Tabs directly after a ``]`` become that single space. Leading
    indentation is kept exactly as it was.
    """
    body = line.lstrip()
    indent = line[: len(line) - len(body)]
    body = _AFTER_BRACKET.sub("] ", body)
    body = _SPACE_RUN.sub(" ", body).rstrip()
    return indent + body


def remove_tokens(text: str, key: str) -> str:
    """Drop every ``[key:: ...]`` token whose key matches *key*."""
    key = key.lower()
    kept: list[str] = []
    pos = 0
    for token in iter_metadata_tokens(text):
        if token.key == key:
            kept.append(text[pos : token.start])
            pos = token.end
    kept.append(text[pos:])
    return "".join(kept)


def toggle_status(
    line: str,
    symbol: str,
    token: str | None = None,
    today: date | None = None,
) -> str | None:
    """Set the checkbox symbol of *line*, optionally appending a token.

    Args:
        line: A ``<indent>- [<symbol>]<rest>`` line
        symbol: New status symbol (e.g. ``x``)
        token: Metadata token to append; ``today`` inside it becomes the date
        today: Reference day, defaults to the local current date

    Returns:
        The rewritten line, or None if *line* is not a checkbox item
    """
    match = CHECKBOX_PATTERN.match(line)
    if not match:
        return None

    indent = match.group(1)
    rest = line[match.end() :]

    if token:
        parsed = next(iter_metadata_tokens(token), None)
        if parsed is not None:
            if today is None:
                today = date.today()
            # Only the value is dated; a key may itself be "today"
            value = _TODAY.sub(today.isoformat(), parsed.value)
            token = format_token(parsed.key, value)
            rest = remove_tokens(rest, parsed.key)
        rest = f"{rest} {token}"

    return normalize_spacing(f"{indent}- [{symbol}]{rest}")


def next_symbol(current: str, config: ToggleConfig) -> str:
    """Cycle between the open and done symbols."""
    if current == config.todo_symbol:
        return config.done_symbol
    return config.todo_symbol


def completion_token(config: ToggleConfig) -> str:
    """Token appended when a task is checked off."""
    return f"[{config.completion_key}:: today]"
