"""Line-level access to the markdown document that holds the tasks.

Line numbers are 1-based, like an editor cursor row.
"""

from __future__ import annotations

from pathlib import Path

from tasknote.utils.logger import get_logger


class DocumentError(IndexError):
    """Raised when a line number is outside the document."""


def _read_lines(path: Path) -> tuple[list[str], str, bool]:
    with open(path, encoding="utf-8", newline="") as f:
        text = f.read()
    newline = "\r\n" if "\r\n" in text else "\n"
    trailing = text.endswith(newline)
    body = text[: -len(newline)] if trailing else text
    lines = body.split(newline) if text else []
    return lines, newline, trailing


def _write_lines(path: Path, lines: list[str], newline: str, trailing: bool) -> None:
    text = newline.join(lines)
    if trailing and lines:
        text += newline
    path.write_text(text, encoding="utf-8", newline="")


def read_line(path: Path, lineno: int) -> str:
    """Return line *lineno* of the document."""
    lines, _, _ = _read_lines(path)
    if not 1 <= lineno <= len(lines):
        raise DocumentError(f"{path} has no line {lineno}")
    return lines[lineno - 1]


def insert_line(path: Path, after: int, text: str) -> int:
    """Insert *text* below line *after* (0 inserts at the top).

    A missing file is created.

    Returns:
        The line number of the inserted line
    """
    if path.exists():
        lines, newline, trailing = _read_lines(path)
    else:
        lines, newline, trailing = [], "\n", True

    if not 0 <= after <= len(lines):
        raise DocumentError(f"{path} has no line {after}")

    lines.insert(after, text)
    _write_lines(path, lines, newline, trailing)
    get_logger().info("inserted line %d in %s", after + 1, path)
    return after + 1


def replace_line(path: Path, lineno: int, text: str) -> str:
    """Replace line *lineno* with *text*.

    Returns:
        The previous content of the line
    """
    lines, newline, trailing = _read_lines(path)
    if not 1 <= lineno <= len(lines):
        raise DocumentError(f"{path} has no line {lineno}")

    previous = lines[lineno - 1]
    lines[lineno - 1] = text
    _write_lines(path, lines, newline, trailing)
    get_logger().info("replaced line %d in %s", lineno, path)
    return previous
