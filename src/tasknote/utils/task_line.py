"""Encoding and decoding of annotated task lines.

A task line looks like::

    - [ ] #task Buy milk  [priority:: high]  [due:: 2024-05-01]

The checkbox prefix is followed by the tag marker and the description,
then one ``[key:: value]`` token per set metadata field, in schema order.
Segments are separated by two spaces.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass

from tasknote.models.fields import FIELD_SCHEMA, FieldSpec, metadata_fields
from tasknote.models.task import PRIORITY_LEVELS, Task

logger = logging.getLogger("tasknote.task_line")

CHECKBOX_PREFIX = "- [ ] "
SEGMENT_SEPARATOR = "  "
DEFAULT_TAG_MARKER = "#task"

_DESCRIPTION_TRAILING = " \t\r\n["

# Leading "<indent>- [<symbol>]" of a markdown checkbox item
CHECKBOX_PATTERN = re.compile(r"^(\s*)- \[(.)\]")


@dataclass(frozen=True)
class MetadataToken:
    """One ``[key:: value]`` token found in a line.

    ``start`` and ``end`` are slice offsets of the whole bracketed token.
    """

    key: str
    value: str
    start: int
    end: int


def _is_key_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _key_end(text: str, pos: int) -> int:
    """Index just past the run of key characters starting at *pos*."""
    end = pos
    while end < len(text) and _is_key_char(text[end]):
        end += 1
    return end


def _opens_token(text: str, open_idx: int) -> int:
    """If ``[`` at *open_idx* starts ``[<key>::``, return the key end, else -1."""
    key_end = _key_end(text, open_idx + 1)
    if key_end == open_idx + 1 or not text.startswith("::", key_end):
        return -1
    return key_end


def find_metadata_start(text: str) -> int:
    """Offset of the first ``[<key>::`` opening in *text*, or -1."""
    pos = text.find("[")
    while pos != -1:
        if _opens_token(text, pos) != -1:
            return pos
        pos = text.find("[", pos + 1)
    return -1


def iter_metadata_tokens(text: str) -> Iterator[MetadataToken]:
    """Scan *text* left to right for non-overlapping ``[key:: value]`` tokens.

    The value is everything up to the next ``]``. Openings without a key,
    without ``::`` or without a closing bracket are skipped.
    """
    pos = 0
    while True:
        open_idx = text.find("[", pos)
        if open_idx == -1:
            return
        key_end = _opens_token(text, open_idx)
        if key_end == -1:
            pos = open_idx + 1
            continue
        close_idx = text.find("]", key_end + 2)
        if close_idx == -1:
            # Nothing after this point can be closed either
            return
        yield MetadataToken(
            key=text[open_idx + 1 : key_end].lower(),
            value=text[key_end + 2 : close_idx].strip(),
            start=open_idx,
            end=close_idx + 1,
        )
        pos = close_idx + 1


def format_token(key: str, value: str) -> str:
    """Format a single metadata token."""
    return f"[{key}:: {value}]"


def _single_line(text: str) -> str:
    return text.replace("\r", " ").replace("\n", " ")


def _strip_separators(text: str) -> str:
    while "::" in text:
        text = text.replace("::", ":")
    return text


def clean_value(value: str) -> str:
    """Make a metadata value safe to place inside a token."""
    return _strip_separators(_single_line(value).replace("]", "")).strip()


def _defuse_openings(text: str) -> str:
    """Drop one colon from every ``[<key>::`` so it cannot open a token."""
    pos = find_metadata_start(text)
    while pos != -1:
        key_end = _opens_token(text, pos)
        text = text[:key_end] + text[key_end + 1 :]
        pos = find_metadata_start(text)
    return text


def clean_description(description: str) -> str:
    """Make a description safe to place before the metadata tokens.

    Other ``::`` sequences (``std::vector``) are left alone.
    """
    text = _defuse_openings(_single_line(description)).strip()
    return text.rstrip(_DESCRIPTION_TRAILING)


def _clean_key(key: str) -> str:
    return "".join(ch for ch in key.lower() if _is_key_char(ch))


class TaskLineCodec:
    """Convert between :class:`Task` records and task lines.

    Args:
        tag_marker: Marker identifying task lines (e.g. ``#task``)
        schema: Ordered field schema; controls metadata emission order
    """

    def __init__(
        self,
        tag_marker: str = DEFAULT_TAG_MARKER,
        schema: tuple[FieldSpec, ...] = FIELD_SCHEMA,
    ):
        if not tag_marker or not tag_marker.strip():
            raise ValueError("tag_marker cannot be empty")
        self.tag_marker = tag_marker
        self.schema = schema
        self._metadata_keys = tuple(f.name for f in metadata_fields(schema))

    def encode(self, task: Task) -> str:
        """Build the single-line representation of *task*.

        The tag marker is written whenever anything is set, also when the
        description is empty (``- [ ] #task  [priority:: high]``), so the
        line is still recognised as a task when decoded. A task with no
        fields at all encodes to the bare ``- [ ] `` prefix.
        """
        segments: list[str] = []

        for key in self._metadata_keys:
            value = getattr(task, key, None)
            if not value:
                continue
            value = clean_value(str(value))
            if value:
                segments.append(format_token(key, value))

        for raw_key, raw_value in task.extra.items():
            key = _clean_key(raw_key)
            value = clean_value(raw_value)
            if not key or not value or key in self._metadata_keys:
                continue
            segments.append(format_token(key, value))

        description = clean_description(task.description or "")
        if description:
            segments.insert(0, f"{self.tag_marker} {description}")
        elif segments:
            segments.insert(0, self.tag_marker)

        return CHECKBOX_PREFIX + SEGMENT_SEPARATOR.join(segments)

    def decode(self, line: str) -> Task:
        """Parse a task line; text without the tag marker yields an empty Task."""
        checkbox = CHECKBOX_PATTERN.match(line)
        marker_idx = line.find(self.tag_marker, checkbox.end() if checkbox else 0)
        if marker_idx == -1:
            return Task()

        task_part = line[marker_idx + len(self.tag_marker) :].lstrip()

        meta_idx = find_metadata_start(task_part)
        if meta_idx == -1:
            description, blob = task_part, ""
        else:
            description, blob = task_part[:meta_idx], task_part[meta_idx:]

        fields: dict[str, str] = {}
        extra: dict[str, str] = {}
        description = description.rstrip(_DESCRIPTION_TRAILING)
        if description:
            fields["description"] = description

        for token in iter_metadata_tokens(blob):
            if not token.value:
                continue
            if token.key in self._metadata_keys:
                if token.key == "priority" and not self._valid_priority(token.value):
                    logger.debug("ignoring unknown priority %r", token.value)
                    continue
                fields[token.key] = token.value
            else:
                extra[token.key] = token.value

        return Task(**fields, extra=extra)

    def _valid_priority(self, value: str) -> bool:
        return value.lower() in PRIORITY_LEVELS or value.lower() == "none"


def encode_task(task: Task, tag_marker: str = DEFAULT_TAG_MARKER) -> str:
    """Convenience function to encode a task with the default schema."""
    return TaskLineCodec(tag_marker).encode(task)


def decode_task(line: str, tag_marker: str = DEFAULT_TAG_MARKER) -> Task:
    """Convenience function to decode a task line with the default schema."""
    return TaskLineCodec(tag_marker).decode(line)
