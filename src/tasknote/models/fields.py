"""Field schema for the task form.

Each entry is one of three field kinds. The order of ``FIELD_SCHEMA`` is
both the form layout and the order metadata tokens are written to a line.
"""

from __future__ import annotations

from dataclasses import dataclass

PRIORITY_OPTIONS: tuple[str, ...] = (
    "none",
    "lowest",
    "low",
    "medium",
    "high",
    "highest",
)


@dataclass(frozen=True)
class StringField:
    """Free text field."""

    name: str


@dataclass(frozen=True)
class SelectField:
    """Field restricted to a fixed list of options."""

    name: str
    options: tuple[str, ...]


@dataclass(frozen=True)
class DateField:
    """Field holding a canonical YYYY-MM-DD date."""

    name: str


FieldSpec = StringField | SelectField | DateField

FIELD_SCHEMA: tuple[FieldSpec, ...] = (
    StringField("description"),
    SelectField("priority", PRIORITY_OPTIONS),
    StringField("repeat"),
    DateField("created"),
    DateField("start"),
    DateField("scheduled"),
    DateField("due"),
)


def metadata_fields(schema: tuple[FieldSpec, ...]) -> tuple[FieldSpec, ...]:
    """Fields written as [key:: value] tokens (everything but the description)."""
    return tuple(f for f in schema if f.name != "description")


def get_field(name: str, schema: tuple[FieldSpec, ...] = FIELD_SCHEMA) -> FieldSpec:
    """Look up a field by name.

    Raises:
        KeyError: If the schema has no field with that name
    """
    for field in schema:
        if field.name == name:
            return field
    raise KeyError(name)
