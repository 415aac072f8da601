"""tasknote domain models.

Pydantic and dataclass models for the task record and the form field
schema shared by the line codec and the form.
"""

from .fields import (
    FIELD_SCHEMA,
    DateField,
    FieldSpec,
    SelectField,
    StringField,
    metadata_fields,
)
from .task import PRIORITY_LEVELS, Priority, Task

__all__ = [
    "FIELD_SCHEMA",
    "PRIORITY_LEVELS",
    "DateField",
    "FieldSpec",
    "Priority",
    "SelectField",
    "StringField",
    "Task",
    "metadata_fields",
]
