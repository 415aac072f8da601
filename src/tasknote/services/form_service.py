"""Form model behind task creation and editing.

The form keeps one display value per schema field, accepts raw user input
field by field and turns the result into a task line on submit. Input
handling depends on the field kind: free text is stored as typed, select
fields only accept one of their options and date fields go through the
DateResolver.
"""

from __future__ import annotations

from datetime import date

from tasknote.models.fields import (
    FIELD_SCHEMA,
    DateField,
    FieldSpec,
    SelectField,
    StringField,
    get_field,
)
from tasknote.models.task import Task
from tasknote.utils.date_resolver import DateResolver, InvalidDateError
from tasknote.utils.logger import get_logger
from tasknote.utils.task_line import TaskLineCodec


class TaskForm:
    """Field values for one task being created or edited."""

    def __init__(
        self,
        schema: tuple[FieldSpec, ...] = FIELD_SCHEMA,
        today: date | None = None,
        resolver: DateResolver | None = None,
        task: Task | None = None,
        repeat_default: str | None = None,
    ):
        self.schema = schema
        self.today = today or date.today()
        self.resolver = resolver or DateResolver()
        self.repeat_default = repeat_default
        self.values: dict[str, str] = {field.name: "" for field in schema}
        self.extra: dict[str, str] = {}

        if task is not None:
            self._load(task)

    @classmethod
    def from_line(cls, line: str, tag_marker: str, **kwargs) -> TaskForm:
        """Build a form pre-populated from an existing task line."""
        schema = kwargs.get("schema", FIELD_SCHEMA)
        task = TaskLineCodec(tag_marker, schema).decode(line)
        return cls(task=task, **kwargs)

    def _load(self, task: Task) -> None:
        for field in self.schema:
            value = getattr(task, field.name, None)
            self.values[field.name] = value or ""
        self.extra = dict(task.extra)

    def set_value(self, name: str, raw: str) -> bool:
        """Apply user input to a field.

        Args:
            name: Field name
            raw: Raw text entered by the user

        Returns:
            True if the field was updated, False if the input was rejected
            (the previous value is kept)

        Raises:
            KeyError: If the schema has no such field
        """
        field = get_field(name, self.schema)
        raw = raw.strip()

        match field:
            case StringField():
                self.values[name] = raw
            case SelectField(options=options):
                choice = raw.lower()
                if choice and choice not in options:
                    return False
                self.values[name] = "" if choice in ("", "none") else choice
            case DateField():
                if not raw:
                    self.values[name] = ""
                    return True
                try:
                    resolved = self.resolver.resolve(raw, self.today)
                except InvalidDateError as e:
                    get_logger().info("%s: %s", name, e)
                    return False
                self.values[name] = resolved.isoformat()
        return True

    def rows(self) -> list[str]:
        """``name: value`` lines in schema order."""
        return [f"{field.name}: {self.values[field.name]}" for field in self.schema]

    def to_task(self) -> Task:
        """Build the task from the current field values."""
        data = {name: value for name, value in self.values.items() if value}
        if self.repeat_default and not data.get("repeat"):
            data["repeat"] = self.repeat_default
        return Task(**data, extra=self.extra)

    def submit(self, tag_marker: str) -> str:
        """Encode the form into a task line."""
        return TaskLineCodec(tag_marker, self.schema).encode(self.to_task())
