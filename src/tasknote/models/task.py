"""Task data model."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

Priority = Literal["lowest", "low", "medium", "high", "highest"]

PRIORITY_LEVELS: tuple[str, ...] = ("lowest", "low", "medium", "high", "highest")


class Task(BaseModel):
    """A task as written on one annotated line.

    Attributes:
        description: Task text following the tag marker
        priority: Priority level; ``None`` means no priority
        repeat: Free text recurrence (e.g. "every week")
        created: Creation date (YYYY-MM-DD)
        start: Start date (YYYY-MM-DD)
        scheduled: Scheduled date (YYYY-MM-DD)
        due: Due date (YYYY-MM-DD)
        extra: Metadata keys the schema does not model, in first-seen order
    """

    description: str | None = None
    priority: Priority | None = None
    repeat: str | None = None
    created: str | None = None
    start: str | None = None
    scheduled: str | None = None
    due: str | None = None
    extra: dict[str, str] = Field(default_factory=dict)

    @field_validator("description", "repeat", "created", "start", "scheduled", "due")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        """Treat empty and whitespace-only strings as unset."""
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator("priority", mode="before")
    @classmethod
    def normalize_priority(cls, v):
        """Accept any casing; ``none`` and blank mean no priority."""
        if v is None:
            return None
        if isinstance(v, str):
            v = v.strip().lower()
            if v in ("", "none"):
                return None
        return v

    def is_empty(self) -> bool:
        """True when no field is set."""
        return not any(self.model_dump(exclude={"extra"}).values()) and not self.extra
