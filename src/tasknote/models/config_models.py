"""Configuration models for tasknote."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class ToggleConfig(BaseModel):
    """Status toggle configuration."""

    done_symbol: str = Field(default="x")
    todo_symbol: str = Field(default=" ")
    completion_key: str = Field(default="completion")

    @field_validator("done_symbol", "todo_symbol")
    @classmethod
    def validate_symbol(cls, v: str) -> str:
        """A checkbox symbol is exactly one character other than a bracket."""
        if len(v) != 1 or v in "[]":
            raise ValueError("symbol must be a single non-bracket character")
        return v

    @field_validator("completion_key")
    @classmethod
    def validate_completion_key(cls, v: str) -> str:
        v = v.strip().lower()
        if not v or not all(ch.isalnum() or ch == "_" for ch in v):
            raise ValueError("completion_key must be a word (letters, digits, _)")
        return v


class AppConfig(BaseModel):
    """Main tasknote configuration"""

    tag_marker: str = Field(
        default="#task", description="Marker that identifies a task line"
    )
    repeat_default: str | None = Field(
        default=None, description="Repeat value written when none is given"
    )
    toggle: ToggleConfig = Field(default_factory=ToggleConfig)

    @field_validator("tag_marker")
    @classmethod
    def validate_tag_marker(cls, v: str) -> str:
        """Tag marker must be a single token that cannot look like metadata."""
        v = v.strip()
        if not v:
            raise ValueError("tag_marker cannot be empty")
        if any(ch.isspace() for ch in v):
            raise ValueError("tag_marker cannot contain whitespace")
        if "[" in v or "]" in v or "::" in v:
            raise ValueError("tag_marker cannot contain '[', ']' or '::'")
        return v

    @field_validator("repeat_default")
    @classmethod
    def blank_repeat_default(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None
