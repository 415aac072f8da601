"""Local date token resolution.

Turns the loose tokens a user types into a date field (``today``,
``tomorrow``, ``fri``, ``2024-03-01``) into a canonical calendar date
without locale or network lookups.
"""

from __future__ import annotations

import logging
import re
from datetime import date, timedelta

logger = logging.getLogger("tasknote.date_resolver")

# date.weekday() convention: weeks start on Monday
WEEKDAYS: dict[str, int] = {
    "monday": 0,
    "mon": 0,
    "tuesday": 1,
    "tue": 1,
    "tues": 1,
    "wednesday": 2,
    "wed": 2,
    "thursday": 3,
    "thu": 3,
    "thur": 3,
    "thurs": 3,
    "friday": 4,
    "fri": 4,
    "saturday": 5,
    "sat": 5,
    "sunday": 6,
    "sun": 6,
}

ISO_DATE_PATTERN = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")


class InvalidDateError(ValueError):
    """Raised when a token is not a keyword, weekday or calendar date."""

    def __init__(self, token: str):
        super().__init__(f"Could not resolve date: {token!r}")
        self.token = token


class DateResolver:
    """Resolve free-form date tokens relative to a given day.

    The resolver holds no state, so one instance can be shared freely.
    """

    def resolve(self, token: str, today: date) -> date:
        """Resolve a date token.

        Args:
            token: Token typed by the user, matched case-insensitively
            today: Reference day for relative tokens

        Returns:
            The resolved date

        Raises:
            InvalidDateError: If the token cannot be resolved
        """
        text = token.strip().lower()

        if text == "today":
            return today
        if text in ("tomorrow", "tom"):
            return today + timedelta(days=1)
        if text == "yesterday":
            return today - timedelta(days=1)

        if text in WEEKDAYS:
            return self._next_weekday(WEEKDAYS[text], today)

        parsed = self._parse_iso(text)
        if parsed is not None:
            return parsed

        logger.debug("unresolvable date token: %r", token)
        raise InvalidDateError(token)

    def _next_weekday(self, weekday: int, today: date) -> date:
        """Next occurrence of *weekday* strictly after *today*."""
        days_ahead = (weekday - today.weekday()) % 7
        if days_ahead == 0:
            days_ahead = 7  # Next week if today
        return today + timedelta(days=days_ahead)

    def _parse_iso(self, text: str) -> date | None:
        match = ISO_DATE_PATTERN.match(text)
        if not match:
            return None
        year, month, day = (int(g) for g in match.groups())
        try:
            return date(year, month, day)
        except ValueError:
            # Well-formed but not a real day, e.g. 2024-02-30
            return None


def parse_date(token: str, today: date | None = None) -> str | None:
    """Convenience function returning the resolved date as YYYY-MM-DD.

    Args:
        token: Date token
        today: Reference day, defaults to the local current date

    Returns:
        ISO date string, or None if the token cannot be resolved

    Example:
        >>> parse_date("tomorrow", date(2024, 2, 28))
        '2024-02-29'
    """
    if today is None:
        today = date.today()
    try:
        return DateResolver().resolve(token, today).isoformat()
    except InvalidDateError:
        return None
