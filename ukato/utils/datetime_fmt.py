"""Date formatting utilities for note templates."""

from __future__ import annotations

from datetime import date

# Creation dates are rendered as plain local calendar dates: "YYYY-MM-DD".
_CREATION_DATE_FORMAT = "%Y-%m-%d"


def today_local() -> date:
    """Return the current local date."""

    return date.today()


def to_creation_date(value: date | str) -> str:
    """Format ``value`` for the creation date placeholder.

    Strings are assumed to be pre-formatted and are returned unchanged.
    """

    if isinstance(value, str):
        return value
    return value.strftime(_CREATION_DATE_FORMAT)
