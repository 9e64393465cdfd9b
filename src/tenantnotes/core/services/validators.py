"""Input checks shared by the services."""

from typing import Optional


def is_blank(value: Optional[str]) -> bool:
    """Missing, empty and whitespace-only values all count as not provided."""
    return value is None or not value.strip()
