"""
Field formatting shared by the PDF renderer and the table exporter.

Both artifacts must agree on every shared field, so every text value they
print for a submission is produced here.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

NO_DESCRIPTION = "No description provided"
NOT_AVAILABLE = "N/A"
COST_PLACEHOLDER = "???"
MAX_SCORE = 6
MAINTENANCE_THRESHOLD = 3


def format_address(street_name: str, apartment_number: str) -> str:
    return " ".join(part.strip() for part in (street_name, apartment_number) if part and part.strip())


def format_date(value: date, pattern: str = "{month}/{day}/{year}") -> str:
    """
    Render a date with unpadded day/month fields, like a browser's
    toLocaleDateString(). The pattern uses str.format names day, month, year.
    """
    return pattern.format(day=value.day, month=value.month, year=value.year)


def format_score(value: int) -> str:
    return f"{value}/{MAX_SCORE}"


def maintenance_needed(scores: Iterable[int]) -> bool:
    return any(score > MAINTENANCE_THRESHOLD for score in scores)


def format_yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def format_description(description: Optional[str]) -> str:
    if description is None or not description.strip():
        return NO_DESCRIPTION
    return description


def has_location(latitude: Optional[float], longitude: Optional[float]) -> bool:
    # 0.0 is a real coordinate
    return latitude is not None and longitude is not None


def format_coordinate(value: Optional[float]) -> str:
    if value is None:
        return NOT_AVAILABLE
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def split_data_uri(photo_url: Optional[str]) -> Optional[str]:
    """Return the payload after the first comma of a data URI, or None if there is none."""
    if not photo_url or "," not in photo_url:
        return None
    return photo_url.split(",", 1)[1]


__all__ = [
    "NO_DESCRIPTION",
    "NOT_AVAILABLE",
    "COST_PLACEHOLDER",
    "format_address",
    "format_date",
    "format_score",
    "maintenance_needed",
    "format_yes_no",
    "format_description",
    "has_location",
    "format_coordinate",
    "split_data_uri",
]
