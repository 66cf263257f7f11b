"""Days-left calculation and expiry bucketing for inventory items."""

from collections.abc import Iterable
from datetime import UTC, date, datetime

from pantry_tracker.domain.inventory import (
    ExpirySummary,
    FoodItem,
    FoodItemWithDaysLeft,
)
from pantry_tracker.errors import InvalidInputError

EXPIRING_SOON_DAYS = 7
CRITICAL_DAYS = 3


def days_left(expiry_date: date | datetime, now: date | datetime | None = None) -> int:
    """Return whole calendar days from ``now`` until ``expiry_date``.

    Both values are reduced to calendar dates before subtracting, so the
    result is zero on the expiry day and negative once the item expired.
    """
    expiry_day = _as_date(expiry_date, "expiry_date")
    reference = datetime.now(tz=UTC) if now is None else now
    return (expiry_day - _as_date(reference, "now")).days


def with_days_left(
    items: Iterable[FoodItem], now: date | datetime | None = None
) -> list[FoodItemWithDaysLeft]:
    """Attach days left to each item, keeping input order."""
    reference = datetime.now(tz=UTC) if now is None else now
    return [
        FoodItemWithDaysLeft(
            item=item, days_left=days_left(item.expiry_date, reference)
        )
        for item in items
    ]


def expiring_soon(items: Iterable[FoodItemWithDaysLeft]) -> list[FoodItemWithDaysLeft]:
    """Return items expiring within a week, earliest first."""
    return _within(items, EXPIRING_SOON_DAYS)


def critical(items: Iterable[FoodItemWithDaysLeft]) -> list[FoodItemWithDaysLeft]:
    """Return items expiring within three days, earliest first."""
    return _within(items, CRITICAL_DAYS)


def expired(items: Iterable[FoodItemWithDaysLeft]) -> list[FoodItemWithDaysLeft]:
    """Return items past their expiry date, most recently expired first."""
    return sorted(
        (entry for entry in items if entry.days_left < 0),
        key=lambda entry: entry.days_left,
        reverse=True,
    )


def summarize(items: Iterable[FoodItemWithDaysLeft]) -> ExpirySummary:
    """Count items per expiry bucket for the dashboard."""
    entries = list(items)
    return ExpirySummary(
        total_items=len(entries),
        expiring_soon=len(expiring_soon(entries)),
        critical=len(critical(entries)),
        expired=len(expired(entries)),
    )


def _within(
    items: Iterable[FoodItemWithDaysLeft], max_days: int
) -> list[FoodItemWithDaysLeft]:
    # sorted() is stable, ties keep insertion order
    return sorted(
        (entry for entry in items if 0 <= entry.days_left <= max_days),
        key=lambda entry: entry.days_left,
    )


def _as_date(value: object, field: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidInputError(f"{field} must be a date, got {type(value).__name__}")
