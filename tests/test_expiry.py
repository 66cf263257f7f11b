"""Tests for days-left calculation and expiry bucketing."""

from datetime import UTC, date, datetime

import pytest

from pantry_tracker.domain.inventory import FoodItemWithDaysLeft
from pantry_tracker.errors import InvalidInputError
from pantry_tracker.services import expiry
from tests.conftest import make_food_item

REFERENCE = date(2024, 1, 10)


def _entries(*expiry_dates: date) -> list[FoodItemWithDaysLeft]:
    items = [
        make_food_item(name=f"item-{index}", expiry_date=expiry_date)
        for index, expiry_date in enumerate(expiry_dates)
    ]
    return expiry.with_days_left(items, REFERENCE)


def test_days_left_counts_calendar_days() -> None:
    assert expiry.days_left(date(2024, 1, 12), REFERENCE) == 2
    assert expiry.days_left(date(2024, 1, 17), REFERENCE) == 7
    assert expiry.days_left(date(2024, 1, 10), REFERENCE) == 0
    assert expiry.days_left(date(2024, 1, 1), REFERENCE) == -9


def test_days_left_ignores_time_of_day() -> None:
    late_evening = datetime(2024, 1, 10, 23, 59, tzinfo=UTC)
    early_morning = datetime(2024, 1, 10, 0, 1, tzinfo=UTC)

    assert expiry.days_left(date(2024, 1, 12), late_evening) == 2
    assert expiry.days_left(date(2024, 1, 12), early_morning) == 2


def test_days_left_is_deterministic() -> None:
    first = expiry.days_left(date(2024, 3, 1), REFERENCE)
    second = expiry.days_left(date(2024, 3, 1), REFERENCE)

    assert first == second == 51


def test_days_left_rejects_non_dates() -> None:
    with pytest.raises(InvalidInputError):
        expiry.days_left("2024-01-12", REFERENCE)  # type: ignore[arg-type]
    with pytest.raises(InvalidInputError):
        expiry.days_left(date(2024, 1, 12), "today")  # type: ignore[arg-type]


def test_with_days_left_keeps_input_order() -> None:
    entries = _entries(date(2024, 1, 20), date(2024, 1, 11))

    assert [entry.item.name for entry in entries] == ["item-0", "item-1"]
    assert [entry.days_left for entry in entries] == [10, 1]


def test_expiring_soon_is_sorted_and_excludes_expired() -> None:
    entries = _entries(
        date(2024, 1, 17),
        date(2024, 1, 1),
        date(2024, 1, 10),
        date(2024, 1, 12),
        date(2024, 1, 18),
    )

    soon = expiry.expiring_soon(entries)

    assert [entry.days_left for entry in soon] == [0, 2, 7]


def test_expiring_soon_ties_keep_insertion_order() -> None:
    entries = _entries(date(2024, 1, 13), date(2024, 1, 11), date(2024, 1, 13))

    soon = expiry.expiring_soon(entries)

    assert [entry.item.name for entry in soon] == ["item-1", "item-0", "item-2"]


def test_critical_is_subset_of_expiring_soon() -> None:
    entries = _entries(
        date(2024, 1, 10), date(2024, 1, 13), date(2024, 1, 14), date(2024, 1, 9)
    )

    critical = expiry.critical(entries)
    soon = expiry.expiring_soon(entries)

    assert [entry.days_left for entry in critical] == [0, 3]
    assert all(entry in soon for entry in critical)


def test_expired_bucket_holds_past_items_only() -> None:
    entries = _entries(date(2024, 1, 1), date(2024, 1, 9), date(2024, 1, 10))

    past = expiry.expired(entries)

    assert [entry.days_left for entry in past] == [-1, -9]


def test_summarize_counts_buckets() -> None:
    entries = _entries(
        date(2024, 1, 12), date(2024, 1, 17), date(2024, 1, 1), date(2024, 2, 1)
    )

    summary = expiry.summarize(entries)

    assert summary.total_items == 4
    assert summary.expiring_soon == 2
    assert summary.critical == 1
    assert summary.expired == 1


def test_empty_inventory_yields_empty_views() -> None:
    assert expiry.expiring_soon([]) == []
    assert expiry.critical([]) == []
    assert expiry.summarize([]).total_items == 0
