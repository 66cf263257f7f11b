"""Expiry notification generation."""

from collections.abc import Iterable
from datetime import UTC, date, datetime, time

from pantry_tracker.domain.inventory import (
    FoodItem,
    Notification,
    NotificationType,
)
from pantry_tracker.errors import InvalidInputError
from pantry_tracker.services.expiry import CRITICAL_DAYS, EXPIRING_SOON_DAYS, days_left


def generate_notifications(
    items: Iterable[FoodItem], now: date | datetime | None = None
) -> list[Notification]:
    """Build one notification per item inside the seven day window.

    Ids are sequential within a single call and carry no meaning across
    calls. Items already expired or further than a week out are skipped.
    """
    reference = datetime.now(tz=UTC) if now is None else now
    created_at = _as_datetime(reference)
    notifications: list[Notification] = []
    for item in items:
        remaining = days_left(item.expiry_date, reference)
        notification_type = notification_type_for(remaining)
        if notification_type is None:
            continue
        notifications.append(
            Notification(
                id=len(notifications) + 1,
                item_id=item.id,
                message=f"{item.name} expires in {remaining} days",
                type=notification_type,
                created_at=created_at,
            )
        )
    return notifications


def notification_type_for(remaining_days: int) -> NotificationType | None:
    """Return the notification type for a days-left value, if any."""
    if 0 <= remaining_days <= CRITICAL_DAYS:
        return NotificationType.THREE_DAYS
    if CRITICAL_DAYS < remaining_days <= EXPIRING_SOON_DAYS:
        return NotificationType.WEEK
    return None


def _as_datetime(value: object) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=UTC)
    raise InvalidInputError(f"now must be a date, got {type(value).__name__}")
