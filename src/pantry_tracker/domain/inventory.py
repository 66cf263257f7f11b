"""Domain models for the food inventory and expiry views."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from uuid import UUID

from pantry_tracker.domain.categories import Category


@dataclass(frozen=True)
class FoodItem:
    """A food item logged by a user."""

    id: UUID
    user_id: UUID
    name: str
    category: Category
    manufacture_date: date
    expiry_date: date
    price: float
    image: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class FoodItemWithDaysLeft:
    """Food item paired with its days until expiry."""

    item: FoodItem
    days_left: int


@dataclass(frozen=True)
class ExpirySummary:
    """Dashboard counts for a user's inventory."""

    total_items: int
    expiring_soon: int
    critical: int
    expired: int


class NotificationType(str, Enum):
    """Urgency level of an expiry notification."""

    THREE_DAYS = "threeDays"
    WEEK = "week"


@dataclass(frozen=True)
class Notification:
    """Expiry notification derived from an inventory item."""

    id: int
    item_id: UUID
    message: str
    type: NotificationType
    created_at: datetime
