"""Inventory management and expiry-derived views for a user's food items."""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from pantry_tracker.domain.categories import Category, normalize_category
from pantry_tracker.domain.inventory import (
    ExpirySummary,
    FoodItem,
    FoodItemWithDaysLeft,
    Notification,
)
from pantry_tracker.errors import (
    InvalidInputError,
    NotFoundError,
    PermissionDeniedError,
)
from pantry_tracker.services import expiry
from pantry_tracker.services.notifications import generate_notifications

_logger = logging.getLogger(__name__)


class FoodItemRepository(Protocol):
    """Persistence interface for food items."""

    def list_food_items(self, user_id: UUID) -> list[FoodItem]:
        """Return all food items for a user in insertion order."""

    def get_food_item(self, item_id: UUID) -> FoodItem | None:
        """Return a food item by id, if present."""

    def create_food_item(self, user_id: UUID, payload: dict[str, object]) -> FoodItem:
        """Create a food item and return it."""

    def delete_food_item(self, item_id: UUID) -> None:
        """Delete a food item."""


@dataclass
class InventoryService:
    """Application service for a user's food inventory."""

    repository: FoodItemRepository

    def items(self, user_id: UUID) -> list[FoodItem]:
        """Return the user's raw food items."""
        return self.repository.list_food_items(user_id)

    def list_items(
        self, user_id: UUID, now: date | datetime | None = None
    ) -> list[FoodItemWithDaysLeft]:
        """Return every item of the user with its days left."""
        return expiry.with_days_left(self.repository.list_food_items(user_id), now)

    def create_item(  # noqa: PLR0913
        self,
        user_id: UUID,
        *,
        name: str,
        category: str | Category,
        manufacture_date: date,
        expiry_date: date,
        price: float,
        image: str | None = None,
    ) -> FoodItem:
        """Validate and store a new food item."""
        cleaned_name = name.strip()
        if not cleaned_name:
            raise InvalidInputError("name must not be empty")
        if not isinstance(manufacture_date, date) or not isinstance(
            expiry_date, date
        ):
            raise InvalidInputError("manufacture and expiry dates must be dates")
        if manufacture_date > expiry_date:
            raise InvalidInputError("expiry date must not precede manufacture date")
        if not math.isfinite(price) or price < 0:
            raise InvalidInputError("price must be a finite, non-negative number")
        resolved = (
            category if isinstance(category, Category) else normalize_category(category)
        )
        item = self.repository.create_food_item(
            user_id,
            {
                "name": cleaned_name,
                "category": resolved.value,
                "manufacture_date": manufacture_date.isoformat(),
                "expiry_date": expiry_date.isoformat(),
                "price": float(price),
                "image": image,
            },
        )
        _logger.info(
            "Created food item: user_id=%s item_id=%s category=%s",
            user_id,
            item.id,
            resolved.value,
        )
        return item

    def delete_item(self, user_id: UUID, item_id: UUID) -> None:
        """Delete one of the user's items."""
        item = self.repository.get_food_item(item_id)
        if item is None:
            raise NotFoundError(f"food item {item_id} not found")
        if item.user_id != user_id:
            raise PermissionDeniedError(f"food item {item_id} belongs to another user")
        self.repository.delete_food_item(item_id)
        _logger.info("Deleted food item: user_id=%s item_id=%s", user_id, item_id)

    def expiring_items(
        self, user_id: UUID, now: date | datetime | None = None
    ) -> list[FoodItemWithDaysLeft]:
        """Return items expiring within a week, earliest first."""
        return expiry.expiring_soon(self.list_items(user_id, now))

    def summary(
        self, user_id: UUID, now: date | datetime | None = None
    ) -> ExpirySummary:
        """Return dashboard counts."""
        return expiry.summarize(self.list_items(user_id, now))

    def notifications(
        self, user_id: UUID, now: date | datetime | None = None
    ) -> list[Notification]:
        """Return expiry notifications for the user's items."""
        return generate_notifications(self.repository.list_food_items(user_id), now)

    def medicines(
        self, user_id: UUID, now: date | datetime | None = None
    ) -> list[FoodItemWithDaysLeft]:
        """Return the user's medicinal items with days left."""
        return [
            entry
            for entry in self.list_items(user_id, now)
            if not entry.item.category.is_food
        ]

    def suggestion_ingredients(self, user_id: UUID) -> list[str]:
        """Return names of non-medicinal items for AI suggestions."""
        return [
            item.name
            for item in self.repository.list_food_items(user_id)
            if item.category.is_food
        ]
