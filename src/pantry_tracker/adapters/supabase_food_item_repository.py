"""Supabase implementation for user food items."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from pantry_tracker.domain.categories import Category
from pantry_tracker.domain.inventory import FoodItem
from pantry_tracker.services.inventory import FoodItemRepository


@dataclass
class SupabaseFoodItemRepository(FoodItemRepository):
    """Supabase-backed repository for food items."""

    client: Client

    def list_food_items(self, user_id: UUID) -> list[FoodItem]:
        """Return all food items for a user, oldest first."""
        response = (
            self.client.table("food_items")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_item(row) for row in response.data or []]

    def get_food_item(self, item_id: UUID) -> FoodItem | None:
        """Return a food item by id, if present."""
        response = (
            self.client.table("food_items")
            .select("*")
            .eq("id", str(item_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def create_food_item(self, user_id: UUID, payload: dict[str, object]) -> FoodItem:
        """Create a food item and return it."""
        response = (
            self.client.table("food_items")
            .insert({"user_id": str(user_id), **payload})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food item")
        return _parse_item(response.data[0])

    def delete_food_item(self, item_id: UUID) -> None:
        """Delete a food item."""
        self.client.table("food_items").delete().eq("id", str(item_id)).execute()


def _parse_item(row: dict[str, object]) -> FoodItem:
    """Parse a food item row into a domain model."""
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    return FoodItem(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        category=Category(row["category"]),
        manufacture_date=date.fromisoformat(str(row["manufacture_date"])),
        expiry_date=date.fromisoformat(str(row["expiry_date"])),
        price=float(row.get("price", 0.0)),
        image=row.get("image"),
        created_at=created_at,
    )
