"""Pydantic request and response models for the HTTP API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pantry_tracker.domain.inventory import (
    ExpirySummary,
    FoodItem,
    FoodItemWithDaysLeft,
    Notification,
)
from pantry_tracker.domain.models import UserRecord
from pantry_tracker.domain.recipes import RecipeIngredient, RecipeWithMatch


class ApiModel(BaseModel):
    """Base model exposing camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserCreate(ApiModel):
    """Registration payload."""

    username: str = Field(min_length=1, max_length=64)
    name: str | None = None


class UserOut(ApiModel):
    """Public view of a user."""

    id: UUID
    username: str
    name: str | None = None

    @classmethod
    def from_domain(cls, user: UserRecord) -> "UserOut":
        return cls(id=user.id, username=user.username, name=user.name)


class FoodItemCreate(ApiModel):
    """Payload for logging a food item; category accepts free text."""

    name: str = Field(min_length=1)
    category: str
    manufacture_date: date
    expiry_date: date
    price: float
    image: str | None = None


class FoodItemOut(ApiModel):
    """Stored food item."""

    id: UUID
    user_id: UUID
    name: str
    category: str
    manufacture_date: date
    expiry_date: date
    price: float
    image: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_domain(cls, item: FoodItem) -> "FoodItemOut":
        return cls(
            id=item.id,
            user_id=item.user_id,
            name=item.name,
            category=item.category.value,
            manufacture_date=item.manufacture_date,
            expiry_date=item.expiry_date,
            price=item.price,
            image=item.image,
            created_at=item.created_at,
        )


class FoodItemWithDaysLeftOut(FoodItemOut):
    """Food item with days until expiry."""

    days_left: int

    @classmethod
    def from_entry(cls, entry: FoodItemWithDaysLeft) -> "FoodItemWithDaysLeftOut":
        base = FoodItemOut.from_domain(entry.item)
        return cls(**base.model_dump(), days_left=entry.days_left)


class SummaryOut(ApiModel):
    """Dashboard counts."""

    total_items: int
    expiring_soon: int
    critical: int
    expired: int

    @classmethod
    def from_domain(cls, summary: ExpirySummary) -> "SummaryOut":
        return cls(
            total_items=summary.total_items,
            expiring_soon=summary.expiring_soon,
            critical=summary.critical,
            expired=summary.expired,
        )


class NotificationOut(ApiModel):
    """Expiry notification."""

    id: int
    item_id: UUID
    message: str
    type: str
    created_at: datetime

    @classmethod
    def from_domain(cls, notification: Notification) -> "NotificationOut":
        return cls(
            id=notification.id,
            item_id=notification.item_id,
            message=notification.message,
            type=notification.type.value,
            created_at=notification.created_at,
        )


class IngredientOut(ApiModel):
    """Recipe ingredient line."""

    recipe_id: int
    name: str
    amount: str | None = None
    category: str | None = None

    @classmethod
    def from_domain(cls, ingredient: RecipeIngredient) -> "IngredientOut":
        return cls(
            recipe_id=ingredient.recipe_id,
            name=ingredient.name,
            amount=ingredient.amount,
            category=ingredient.category.value if ingredient.category else None,
        )


class RecipeWithMatchOut(ApiModel):
    """Catalog recipe ranked against the inventory."""

    id: int
    name: str
    description: str | None = None
    image_url: str | None = None
    instructions: str | None = None
    ingredients: list[IngredientOut]
    match_percentage: int
    missing_ingredient_count: int

    @classmethod
    def from_domain(cls, match: RecipeWithMatch) -> "RecipeWithMatchOut":
        recipe = match.recipe
        return cls(
            id=recipe.id,
            name=recipe.name,
            description=recipe.description,
            image_url=recipe.image_url,
            instructions=recipe.instructions,
            ingredients=[IngredientOut.from_domain(i) for i in recipe.ingredients],
            match_percentage=match.match_percentage,
            missing_ingredient_count=match.missing_ingredient_count,
        )
