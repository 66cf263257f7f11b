"""Supabase repository for the recipe catalog."""

from dataclasses import dataclass

from supabase import Client

from pantry_tracker.domain.categories import Category
from pantry_tracker.domain.recipes import Recipe, RecipeIngredient
from pantry_tracker.services.recipes import RecipeRepository


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase implementation for catalog queries."""

    client: Client

    def list_recipes(self) -> list[Recipe]:
        """Return all recipes ordered by id."""
        response = (
            self.client.table("recipes")
            .select("id, name, description, image_url, instructions")
            .order("id", desc=False)
            .execute()
        )
        return [
            Recipe(
                id=int(row["id"]),
                name=str(row.get("name", "")),
                description=row.get("description"),
                image_url=row.get("image_url"),
                instructions=row.get("instructions"),
            )
            for row in response.data or []
        ]

    def list_ingredients(self, recipe_id: int) -> list[RecipeIngredient]:
        """Return ingredient lines for a recipe."""
        response = (
            self.client.table("recipe_ingredients")
            .select("recipe_id, name, amount, category")
            .eq("recipe_id", recipe_id)
            .order("id", desc=False)
            .execute()
        )
        return [
            RecipeIngredient(
                recipe_id=int(row["recipe_id"]),
                name=str(row.get("name", "")),
                amount=row.get("amount"),
                category=_parse_category(row.get("category")),
            )
            for row in response.data or []
        ]


def _parse_category(raw: object) -> Category | None:
    # Uncategorized ingredients never match the inventory.
    if not raw:
        return None
    return Category(str(raw))
