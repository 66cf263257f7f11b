"""Recipe catalog access and inventory-based match ranking."""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Protocol

from pantry_tracker.domain.categories import Category
from pantry_tracker.domain.inventory import FoodItem
from pantry_tracker.domain.recipes import Recipe, RecipeIngredient, RecipeWithMatch


class RecipeRepository(Protocol):
    """Read interface for the static recipe catalog."""

    def list_recipes(self) -> list[Recipe]:
        """Return all catalog recipes, without ingredients."""

    def list_ingredients(self, recipe_id: int) -> list[RecipeIngredient]:
        """Return the ingredient lines of a recipe."""


def inventory_categories(items: Iterable[FoodItem]) -> frozenset[Category]:
    """Return the food categories present in an inventory."""
    return frozenset(item.category for item in items if item.category.is_food)


def match_recipe(recipe: Recipe, categories: frozenset[Category]) -> RecipeWithMatch:
    """Score a recipe by the share of ingredient categories on hand."""
    total = len(recipe.ingredients)
    if total == 0:
        return RecipeWithMatch(
            recipe=recipe, match_percentage=0, missing_ingredient_count=0
        )
    matching = sum(
        1 for ingredient in recipe.ingredients if ingredient.category in categories
    )
    return RecipeWithMatch(
        recipe=recipe,
        match_percentage=_percent(matching, total),
        missing_ingredient_count=total - matching,
    )


def rank_recipes(
    recipes: Iterable[Recipe], categories: frozenset[Category]
) -> list[RecipeWithMatch]:
    """Score recipes and order them best match first, then by recipe id."""
    matches = [match_recipe(recipe, categories) for recipe in recipes]
    return sorted(
        matches, key=lambda match: (-match.match_percentage, match.recipe.id)
    )


def _percent(part: int, total: int) -> int:
    """Round ``100 * part / total`` to the nearest integer, halves up."""
    return (200 * part + total) // (2 * total)


@dataclass
class RecipeService:
    """Application service for catalog recipes."""

    repository: RecipeRepository

    def list_recipes(self) -> list[Recipe]:
        """Return catalog recipes with their ingredients attached."""
        return [
            replace(
                recipe,
                ingredients=tuple(self.repository.list_ingredients(recipe.id)),
            )
            for recipe in self.repository.list_recipes()
        ]

    def rank_for(self, items: Iterable[FoodItem]) -> list[RecipeWithMatch]:
        """Rank the catalog against a user's current inventory."""
        return rank_recipes(self.list_recipes(), inventory_categories(items))
