"""Domain models for the recipe catalog."""

from dataclasses import dataclass

from pantry_tracker.domain.categories import Category


@dataclass(frozen=True)
class RecipeIngredient:
    """Ingredient line of a catalog recipe."""

    recipe_id: int
    name: str
    amount: str | None
    category: Category | None


@dataclass(frozen=True)
class Recipe:
    """Catalog recipe with its ingredients."""

    id: int
    name: str
    description: str | None
    image_url: str | None
    instructions: str | None
    ingredients: tuple[RecipeIngredient, ...] = ()


@dataclass(frozen=True)
class RecipeWithMatch:
    """Recipe annotated with how well the inventory covers it."""

    recipe: Recipe
    match_percentage: int
    missing_ingredient_count: int
