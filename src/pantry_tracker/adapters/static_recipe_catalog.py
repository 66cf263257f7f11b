"""Built-in recipe catalog served without a database."""

from dataclasses import dataclass

from pantry_tracker.domain.categories import Category
from pantry_tracker.domain.recipes import Recipe, RecipeIngredient
from pantry_tracker.services.recipes import RecipeRepository

_IMAGE_BASE = "https://images.unsplash.com"
_IMAGE_QUERY = "?ixlib=rb-1.2.1&auto=format&fit=crop&w=500&q=60"

DEFAULT_RECIPES: tuple[Recipe, ...] = (
    Recipe(
        id=1,
        name="Chicken Pasta",
        description="A delicious pasta dish with chicken and vegetables",
        image_url=f"{_IMAGE_BASE}/photo-1598866594230-a7c12756260f{_IMAGE_QUERY}",
        instructions=(
            "1. Cook pasta according to package instructions. "
            "2. Sauté chicken until fully cooked. "
            "3. Add vegetables and sauce. 4. Mix in pasta and serve."
        ),
    ),
    Recipe(
        id=2,
        name="Vegetable Stir Fry",
        description="A healthy stir fry with fresh vegetables",
        image_url=f"{_IMAGE_BASE}/photo-1512621776951-a57141f2eefd{_IMAGE_QUERY}",
        instructions=(
            "1. Heat oil in a pan. 2. Add vegetables and stir fry for 5 minutes. "
            "3. Add sauce and continue cooking for 2 minutes. 4. Serve over rice."
        ),
    ),
    Recipe(
        id=3,
        name="Fruit Smoothie",
        description="A refreshing smoothie with fresh fruits",
        image_url=f"{_IMAGE_BASE}/photo-1568901346375-23c9450c58cd{_IMAGE_QUERY}",
        instructions=(
            "1. Add all fruits to a blender. 2. Add yogurt and milk. "
            "3. Blend until smooth. 4. Serve immediately."
        ),
    ),
    Recipe(
        id=4,
        name="Vegetable Soup",
        description="A hearty vegetable soup",
        image_url=f"{_IMAGE_BASE}/photo-1547592180-85f173990554{_IMAGE_QUERY}",
        instructions=(
            "1. Sauté onions and garlic. 2. Add vegetables and broth. "
            "3. Simmer for 20 minutes. 4. Season and serve."
        ),
    ),
    Recipe(
        id=5,
        name="Rice Bowl",
        description="A nutritious rice bowl with vegetables and protein",
        image_url=f"{_IMAGE_BASE}/photo-1512058564366-18510be2db19{_IMAGE_QUERY}",
        instructions=(
            "1. Cook rice according to package instructions. "
            "2. Prepare vegetables and protein. "
            "3. Assemble bowl with rice, vegetables, and protein. "
            "4. Add sauce and serve."
        ),
    ),
)

_V = Category.VEGETABLES
_O = Category.OTHER

# (recipe_id, name, amount, category)
_INGREDIENT_ROWS: tuple[tuple[int, str, str, Category], ...] = (
    (1, "Pasta", "200g", Category.GRAINS),
    (1, "Chicken", "300g", Category.MEAT),
    (1, "Bell Peppers", "1", _V),
    (1, "Onion", "1", _V),
    (1, "Garlic", "2 cloves", _V),
    (1, "Tomato Sauce", "200ml", _O),
    (1, "Olive Oil", "2 tbsp", _O),
    (1, "Salt", "to taste", _O),
    (2, "Broccoli", "1 head", _V),
    (2, "Carrots", "2", _V),
    (2, "Bell Peppers", "2", _V),
    (2, "Onion", "1", _V),
    (2, "Garlic", "3 cloves", _V),
    (2, "Soy Sauce", "3 tbsp", _O),
    (2, "Vegetable Oil", "2 tbsp", _O),
    (3, "Banana", "1", Category.FRUITS),
    (3, "Strawberries", "100g", Category.FRUITS),
    (3, "Blueberries", "50g", Category.FRUITS),
    (3, "Yogurt", "100g", Category.DAIRY),
    (3, "Milk", "200ml", Category.DAIRY),
    (4, "Carrots", "2", _V),
    (4, "Celery", "2 stalks", _V),
    (4, "Onion", "1", _V),
    (4, "Garlic", "2 cloves", _V),
    (4, "Potatoes", "2", _V),
    (4, "Vegetable Broth", "1L", _O),
    (4, "Olive Oil", "2 tbsp", _O),
    (4, "Herbs", "to taste", _O),
    (4, "Salt", "to taste", _O),
    (5, "Rice", "200g", Category.GRAINS),
    (5, "Avocado", "1", _V),
    (5, "Cucumber", "1", _V),
    (5, "Carrots", "1", _V),
    (5, "Eggs", "2", _O),
    (5, "Soy Sauce", "2 tbsp", _O),
)

DEFAULT_INGREDIENTS: tuple[RecipeIngredient, ...] = tuple(
    RecipeIngredient(recipe_id=recipe_id, name=name, amount=amount, category=category)
    for recipe_id, name, amount, category in _INGREDIENT_ROWS
)


@dataclass
class StaticRecipeCatalog(RecipeRepository):
    """In-process catalog seeded with the default recipes."""

    recipes: tuple[Recipe, ...] = DEFAULT_RECIPES
    ingredients: tuple[RecipeIngredient, ...] = DEFAULT_INGREDIENTS

    def list_recipes(self) -> list[Recipe]:
        """Return all catalog recipes."""
        return list(self.recipes)

    def list_ingredients(self, recipe_id: int) -> list[RecipeIngredient]:
        """Return ingredient lines for a recipe."""
        return [
            ingredient
            for ingredient in self.ingredients
            if ingredient.recipe_id == recipe_id
        ]
