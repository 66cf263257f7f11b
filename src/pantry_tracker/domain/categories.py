"""Food categories and free-text category normalization."""

from enum import Enum


class Category(str, Enum):
    """Classification tag for food items and recipe ingredients."""

    DAIRY = "dairy"
    MEAT = "meat"
    VEGETABLES = "vegetables"
    FRUITS = "fruits"
    GRAINS = "grains"
    OTHER = "other"
    MEDICINES = "medicines"

    @property
    def is_food(self) -> bool:
        """Return False for medicinal items, which never match recipes."""
        return self is not Category.MEDICINES


FOOD_CATEGORIES: tuple[Category, ...] = tuple(
    category for category in Category if category.is_food
)

_BY_VALUE: dict[str, Category] = {category.value: category for category in Category}

_SYNONYMS: dict[str, Category] = {
    "fruit": Category.FRUITS,
    "berries": Category.FRUITS,
    "vegetable": Category.VEGETABLES,
    "veggies": Category.VEGETABLES,
    "produce": Category.VEGETABLES,
    "greens": Category.VEGETABLES,
    "milk": Category.DAIRY,
    "cheese": Category.DAIRY,
    "yogurt": Category.DAIRY,
    "poultry": Category.MEAT,
    "fish": Category.MEAT,
    "seafood": Category.MEAT,
    "bakery": Category.GRAINS,
    "bread": Category.GRAINS,
    "cereal": Category.GRAINS,
    "grain": Category.GRAINS,
    "pasta": Category.GRAINS,
    "rice": Category.GRAINS,
    "medicine": Category.MEDICINES,
    "medication": Category.MEDICINES,
    "pharmacy": Category.MEDICINES,
    "supplement": Category.MEDICINES,
}

# Longest keywords first so "vegetables" wins over "vegetable".
_KEYWORDS: tuple[tuple[str, Category], ...] = tuple(
    sorted(
        [
            *(
                (category.value, category)
                for category in Category
                if category is not Category.OTHER
            ),
            *_SYNONYMS.items(),
        ],
        key=lambda entry: len(entry[0]),
        reverse=True,
    )
)


def normalize_category(raw: str | None) -> Category:
    """Map a free-text category label to a known category.

    Resolution order is an exact enum value, then a known synonym, then the
    first keyword contained in the label. Labels that match nothing (as well
    as empty input) resolve to ``Category.OTHER``.
    """
    if raw is None:
        return Category.OTHER
    cleaned = raw.strip().lower()
    if not cleaned:
        return Category.OTHER
    exact = _BY_VALUE.get(cleaned)
    if exact is not None:
        return exact
    synonym = _SYNONYMS.get(cleaned)
    if synonym is not None:
        return synonym
    for keyword, category in _KEYWORDS:
        if keyword in cleaned:
            return category
    return Category.OTHER
