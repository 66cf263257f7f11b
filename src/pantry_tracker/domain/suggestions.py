"""Models for AI-generated recipe suggestions."""

from pydantic import BaseModel, Field


class RecipeSuggestion(BaseModel):
    """Single free-form recipe suggested by the language model."""

    name: str
    description: str = ""
    ingredients: list[str] = Field(default_factory=list)
    instructions: str = ""


class RecipeSuggestionList(BaseModel):
    """Structured output for recipe suggestions."""

    recipes: list[RecipeSuggestion]
