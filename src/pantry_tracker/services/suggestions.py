"""AI recipe suggestions from the items a user has on hand."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from pantry_tracker.domain.suggestions import RecipeSuggestion, RecipeSuggestionList
from pantry_tracker.errors import SuggestionsUnavailableError

_logger = logging.getLogger(__name__)

SUGGESTION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "recipes": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "description": {"type": "string"},
                    "ingredients": {"type": "array", "items": {"type": "string"}},
                    "instructions": {"type": "string"},
                },
                "required": ["name", "description", "ingredients", "instructions"],
                "additionalProperties": False,
            },
        }
    },
    "required": ["recipes"],
    "additionalProperties": False,
}

MAX_SUGGESTIONS = 10


class SuggestionClient(Protocol):
    """Interface for LLM recipe generation."""

    async def suggest(
        self,
        *,
        model: str,
        store: bool,
        schema: dict[str, object],
        instructions: str,
        prompt: str,
    ) -> dict[str, object]:
        """Return the parsed JSON object produced by the model."""


@dataclass
class SuggestionService:
    """Service that prompts the model and validates its recipes."""

    client: SuggestionClient | None
    model: str
    store: bool
    default_count: int = 3

    async def suggest(
        self, ingredient_names: list[str], count: int | None = None
    ) -> list[RecipeSuggestion]:
        """Suggest recipes for the given ingredient names.

        Malformed model output yields an empty list. Transport errors from
        the client propagate to the caller.
        """
        if self.client is None:
            raise SuggestionsUnavailableError("OpenAI API key is not configured")
        names = [name.strip() for name in ingredient_names if name.strip()]
        if not names:
            return []
        wanted = max(1, min(count or self.default_count, MAX_SUGGESTIONS))
        try:
            raw = await self.client.suggest(
                model=self.model,
                store=self.store,
                schema=SUGGESTION_SCHEMA,
                instructions=(
                    "You are a helpful cooking assistant. "
                    f"Suggest {wanted} creative recipes based on the provided "
                    "ingredients. Each recipe has a name, a brief description, "
                    "a list of ingredients and step by step instructions."
                ),
                prompt=(
                    f"I have these ingredients: {', '.join(names)}. "
                    f"Please suggest {wanted} recipes I can make."
                ),
            )
        except ValueError:
            _logger.warning("Recipe suggestions returned unparsable output")
            return []
        try:
            parsed = RecipeSuggestionList.model_validate(raw)
        except ValidationError as exc:
            _logger.warning(
                "Recipe suggestions failed validation: errors=%s", exc.error_count()
            )
            return []
        return parsed.recipes[:wanted]
