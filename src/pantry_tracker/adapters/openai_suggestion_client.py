"""OpenAI Responses API client for recipe suggestions."""

import json
import re
from dataclasses import dataclass

from openai import AsyncOpenAI

from pantry_tracker.services.suggestions import SuggestionClient

_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)
_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


@dataclass
class OpenAISuggestionClient(SuggestionClient):
    """Suggestion client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAISuggestionClient":
        """Create an OpenAI suggestion client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def suggest(
        self,
        *,
        model: str,
        store: bool,
        schema: dict[str, object],
        instructions: str,
        prompt: str,
    ) -> dict[str, object]:
        """Call OpenAI Responses API with structured outputs."""
        response = await self.client.responses.create(
            model=model,
            instructions=instructions,
            input=prompt,
            text={
                "format": {
                    "type": "json_schema",
                    "name": "recipe_suggestions",
                    "strict": True,
                    "schema": schema,
                }
            },
            store=store,
        )
        return extract_json(response.output_text or "")

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()


def extract_json(text: str) -> dict[str, object]:
    """Parse a JSON object from model text, tolerating fences and chatter.

    Raises ValueError when no JSON object can be recovered.
    """
    cleaned = _FENCE.sub("", text).strip()
    if not cleaned:
        raise ValueError("model returned an empty response")
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError:
        match = _OBJECT.search(cleaned)
        if match is None:
            raise ValueError("no JSON object found in model response") from None
        parsed = json.loads(match.group(0))
    if not isinstance(parsed, dict):
        raise ValueError("model response is not a JSON object")
    return parsed
