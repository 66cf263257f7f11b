"""Tests for the OpenAI suggestion adapter."""

import asyncio
import json

import pytest

from pantry_tracker.adapters.openai_suggestion_client import (
    OpenAISuggestionClient,
    extract_json,
)


class _FakeResponses:
    def __init__(self, output_text: str) -> None:
        self.output_text = output_text
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"output_text": self.output_text})()


class _FakeOpenAI:
    def __init__(self, output_text: str) -> None:
        self.responses = _FakeResponses(output_text)


def test_openai_suggestion_client_parses_output() -> None:
    fake = _FakeOpenAI(json.dumps({"recipes": []}))
    client = OpenAISuggestionClient(client=fake)

    result = asyncio.run(
        client.suggest(
            model="gpt-4o-mini",
            store=False,
            schema={"type": "object"},
            instructions="Be helpful",
            prompt="I have eggs",
        )
    )

    assert result == {"recipes": []}
    payload = fake.responses.last_payload
    assert payload is not None
    assert payload["input"] == "I have eggs"
    assert payload["text"]["format"]["type"] == "json_schema"


def test_openai_suggestion_client_rejects_empty_output() -> None:
    client = OpenAISuggestionClient(client=_FakeOpenAI(""))

    with pytest.raises(ValueError):
        asyncio.run(
            client.suggest(
                model="gpt-4o-mini",
                store=False,
                schema={},
                instructions="",
                prompt="",
            )
        )


def test_extract_json_strips_code_fences() -> None:
    text = '```json\n{"recipes": [{"name": "Soup"}]}\n```'

    assert extract_json(text) == {"recipes": [{"name": "Soup"}]}


def test_extract_json_finds_embedded_object() -> None:
    text = 'Sure! Here you go: {"recipes": []} Enjoy.'

    assert extract_json(text) == {"recipes": []}


def test_extract_json_rejects_text_without_object() -> None:
    with pytest.raises(ValueError):
        extract_json("no recipes today")
    with pytest.raises(ValueError):
        extract_json("[1, 2, 3]")
