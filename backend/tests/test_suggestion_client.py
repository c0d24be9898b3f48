"""Tests for SuggestionClient."""

import logging

import pytest

from conftest import FakeService, gemini_response

from app.core.reasoning import TransportError
from app.core.suggestion_client import SuggestionClient, build_prompt
from app.schemas.vehicle import Coordinate


@pytest.mark.asyncio
async def test_short_query_skips_service():
    service = FakeService(gemini_response(text="Greenfield"))
    assert await SuggestionClient(service).suggest("Gr") == []
    assert service.calls == []


@pytest.mark.asyncio
async def test_current_location_sentinel_skips_service():
    service = FakeService(gemini_response(text="Greenfield"))
    assert await SuggestionClient(service).suggest("Current Location") == []
    assert service.calls == []


@pytest.mark.asyncio
async def test_unconfigured_service_returns_empty():
    service = FakeService(gemini_response(text="Greenfield"), configured=False)
    assert await SuggestionClient(service).suggest("Greenfield") == []
    assert service.calls == []


@pytest.mark.asyncio
async def test_lines_become_suggestions():
    text = "Greenfield Community College\n\n  Greenfield Public Library \nGreenfield Transit Center\n"
    here = Coordinate(lat=42.58, lon=-72.6)
    service = FakeService(gemini_response(text=text))

    result = await SuggestionClient(service).suggest("Greenf", here)

    assert result == [
        "Greenfield Community College",
        "Greenfield Public Library",
        "Greenfield Transit Center",
    ]
    prompt, location = service.calls[0]
    assert location == here
    assert 'Query: "Greenf"' in prompt


@pytest.mark.asyncio
async def test_failure_returns_empty_and_warns(caplog):
    service = FakeService(error=TransportError("timeout"))
    with caplog.at_level(logging.WARNING, logger="app.core.suggestion_client"):
        assert await SuggestionClient(service).suggest("Amherst") == []
    assert "Autocomplete failed" in caplog.text


def test_prompt_names_priority_towns():
    prompt = build_prompt("Main")
    assert "Greenfield, Northampton, Amherst, and the Pioneer Valley" in prompt
