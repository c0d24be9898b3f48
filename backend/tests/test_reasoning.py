"""Tests for the Gemini adapter (no network)."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from app.core.reasoning import ConfigurationError, ReasoningService, TransportError, build_config
from app.schemas.vehicle import Coordinate


def test_config_enables_maps_grounding():
    config = build_config()
    assert config.tools[0].google_maps is not None
    assert config.tool_config is None


def test_config_carries_location_bias():
    config = build_config(Coordinate(lat=42.5879, lon=-72.5995))
    lat_lng = config.tool_config.retrieval_config.lat_lng
    assert lat_lng.latitude == 42.5879
    assert lat_lng.longitude == -72.5995


def test_missing_key_is_unconfigured():
    assert not ReasoningService(api_key="").configured
    assert ReasoningService(api_key="secret").configured


@pytest.mark.asyncio
async def test_generate_without_key_raises_configuration_error():
    with pytest.raises(ConfigurationError):
        await ReasoningService(api_key="").generate("hello")


def _service_with(generate_content) -> ReasoningService:
    service = ReasoningService(api_key="secret", model="gemini-test")
    service._client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate_content)))
    return service


@pytest.mark.asyncio
async def test_generate_passes_model_prompt_and_config():
    response = SimpleNamespace(text="ok")
    generate_content = AsyncMock(return_value=response)
    service = _service_with(generate_content)

    assert await service.generate("plan me a trip", Coordinate(lat=1.0, lon=2.0)) is response

    kwargs = generate_content.call_args.kwargs
    assert kwargs["model"] == "gemini-test"
    assert kwargs["contents"] == "plan me a trip"
    assert kwargs["config"].tool_config.retrieval_config.lat_lng.longitude == 2.0


@pytest.mark.asyncio
async def test_generate_wraps_transport_failures():
    service = _service_with(AsyncMock(side_effect=ConnectionError("reset")))
    with pytest.raises(TransportError):
        await service.generate("hello")
