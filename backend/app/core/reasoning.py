"""Async adapter for the Gemini API with Google Maps grounding."""

import logging

from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

from app.config import settings
from app.schemas.vehicle import Coordinate

logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """No credential for the reasoning service."""


class TransportError(RuntimeError):
    """The reasoning service could not be reached or rejected the request."""


def build_config(location: Coordinate | None = None) -> genai_types.GenerateContentConfig:
    """Request config: Maps grounding on, optionally biased to `location`."""
    tool_config = None
    if location is not None:
        tool_config = genai_types.ToolConfig(
            retrieval_config=genai_types.RetrievalConfig(
                lat_lng=genai_types.LatLng(latitude=location.lat, longitude=location.lon),
            ),
        )
    return genai_types.GenerateContentConfig(
        tools=[genai_types.Tool(google_maps=genai_types.GoogleMaps())],
        tool_config=tool_config,
    )


class ReasoningService:
    """Sends a prompt to Gemini and returns the raw response envelope."""

    def __init__(self, api_key: str | None = None, model: str | None = None) -> None:
        self._api_key = settings.gemini_api_key if api_key is None else api_key
        self.model = model or settings.gemini_model
        self._client: genai.Client | None = None

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    def _get_client(self) -> genai.Client:
        if not self.configured:
            raise ConfigurationError("Gemini API key missing")
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def generate(self, prompt: str, location: Coordinate | None = None):
        client = self._get_client()
        try:
            return await client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=build_config(location),
            )
        except genai_errors.APIError as e:
            raise TransportError(f"Gemini returned {e.code}: {e.message}") from e
        except Exception as e:
            raise TransportError(f"Gemini request failed: {type(e).__name__}") from e
