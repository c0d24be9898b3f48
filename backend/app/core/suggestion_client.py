"""Place-name autocomplete backed by the reasoning service."""

import logging

from app.core.reasoning import ReasoningService
from app.core.response_parser import extract_text, split_lines
from app.schemas.vehicle import Coordinate

logger = logging.getLogger(__name__)

CURRENT_LOCATION = "Current Location"
MIN_QUERY_LENGTH = 3

PRIORITY_AREAS = ("Greenfield", "Northampton", "Amherst", "the Pioneer Valley")

_PROMPT = """
I am building a transit app for Franklin County, Massachusetts.
The user is searching for a location.
Query: "{query}"

Please provide a list of 3-5 specific, real-world places, addresses, or landmarks in Massachusetts that match this query.
Prioritize locations in {areas}.
Return ONLY the names/addresses as a plain text list, one per line. No bullets, no numbering, no extra text.
"""


def accepts_query(query: str) -> bool:
    """Whether `query` is worth sending to the service at all."""
    return len(query) >= MIN_QUERY_LENGTH and query != CURRENT_LOCATION


def build_prompt(query: str) -> str:
    return _PROMPT.format(
        query=query,
        areas=", ".join(PRIORITY_AREAS[:-1]) + f", and {PRIORITY_AREAS[-1]}",
    )


class SuggestionClient:
    """Turns a partial query into a short list of plausible place names.

    Never raises: a missing credential, a short query or any service failure
    all yield an empty list.
    """

    def __init__(self, service: ReasoningService) -> None:
        self.service = service

    async def suggest(self, query: str, nearby: Coordinate | None = None) -> list[str]:
        if not self.service.configured or not accepts_query(query):
            return []

        try:
            response = await self.service.generate(build_prompt(query), location=nearby)
            return split_lines(extract_text(response).text)
        except Exception as e:
            logger.warning("Autocomplete failed for %r: %s", query, e)
            return []
