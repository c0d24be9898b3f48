"""Best-effort parsing of free-text Gemini answers into itinerary pieces."""

import re
from dataclasses import dataclass

from app.schemas.trip import RouteStep, StepKind

NO_DETAILS = "No details available."
DELAY_HAZARD = "Possible Delays detected"

_NUMBERED_LINE = re.compile(r"^\d+\.")
_NUMBER_PREFIX = re.compile(r"^\d+\.\s*")


@dataclass(frozen=True)
class DirectText:
    """Answer carried on the envelope's top-level `text`."""

    text: str


@dataclass(frozen=True)
class CandidateText:
    """Answer found at candidates[0].content.parts[0].text."""

    text: str


@dataclass(frozen=True)
class NoText:
    text: str = NO_DETAILS


AnswerText = DirectText | CandidateText | NoText


def _first(items):
    return items[0] if items else None


def extract_text(response) -> AnswerText:
    direct = getattr(response, "text", None)
    if direct:
        return DirectText(direct)

    candidate = _first(getattr(response, "candidates", None))
    content = getattr(candidate, "content", None)
    part = _first(getattr(content, "parts", None))
    nested = getattr(part, "text", None)
    if nested:
        return CandidateText(nested)

    return NoText()


def grounding_urls(response) -> list[str]:
    """Unique web/maps URIs cited in the first candidate's grounding metadata."""
    candidate = _first(getattr(response, "candidates", None))
    metadata = getattr(candidate, "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    urls: dict[str, None] = {}
    for chunk in chunks:
        for source in (getattr(chunk, "web", None), getattr(chunk, "maps", None)):
            uri = getattr(source, "uri", None)
            if uri:
                urls[uri] = None
    return list(urls)


def split_lines(text: str) -> list[str]:
    """Non-empty, stripped lines."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def classify_step(line: str) -> StepKind:
    # "wait" is never inferred; anything that is not walking or rail is a bus leg
    lowered = line.lower()
    if "walk" in lowered:
        return StepKind.WALK
    if "train" in lowered:
        return StepKind.TRAIN
    return StepKind.BUS


def parse_steps(text: str) -> list[RouteStep]:
    """Numbered lines ("1. ...") in order, with the number stripped."""
    steps = []
    for line in text.split("\n"):
        line = line.strip()
        if not _NUMBERED_LINE.match(line):
            continue
        steps.append(RouteStep(
            instruction=_NUMBER_PREFIX.sub("", line, count=1),
            kind=classify_step(line),
        ))
    return steps


def detect_hazards(text: str) -> list[str]:
    return [DELAY_HAZARD] if "delay" in text.lower() else []
