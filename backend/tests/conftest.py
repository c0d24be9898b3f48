"""Shared fakes standing in for the Gemini service."""

from types import SimpleNamespace


class FakeService:
    """Records prompts and returns a canned response (or raises)."""

    def __init__(self, response=None, error: Exception | None = None, configured: bool = True) -> None:
        self.response = response
        self.error = error
        self.configured = configured
        self.calls: list[tuple[str, object]] = []

    async def generate(self, prompt, location=None):
        self.calls.append((prompt, location))
        if self.error is not None:
            raise self.error
        return self.response


def gemini_response(text=None, nested_text=None, uris=(), map_uris=()):
    """Build a response envelope shaped like google-genai's."""
    chunks = [SimpleNamespace(web=SimpleNamespace(uri=u), maps=None) for u in uris]
    chunks += [SimpleNamespace(web=None, maps=SimpleNamespace(uri=u)) for u in map_uris]
    candidate = SimpleNamespace(
        content=SimpleNamespace(parts=[SimpleNamespace(text=nested_text)]),
        grounding_metadata=SimpleNamespace(grounding_chunks=chunks),
    )
    return SimpleNamespace(text=text, candidates=[candidate])
