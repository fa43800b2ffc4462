"""Text-generation collaborator contract and response helpers."""

import json
import re
from typing import Any, Protocol, runtime_checkable

_FENCE_OPEN = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"\s*```$")


@runtime_checkable
class TextGenerator(Protocol):
    """Anything that turns a prompt into text.

    ``generate`` raises on failure; callers decide how to fall back.
    """

    @property
    def available(self) -> bool:
        """Whether the generator has what it needs (e.g. credentials) to be called."""
        ...

    async def generate(self, prompt: str, system: str | None = None) -> str:
        ...


def generation_unavailable(generator: TextGenerator | None) -> bool:
    """True when no generator is configured or it cannot be called."""
    return generator is None or not generator.available


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence, if any."""
    cleaned = _FENCE_OPEN.sub("", text.strip())
    return _FENCE_CLOSE.sub("", cleaned).strip()


def parse_json_payload(text: str) -> Any:
    """Parse model output as JSON, tolerating markdown code fences.

    Raises:
        ValueError: If the text is not valid JSON (json.JSONDecodeError)
    """
    return json.loads(strip_code_fences(text))
