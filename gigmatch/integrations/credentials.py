"""Round-robin API credential rotation."""

import os


class NoCredentialsError(RuntimeError):
    """Raised when a credential is requested but none are configured."""


class CredentialRotator:
    """Hands out API keys round-robin so load spreads across keys."""

    def __init__(self, keys: list[str] | None = None):
        self._keys = [k.strip() for k in (keys or []) if k and k.strip()]
        self._index = 0

    @classmethod
    def from_env(cls, var: str = "OPENAI_API_KEYS", fallback_var: str = "OPENAI_API_KEY") -> "CredentialRotator":
        """Build from a comma-separated env var, falling back to a single-key var."""
        raw = os.getenv(var) or os.getenv(fallback_var) or ""
        return cls(raw.split(","))

    def __len__(self) -> int:
        return len(self._keys)

    def __bool__(self) -> bool:
        return bool(self._keys)

    def next(self) -> str:
        """Return the next key in rotation.

        Raises:
            NoCredentialsError: If no keys are configured
        """
        if not self._keys:
            raise NoCredentialsError("No API keys configured for text generation")
        key = self._keys[self._index % len(self._keys)]
        self._index += 1
        return key
