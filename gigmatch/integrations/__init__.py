"""External collaborators: text generation and credential rotation."""

from .credentials import CredentialRotator, NoCredentialsError
from .generation import TextGenerator, generation_unavailable, parse_json_payload, strip_code_fences

__all__ = [
    "CredentialRotator",
    "NoCredentialsError",
    "TextGenerator",
    "generation_unavailable",
    "parse_json_payload",
    "strip_code_fences",
]
