"""OpenAI client wrapper with key rotation, retry logic and Response API support."""

from typing import Any

from openai import AsyncOpenAI, OpenAIError
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..observability.logger import get_logger
from .credentials import CredentialRotator

logger = get_logger(__name__)


class OpenAIClient:
    """Text generator backed by the OpenAI Responses API.

    Each attempt draws the next key from the rotator, so a retry after a
    rate limit lands on a different key when several are configured.
    """

    def __init__(
        self,
        rotator: CredentialRotator | None = None,
        model: str = "gpt-4.1-mini",
        timeout: float = 30,
        max_retries: int = 2,
        max_output_tokens: int = 512,
    ):
        """Initialize OpenAI client.

        Args:
            rotator: API key rotator (defaults to OPENAI_API_KEYS / OPENAI_API_KEY)
            model: Model to use
            timeout: Request timeout in seconds
            max_retries: Retries after the first attempt
            max_output_tokens: Cap on generated tokens
        """
        self.rotator = rotator if rotator is not None else CredentialRotator.from_env()
        self.model = model
        self.timeout = timeout
        self.max_retries = max_retries
        self.max_output_tokens = max_output_tokens
        self._clients: dict[str, AsyncOpenAI] = {}

        logger.info(
            "openai_client_initialized",
            model=model,
            keys=len(self.rotator),
            timeout=timeout,
        )

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "OpenAIClient":
        """Build a client from the ``llm`` config section."""
        llm_config = config.get("llm", {})
        rotator = CredentialRotator.from_env(llm_config.get("api_keys_env", "OPENAI_API_KEYS"))
        return cls(
            rotator=rotator,
            model=llm_config.get("model", "gpt-4.1-mini"),
            timeout=llm_config.get("timeout", 30),
            max_retries=llm_config.get("max_retries", 2),
            max_output_tokens=llm_config.get("max_output_tokens", 512),
        )

    @property
    def available(self) -> bool:
        return bool(self.rotator)

    def _client_for(self, api_key: str) -> AsyncOpenAI:
        if api_key not in self._clients:
            # Retries are handled here, one key per attempt
            self._clients[api_key] = AsyncOpenAI(
                api_key=api_key,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._clients[api_key]

    async def generate(self, prompt: str, system: str | None = None) -> str:
        """Generate text for a prompt.

        Args:
            prompt: User prompt
            system: Optional system instructions

        Returns:
            Generated text

        Raises:
            NoCredentialsError: If no API keys are configured
            OpenAIError: If every attempt fails
            ValueError: If the response carries no text
        """
        logger.info("creating_response", model=self.model, input_length=len(prompt))

        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.max_retries + 1),
            wait=wait_exponential(multiplier=1, min=1, max=8),
            retry=retry_if_exception_type(OpenAIError),
            reraise=True,
        ):
            with attempt:
                client = self._client_for(self.rotator.next())
                try:
                    response = await client.responses.create(
                        model=self.model,
                        input=prompt,
                        instructions=system,
                        max_output_tokens=self.max_output_tokens,
                    )
                except OpenAIError as e:
                    logger.warning(
                        "openai_error",
                        error=str(e),
                        model=self.model,
                        attempt=attempt.retry_state.attempt_number,
                    )
                    raise

        output_text = self._extract_text_from_response(response)
        if not output_text:
            raise ValueError("No text content returned from OpenAI response")

        logger.info(
            "response_created",
            response_id=getattr(response, "id", None),
            tokens_total=getattr(getattr(response, "usage", None), "total_tokens", 0),
        )
        return output_text

    @staticmethod
    def _extract_text_from_response(response: Any) -> str:
        """Extract concatenated text payload from a Responses API result."""
        if hasattr(response, "output_text") and response.output_text:
            return str(response.output_text).strip()

        texts: list[str] = []
        for item in getattr(response, "output", []) or []:
            for content in getattr(item, "content", []) or []:
                text_val = getattr(content, "text", None)
                if text_val:
                    texts.append(str(text_val))
        if not texts:
            logger.error(
                "empty_response_output",
                status=getattr(response, "status", None),
                output_preview=str(getattr(response, "output", None))[:500],
            )
        return "".join(texts).strip()
