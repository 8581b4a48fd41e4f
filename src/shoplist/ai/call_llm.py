"""Completion service integration handler."""
from typing import Any, Optional
from openai import (
    AsyncOpenAI,
    APIError as OpenAIAPIError,
    APIConnectionError,
    APITimeoutError,
    RateLimitError,
)
from tenacity import (
    AsyncRetrying,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type
)

from shoplist.utils.logger import get_logger
from shoplist.config.settings import get_llm_settings
from .models import LLMConfig
from .errors import RemoteUnavailableError, UnparsableResponseError

# Errors worth another attempt against the same model
TRANSIENT_ERRORS = (APIConnectionError, APITimeoutError, RateLimitError)


class LLMHandler:
    """Handler for completion API calls."""

    def __init__(
        self,
        config: Optional[LLMConfig] = None,
        client: Optional[Any] = None
    ):
        """
        Initialize the handler.

        Args:
            config: Runtime config, read from settings when omitted
            client: Prebuilt AsyncOpenAI-compatible client. Without one a
                client is only created when an API key is configured.
        """
        llm_settings = get_llm_settings()

        self.config = config or LLMConfig.from_settings(llm_settings)
        self.logger = get_logger(self.__class__.__name__)

        if client is None and llm_settings.API_KEY:
            client = AsyncOpenAI(
                api_key=llm_settings.API_KEY,
                base_url=llm_settings.BASE_URL or None,
                timeout=self.config.timeout
            )
        self.client = client

    @property
    def enabled(self) -> bool:
        """Whether remote calls can be made at all."""
        return self.client is not None

    def _describe_api_error(self, e: OpenAIAPIError, model: str) -> RemoteUnavailableError:
        """Map OpenAI API errors to a RemoteUnavailableError."""
        error_str = str(e).lower()
        if isinstance(e, RateLimitError) or 'rate_limit' in error_str:
            message = "Rate limited by the completion service"
        elif isinstance(e, APITimeoutError) or 'timeout' in error_str:
            message = "Completion service timed out"
        elif 'api_key' in error_str:
            message = "Completion service rejected the API key"
        else:
            message = "Error communicating with the completion service"

        return RemoteUnavailableError(
            f"{message}: {e}",
            metadata={'model': model, 'error_type': type(e).__name__}
        )

    async def complete(self, prompt: str, model: str) -> str:
        """
        Send one prompt to one model.

        Args:
            prompt: Full prompt text
            model: Model identifier

        Returns:
            The stripped reply text

        Raises:
            RemoteUnavailableError: On transport or API failure
            UnparsableResponseError: If the reply is empty
        """
        if not self.enabled:
            raise RemoteUnavailableError(
                "Completion service not configured",
                suggestions=["Set LLM_API_KEY to enable remote parsing"]
            )

        self.logger.info("Calling completion API", model=model)

        try:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception_type(TRANSIENT_ERRORS),
                stop=stop_after_attempt(self.config.max_attempts),
                wait=wait_exponential(multiplier=1, min=1, max=10),
                reraise=True
            ):
                with attempt:
                    response = await self.client.chat.completions.create(
                        model=model,
                        messages=[{'role': 'user', 'content': prompt}],
                        temperature=self.config.temperature,
                        max_tokens=self.config.max_tokens,
                        timeout=self.config.timeout
                    )

        except OpenAIAPIError as e:
            self.logger.warning("Completion API error", model=model, error=str(e))
            raise self._describe_api_error(e, model) from e

        except Exception as e:
            self.logger.exception("Unexpected completion error", model=model)
            raise RemoteUnavailableError(
                f"Unexpected completion error: {e}",
                metadata={'model': model, 'error_type': type(e).__name__}
            ) from e

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            raise UnparsableResponseError(
                "Empty response from completion service",
                metadata={'model': model}
            )

        return content.strip()
