"""Shared base for OpenAI-compatible chat providers.

OpenAI and OpenRouter speak the same chat-completions protocol; they
differ only in endpoint, credential, headers and model-id prefix.
"""

from collections.abc import Sequence
from typing import Any, ClassVar

import openai
from openai import AsyncOpenAI
from pydantic import SecretStr

from captain_claw.config import LLMSettings
from captain_claw.exceptions import AuthError, ProviderError, RateLimitError
from captain_claw.logging import get_logger
from captain_claw.models.result import ChatResult
from captain_claw.models.routing import ProviderFamily
from captain_claw.models.turn import ConversationTurn, Role

__all__ = [
    "OpenAICompatibleProvider",
    "with_system_prompt",
]

logger = get_logger(__name__)


def with_system_prompt(
    turns: Sequence[ConversationTurn],
    system_prompt: str | None,
) -> list[dict[str, str]]:
    """Convert turns to wire messages, prepending one system turn if set."""
    messages = [turn.to_message() for turn in turns]
    if system_prompt:
        messages.insert(0, ConversationTurn(role=Role.SYSTEM, content=system_prompt).to_message())
    return messages


class OpenAICompatibleProvider:
    """Base implementation of ProviderInterface over the OpenAI SDK.

    Subclasses set the family, display name, credential env var and
    model prefix, and may add client options.
    """

    config_class = LLMSettings

    family: ClassVar[ProviderFamily]
    display_name: ClassVar[str]
    credential_env: ClassVar[str]
    model_prefix: ClassVar[str]

    def __init__(self, settings: LLMSettings, client: AsyncOpenAI | None = None) -> None:
        """Initialize provider.

        Args:
            settings: LLM configuration settings
            client: Preconfigured client (created lazily when omitted)
        """
        self._settings = settings
        self._client = client
        self._owns_client = client is None

    @classmethod
    async def from_config(cls, config: LLMSettings) -> "OpenAICompatibleProvider":
        """Factory method for settings-based instantiation."""
        return cls(config)

    @classmethod
    async def from_dict(cls, config: dict[str, Any]) -> "OpenAICompatibleProvider":
        """Factory method for custom config dict."""
        return cls(LLMSettings(**config))

    async def close(self) -> None:
        """Close the owned HTTP client."""
        if self._owns_client and self._client is not None:
            await self._client.close()
            self._client = None

    # Subclass hooks
    def _api_key(self) -> SecretStr | None:
        raise NotImplementedError

    def _client_options(self) -> dict[str, Any]:
        return {}

    def _model_name(self, canonical_id: str) -> str:
        return canonical_id.removeprefix(self.model_prefix)

    def _get_client(self) -> AsyncOpenAI:
        """Get the SDK client, failing fast when the credential is absent."""
        api_key = self._api_key()
        if api_key is None or not api_key.get_secret_value():
            raise AuthError(f"{self.credential_env} not configured", provider=self.family.value)
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=api_key.get_secret_value(),
                timeout=self._settings.request_timeout,
                max_retries=self._settings.max_retries,
                **self._client_options(),
            )
        return self._client

    async def send(
        self,
        turns: Sequence[ConversationTurn],
        system_prompt: str | None,
        canonical_id: str,
    ) -> ChatResult:
        """Send a chat completion request and normalize the reply."""
        client = self._get_client()
        model = self._model_name(canonical_id)
        provider = self.family.value

        try:
            response = await client.chat.completions.create(
                model=model,
                messages=with_system_prompt(turns, system_prompt),  # type: ignore[arg-type]
                temperature=self._settings.temperature,
                max_tokens=self._settings.max_tokens,
            )
        except openai.RateLimitError as e:
            raise RateLimitError(
                f"{self.display_name} rate limit exceeded. Please wait a moment and try again.",
                provider=provider,
                status_code=429,
            ) from e
        except openai.AuthenticationError as e:
            raise AuthError(
                f"{self.display_name} API key is invalid. Please check your configuration.",
                provider=provider,
                status_code=401,
            ) from e
        except openai.APIStatusError as e:
            logger.warning(
                "provider_http_error",
                provider=provider,
                status_code=e.status_code,
                error=e.message,
            )
            raise ProviderError(
                f"{self.display_name} error: {e.message}",
                provider=provider,
                status_code=e.status_code,
            ) from e
        except openai.APIError as e:
            raise ProviderError(f"{self.display_name} error: {e}", provider=provider) from e

        if not response.choices:
            raise ProviderError(f"{self.display_name} returned no choices", provider=provider)

        usage = response.usage
        return ChatResult(
            content=response.choices[0].message.content or "",
            model_id=canonical_id,
            token_count=(usage.total_tokens or 0) if usage else 0,
        )
