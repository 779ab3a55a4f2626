"""Ollama (local model) chat provider for captain_claw.

Talks to the Ollama HTTP API directly with httpx. Local models report
no usage, so token counts are always 0.
"""

from collections.abc import Sequence
from typing import Any

import httpx

from captain_claw.config import LLMSettings
from captain_claw.exceptions import ProviderError, UnavailableError
from captain_claw.infra.llm.base import with_system_prompt
from captain_claw.logging import get_logger
from captain_claw.models.result import ChatResult
from captain_claw.models.routing import ProviderFamily
from captain_claw.models.turn import ConversationTurn

__all__ = [
    "OllamaProvider",
]

logger = get_logger(__name__)


class OllamaProvider:
    """Sends chats to a local Ollama runtime.

    The canonical id selects the endpoint and model:
    - "ollama": configured base URL and OLLAMA_MODEL
    - "ollama/<model>": configured base URL and the named model
    - "http://localhost:11434/api/chat": that endpoint and OLLAMA_MODEL
    """

    config_class = LLMSettings
    family = ProviderFamily.LOCAL

    def __init__(self, settings: LLMSettings, client: httpx.AsyncClient | None = None) -> None:
        """Initialize provider.

        Args:
            settings: LLM configuration settings
            client: Preconfigured httpx client (created lazily when omitted)
        """
        self._settings = settings
        self._client = client
        self._owns_client = client is None

    @classmethod
    async def from_config(cls, config: LLMSettings) -> "OllamaProvider":
        """Factory method for settings-based instantiation."""
        return cls(config)

    @classmethod
    async def from_dict(cls, config: dict[str, Any]) -> "OllamaProvider":
        """Factory method for custom config dict."""
        return cls(LLMSettings(**config))

    async def close(self) -> None:
        """Close the owned HTTP client."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._settings.request_timeout)
        return self._client

    def _endpoint(self, canonical_id: str) -> tuple[str, str]:
        """Resolve (chat URL, model name) from a canonical id."""
        model = self._settings.ollama_model
        if canonical_id.startswith(("http://", "https://")):
            return canonical_id, model
        if canonical_id.startswith("ollama/") and len(canonical_id) > len("ollama/"):
            model = canonical_id.removeprefix("ollama/")
        return f"{self._settings.ollama_base_url.rstrip('/')}/api/chat", model

    async def send(
        self,
        turns: Sequence[ConversationTurn],
        system_prompt: str | None,
        canonical_id: str,
    ) -> ChatResult:
        """Send a non-streaming chat request to Ollama."""
        url, model = self._endpoint(canonical_id)
        payload = {
            "model": model,
            "messages": with_system_prompt(turns, system_prompt),
            "stream": False,
        }

        try:
            response = await self._get_client().post(url, json=payload)
            response.raise_for_status()
        except httpx.ConnectError as e:
            raise UnavailableError(
                f"Ollama is not running. Start it with 'ollama serve' so {url} is reachable.",
                provider=self.family.value,
            ) from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 404:
                raise ProviderError(
                    f"Ollama model not found. Make sure {model} is pulled and loaded.",
                    provider=self.family.value,
                    status_code=status,
                ) from e
            logger.warning("provider_http_error", provider=self.family.value, status_code=status)
            raise ProviderError(
                f"Ollama error: HTTP {status}: {e.response.text[:200]}",
                provider=self.family.value,
                status_code=status,
            ) from e
        except httpx.HTTPError as e:
            raise ProviderError(f"Ollama error: {e}", provider=self.family.value) from e

        try:
            content = response.json()["message"]["content"]
        except (ValueError, KeyError, TypeError) as e:
            raise ProviderError(
                "Ollama returned an unexpected response shape",
                provider=self.family.value,
            ) from e

        return ChatResult(content=content or "", model_id=f"ollama/{model}", token_count=0)
