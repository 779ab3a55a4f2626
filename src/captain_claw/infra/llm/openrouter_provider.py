"""OpenRouter chat provider for captain_claw.

OpenRouter exposes an OpenAI-compatible endpoint, so this provider
reuses the OpenAI SDK with a different base URL and attribution headers.
"""

from typing import Any

from pydantic import SecretStr

from captain_claw.infra.llm.base import OpenAICompatibleProvider
from captain_claw.models.routing import ProviderFamily

__all__ = [
    "OpenRouterProvider",
]

# Used when the canonical id is just "openrouter"
AUTO_MODEL = "openrouter/auto"


class OpenRouterProvider(OpenAICompatibleProvider):
    """Sends "openrouter/vendor/model" ids to OpenRouter."""

    family = ProviderFamily.OPENROUTER
    display_name = "OpenRouter"
    credential_env = "OPENROUTER_API_KEY"
    model_prefix = "openrouter/"

    def _api_key(self) -> SecretStr | None:
        return self._settings.openrouter_api_key

    def _client_options(self) -> dict[str, Any]:
        return {
            "base_url": self._settings.openrouter_base_url,
            "default_headers": {
                "HTTP-Referer": self._settings.openrouter_referer,
                "X-Title": self._settings.openrouter_title,
            },
        }

    def _model_name(self, canonical_id: str) -> str:
        if canonical_id == "openrouter":
            return AUTO_MODEL
        return canonical_id.removeprefix(self.model_prefix)
