"""OpenAI chat provider for captain_claw."""

from typing import Any

from pydantic import SecretStr

from captain_claw.infra.llm.base import OpenAICompatibleProvider
from captain_claw.models.routing import ProviderFamily

__all__ = [
    "OpenAIProvider",
]


class OpenAIProvider(OpenAICompatibleProvider):
    """Sends "openai/..." model ids to the OpenAI API."""

    family = ProviderFamily.OPENAI
    display_name = "OpenAI"
    credential_env = "OPENAI_API_KEY"
    model_prefix = "openai/"

    def _api_key(self) -> SecretStr | None:
        return self._settings.openai_api_key

    def _client_options(self) -> dict[str, Any]:
        return {"base_url": self._settings.openai_base_url}
