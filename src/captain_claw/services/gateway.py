"""Provider gateway for captain_claw.

This module dispatches assembled prompts to the provider variant
registered for a selection's provider family.
"""

from collections.abc import Mapping, Sequence

from captain_claw.config import LLMSettings
from captain_claw.exceptions import ConfigurationError
from captain_claw.infra.llm.ollama_provider import OllamaProvider
from captain_claw.infra.llm.openai_provider import OpenAIProvider
from captain_claw.infra.llm.openrouter_provider import OpenRouterProvider
from captain_claw.interfaces.provider import ProviderInterface
from captain_claw.logging import get_logger
from captain_claw.models.result import ChatResult
from captain_claw.models.routing import ModelSelection, ProviderFamily
from captain_claw.models.turn import ConversationTurn

__all__ = [
    "ProviderGateway",
]

logger = get_logger(__name__)


class ProviderGateway:
    """Dispatches chat requests by provider family.

    Example:
        gateway = ProviderGateway.from_settings(LLMSettings())
        result = await gateway.send(turns, system_prompt, selection)
        await gateway.close()
    """

    def __init__(self, providers: Mapping[ProviderFamily, ProviderInterface]) -> None:
        """Initialize gateway with provider variants.

        Args:
            providers: Provider instance per family
        """
        self._providers = dict(providers)

    @classmethod
    def from_settings(cls, settings: LLMSettings) -> "ProviderGateway":
        """Create a gateway with the OpenAI, OpenRouter and Ollama variants."""
        return cls(
            {
                ProviderFamily.OPENAI: OpenAIProvider(settings),
                ProviderFamily.OPENROUTER: OpenRouterProvider(settings),
                ProviderFamily.LOCAL: OllamaProvider(settings),
            }
        )

    def provider_for(self, family: ProviderFamily) -> ProviderInterface:
        """Get the provider registered for a family.

        Raises:
            ConfigurationError: If no provider is registered for the family
        """
        provider = self._providers.get(family)
        if provider is None:
            raise ConfigurationError(f"No provider configured for family: {family.value}")
        return provider

    async def send(
        self,
        turns: Sequence[ConversationTurn],
        system_prompt: str | None,
        selection: ModelSelection,
    ) -> ChatResult:
        """Send turns to the provider serving the selection.

        Failures are not retried here.
        """
        provider = self.provider_for(selection.provider_family)

        logger.info(
            "chat_dispatched",
            model_id=selection.canonical_id,
            provider=selection.provider_family.value,
            turns=len(turns),
            has_system_prompt=bool(system_prompt),
        )
        result = await provider.send(turns, system_prompt, selection.canonical_id)
        logger.info(
            "chat_completed",
            model_id=result.model_id,
            token_count=result.token_count,
        )
        return result

    async def close(self) -> None:
        """Close all provider clients."""
        for provider in self._providers.values():
            await provider.close()
