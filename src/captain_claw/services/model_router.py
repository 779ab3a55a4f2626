"""Model routing service for captain_claw.

This module resolves an explicit model id or a complexity hint into a
canonical, provider-prefixed model id and tags it with its provider family.
"""

from collections.abc import Mapping

from captain_claw.exceptions import ConfigurationError
from captain_claw.logging import get_logger
from captain_claw.models.routing import ComplexityHint, ModelSelection, ProviderFamily

__all__ = [
    "COMPLEXITY_ROUTES",
    "MODEL_ALIASES",
    "ModelRouter",
    "provider_family_for",
]

logger = get_logger(__name__)

# Short aliases to canonical ids. The prefix selects the provider variant.
MODEL_ALIASES: dict[str, str] = {
    # OpenAI
    "gpt4o": "openai/gpt-4o",
    "gpt4-turbo": "openai/gpt-4-turbo",
    "gpt35": "openai/gpt-3.5-turbo",
    # OpenRouter
    "haiku": "openrouter/anthropic/claude-haiku-4.5",
    "gemini": "openrouter/google/gemini-flash-1.5",
    "opus": "openrouter/anthropic/claude-opus-4",
    "sonnet": "openrouter/anthropic/claude-sonnet-4.5",
    "deepseek": "openrouter/deepseek/deepseek-r1-distill-qwen-32b",
    "kimi": "openrouter/moonshotai/kimi-k2",
    # Local
    "ollama": "ollama",
}

COMPLEXITY_ROUTES: dict[ComplexityHint, str] = {
    ComplexityHint.SIMPLE: "haiku",
    ComplexityHint.CODING: "kimi",
    ComplexityHint.FRONTEND: "gemini",
    ComplexityHint.HARD: "sonnet",
}

_LOOPBACK_MARKERS = ("localhost", "127.0.0.1", "[::1]")


def provider_family_for(canonical_id: str) -> ProviderFamily:
    """Determine which provider family serves a canonical model id.

    Args:
        canonical_id: Provider-prefixed model id

    Returns:
        ProviderFamily for the id

    Raises:
        ConfigurationError: If the id matches no provider family
    """
    if canonical_id.startswith("openai/"):
        return ProviderFamily.OPENAI
    if "openrouter" in canonical_id:
        return ProviderFamily.OPENROUTER
    if "ollama" in canonical_id or any(m in canonical_id for m in _LOOPBACK_MARKERS):
        return ProviderFamily.LOCAL
    raise ConfigurationError(
        f"Cannot route model id {canonical_id!r}: expected an 'openai/', "
        "'openrouter/' or 'ollama' prefix"
    )


class ModelRouter:
    """Resolves model requests to canonical ids.

    An explicit id always wins and is returned unchanged. Otherwise the
    complexity hint picks a fixed model, with "simple" as the fallback
    for missing or unknown hints.

    Example:
        router = ModelRouter()
        router.select_model(None, "hard")
        # 'openrouter/anthropic/claude-sonnet-4.5'
        selection = router.resolve("openai/gpt-4o")
    """

    def __init__(
        self,
        aliases: Mapping[str, str] | None = None,
        routes: Mapping[ComplexityHint, str] | None = None,
    ) -> None:
        """Initialize router with routing tables.

        Args:
            aliases: Alias to canonical id table (defaults to MODEL_ALIASES)
            routes: Complexity hint to alias table (defaults to COMPLEXITY_ROUTES)
        """
        self._aliases = dict(MODEL_ALIASES if aliases is None else aliases)
        self._routes = dict(COMPLEXITY_ROUTES if routes is None else routes)
        if ComplexityHint.SIMPLE not in self._routes:
            raise ConfigurationError("Complexity routes must define a 'simple' default")

    def resolve_alias(self, alias: str) -> str:
        """Get the canonical id for a short alias.

        Raises:
            ConfigurationError: If the alias is unknown
        """
        try:
            return self._aliases[alias]
        except KeyError:
            available = ", ".join(sorted(self._aliases)) or "none"
            raise ConfigurationError(
                f"Unknown model alias: {alias}. Available: {available}"
            ) from None

    def select_model(
        self,
        explicit_id: str | None = None,
        complexity_hint: ComplexityHint | str | None = None,
    ) -> str:
        """Pick the canonical model id for a request."""
        if explicit_id:
            return explicit_id

        try:
            hint = ComplexityHint(complexity_hint) if complexity_hint else ComplexityHint.SIMPLE
        except ValueError:
            logger.debug("unknown_complexity_hint", hint=complexity_hint)
            hint = ComplexityHint.SIMPLE

        target = self._routes.get(hint, self._routes[ComplexityHint.SIMPLE])
        # Routes may name an alias or a canonical id directly
        return self._aliases.get(target, target)

    def resolve(
        self,
        explicit_id: str | None = None,
        complexity_hint: ComplexityHint | str | None = None,
    ) -> ModelSelection:
        """Pick the model and tag it with its provider family.

        Raises:
            ConfigurationError: If the chosen id matches no provider family
        """
        canonical_id = self.select_model(explicit_id, complexity_hint)
        return ModelSelection(
            canonical_id=canonical_id,
            provider_family=provider_family_for(canonical_id),
        )
