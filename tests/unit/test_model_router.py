"""Unit tests for captain_claw model routing."""

import pytest

from captain_claw.exceptions import ConfigurationError
from captain_claw.models.routing import ComplexityHint, ProviderFamily
from captain_claw.services.model_router import (
    MODEL_ALIASES,
    ModelRouter,
    provider_family_for,
)


class TestSelectModel:
    """Tests for ModelRouter.select_model."""

    def test_explicit_id_wins(self) -> None:
        router = ModelRouter()
        assert router.select_model("openai/gpt-4o", "hard") == "openai/gpt-4o"

    def test_explicit_id_is_not_alias_mapped(self) -> None:
        router = ModelRouter()
        assert router.select_model("haiku", None) == "haiku"

    def test_missing_hint_is_simple(self) -> None:
        router = ModelRouter()
        assert router.select_model(None, None) == router.select_model(None, "simple")
        assert router.select_model() == "openrouter/anthropic/claude-haiku-4.5"

    def test_empty_explicit_id_falls_back_to_hint(self) -> None:
        router = ModelRouter()
        assert router.select_model("", "hard") == "openrouter/anthropic/claude-sonnet-4.5"

    @pytest.mark.parametrize(
        ("hint", "expected"),
        [
            ("simple", "openrouter/anthropic/claude-haiku-4.5"),
            ("coding", "openrouter/moonshotai/kimi-k2"),
            ("frontend", "openrouter/google/gemini-flash-1.5"),
            ("hard", "openrouter/anthropic/claude-sonnet-4.5"),
            (ComplexityHint.HARD, "openrouter/anthropic/claude-sonnet-4.5"),
        ],
    )
    def test_each_hint(self, hint: str, expected: str) -> None:
        assert ModelRouter().select_model(None, hint) == expected

    def test_unknown_hint_falls_back_to_simple(self) -> None:
        router = ModelRouter()
        assert router.select_model(None, "galaxy-brain") == MODEL_ALIASES["haiku"]

    def test_custom_routes(self) -> None:
        router = ModelRouter(routes={ComplexityHint.SIMPLE: "openai/gpt-4o-mini"})
        assert router.select_model(None, "hard") == "openai/gpt-4o-mini"

    def test_routes_require_simple_default(self) -> None:
        with pytest.raises(ConfigurationError):
            ModelRouter(routes={ComplexityHint.HARD: "sonnet"})


class TestAliases:
    """Tests for alias resolution."""

    def test_resolve_alias(self) -> None:
        assert ModelRouter().resolve_alias("gpt4o") == "openai/gpt-4o"

    def test_unknown_alias(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown model alias: nope"):
            ModelRouter().resolve_alias("nope")

    def test_every_alias_routes_to_a_family(self) -> None:
        for canonical_id in MODEL_ALIASES.values():
            provider_family_for(canonical_id)


class TestProviderFamily:
    """Tests for provider_family_for."""

    @pytest.mark.parametrize(
        ("canonical_id", "family"),
        [
            ("openai/gpt-4o", ProviderFamily.OPENAI),
            ("openrouter/anthropic/claude-haiku-4.5", ProviderFamily.OPENROUTER),
            ("openrouter", ProviderFamily.OPENROUTER),
            ("ollama", ProviderFamily.LOCAL),
            ("ollama/llama3", ProviderFamily.LOCAL),
            ("http://localhost:11434/api/chat", ProviderFamily.LOCAL),
            ("http://127.0.0.1:8080/api/chat", ProviderFamily.LOCAL),
        ],
    )
    def test_families(self, canonical_id: str, family: ProviderFamily) -> None:
        assert provider_family_for(canonical_id) == family

    @pytest.mark.parametrize("canonical_id", ["gpt-4o", "anthropic/claude-3", "mistral"])
    def test_unroutable_id(self, canonical_id: str) -> None:
        with pytest.raises(ConfigurationError):
            provider_family_for(canonical_id)

    def test_resolve_tags_family(self) -> None:
        selection = ModelRouter().resolve(None, "frontend")

        assert selection.canonical_id == "openrouter/google/gemini-flash-1.5"
        assert selection.provider_family == ProviderFamily.OPENROUTER

    def test_resolve_unroutable_explicit_id(self) -> None:
        with pytest.raises(ConfigurationError):
            ModelRouter().resolve("claude-3-haiku")
