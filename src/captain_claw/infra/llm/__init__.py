"""LLM provider implementations for captain_claw."""

from captain_claw.infra.llm.base import OpenAICompatibleProvider
from captain_claw.infra.llm.ollama_provider import OllamaProvider
from captain_claw.infra.llm.openai_provider import OpenAIProvider
from captain_claw.infra.llm.openrouter_provider import OpenRouterProvider

__all__ = ["OllamaProvider", "OpenAICompatibleProvider", "OpenAIProvider", "OpenRouterProvider"]
