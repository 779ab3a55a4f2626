"""Configuration management for captain_claw.

This module provides typed configuration classes using pydantic-settings.
Configuration is loaded from environment variables with optional .env file support.
"""

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "MongoSettings",
    "LLMSettings",
    "ChatSettings",
    "CaptainClawConfig",
]


class MongoSettings(BaseSettings):
    """MongoDB connection settings."""

    model_config = SettingsConfigDict(
        env_prefix="CAPTAIN_CLAW_MONGO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    uri: SecretStr = SecretStr("mongodb://localhost:27017")
    database: str = "captain_claw"
    collection_prefix: str = ""


class LLMSettings(BaseSettings):
    """LLM provider settings.

    Provider credentials keep their conventional environment names
    (OPENAI_API_KEY, OPENROUTER_API_KEY, OLLAMA_MODEL) so existing
    deployments keep working; the prefixed names are accepted as well.
    """

    model_config = SettingsConfigDict(
        env_prefix="CAPTAIN_CLAW_LLM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    openai_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "CAPTAIN_CLAW_LLM_OPENAI_API_KEY"),
    )
    openrouter_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "OPENROUTER_API_KEY", "CAPTAIN_CLAW_LLM_OPENROUTER_API_KEY"
        ),
    )
    ollama_model: str = Field(
        default="mistral:latest",
        validation_alias=AliasChoices("OLLAMA_MODEL", "CAPTAIN_CLAW_LLM_OLLAMA_MODEL"),
    )
    ollama_base_url: str = Field(
        default="http://localhost:11434",
        validation_alias=AliasChoices("OLLAMA_BASE_URL", "CAPTAIN_CLAW_LLM_OLLAMA_BASE_URL"),
    )

    openai_base_url: str = "https://api.openai.com/v1"
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_referer: str = "https://captainclaw.ai"
    openrouter_title: str = "CaptainClaw"

    # Fixed generation parameters for remote providers
    temperature: float = 0.7
    max_tokens: int = 2000

    request_timeout: float = 120.0
    max_retries: int = 0  # Failures surface immediately to the caller


class ChatSettings(BaseSettings):
    """Chat request shaping settings."""

    model_config = SettingsConfigDict(
        env_prefix="CAPTAIN_CLAW_CHAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    history_limit: int = 10
    default_model: str = "openrouter/anthropic/claude-haiku-4.5"


class CaptainClawConfig(BaseSettings):
    """Main configuration aggregating all settings.

    Example usage:
        config = CaptainClawConfig()
        key = config.llm.openrouter_api_key
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Component settings (nested)
    mongo: MongoSettings = Field(default_factory=MongoSettings)
    llm: LLMSettings = Field(default_factory=LLMSettings)
    chat: ChatSettings = Field(default_factory=ChatSettings)
