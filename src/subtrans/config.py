"""Configuration management via environment variables."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .errors import InvalidArgumentError

DEFAULT_CLAUDE_COMMAND = "claude -p --output-format text"


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")


@dataclass
class Config:
    """Application configuration loaded from environment."""

    provider: str = "claude"
    claude_command: str = DEFAULT_CLAUDE_COMMAND
    oracle_timeout: int = 300  # seconds
    chunk_size: int = 50
    workers: int = 1
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o"
    deepseek_api_key: str | None = None
    deepseek_base_url: str = "https://api.deepseek.com"
    openrouter_api_key: str | None = None
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    groq_api_key: str | None = None
    groq_base_url: str = "https://api.groq.com/openai/v1"
    ollama_model: str = "llama3.1:8b"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        load_dotenv()
        return cls(
            provider=os.getenv("SUBTRANS_PROVIDER", "claude"),
            claude_command=os.getenv("SUBTRANS_CLAUDE_COMMAND", DEFAULT_CLAUDE_COMMAND),
            oracle_timeout=_int_env("SUBTRANS_ORACLE_TIMEOUT", 300),
            chunk_size=_int_env("SUBTRANS_CHUNK_SIZE", 50),
            workers=_int_env("SUBTRANS_WORKERS", 1),
            openai_api_key=os.getenv("OPENAI_API_KEY"),
            openai_model=os.getenv("SUBTRANS_OPENAI_MODEL", "gpt-4o"),
            deepseek_api_key=os.getenv("DEEPSEEK_API_KEY"),
            deepseek_base_url=os.getenv(
                "DEEPSEEK_BASE_URL", "https://api.deepseek.com"
            ),
            openrouter_api_key=os.getenv("OPENROUTER_API_KEY"),
            openrouter_base_url=os.getenv(
                "OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1"
            ),
            groq_api_key=os.getenv("GROQ_API_KEY"),
            groq_base_url=os.getenv(
                "GROQ_BASE_URL", "https://api.groq.com/openai/v1"
            ),
            ollama_model=os.getenv("SUBTRANS_OLLAMA_MODEL", "llama3.1:8b"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def has_openai(self) -> bool:
        """Check if OpenAI API key is configured."""
        return bool(self.openai_api_key)

    def has_deepseek(self) -> bool:
        """Check if DeepSeek API key is configured."""
        return bool(self.deepseek_api_key)

    def has_openrouter(self) -> bool:
        """Check if OpenRouter API key is configured."""
        return bool(self.openrouter_api_key)

    def has_groq(self) -> bool:
        """Check if Groq API key is configured."""
        return bool(self.groq_api_key)
