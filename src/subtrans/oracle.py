"""Translation oracles: external services that turn a prompt into a reply.

Every oracle exposes a single ``invoke(prompt) -> str`` method. Failures of
any kind (non-zero exit, timeout, transport error) raise OracleError.
"""

import logging
import shlex
import subprocess
from typing import Protocol

import httpx
import ollama
from openai import OpenAI, OpenAIError

from .config import Config
from .errors import InvalidArgumentError, OracleError

logger = logging.getLogger(__name__)

PROVIDERS = ("claude", "openai", "deepseek", "openrouter", "groq", "ollama")


class Oracle(Protocol):
    def invoke(self, prompt: str) -> str:
        ...


class ClaudeCliOracle:
    """Runs the Claude CLI with the prompt on stdin and returns its stdout."""

    def __init__(self, command: str | list[str] = "claude -p --output-format text", timeout: float | None = 300):
        self.command = shlex.split(command) if isinstance(command, str) else list(command)
        self.timeout = timeout

    def invoke(self, prompt: str) -> str:
        logger.debug("Invoking %s (%d chars)", self.command[0], len(prompt))
        try:
            result = subprocess.run(
                self.command,
                input=prompt,
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise OracleError(
                f"{self.command[0]} timed out after {self.timeout}s",
                diagnostic=str(e.stderr or ""),
            ) from e
        except OSError as e:
            raise OracleError(f"Could not run {self.command[0]}: {e}", diagnostic=str(e)) from e

        if result.returncode != 0:
            raise OracleError(
                f"{self.command[0]} failed with exit code {result.returncode}: {result.stderr.strip()}",
                diagnostic=result.stderr,
            )

        return result.stdout


class OpenAIOracle:
    """Chat completion oracle for OpenAI-compatible APIs."""

    def __init__(
        self,
        client: OpenAI,
        model: str,
        temperature: float | None = 0.3,
    ):
        self.client = client
        self.model = model
        # GPT-5 models don't support custom temperature
        self.temperature = None if model.startswith("gpt-5") else temperature

    def invoke(self, prompt: str) -> str:
        kwargs = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
        }
        if self.temperature is not None:
            kwargs["temperature"] = self.temperature

        try:
            response = self.client.chat.completions.create(**kwargs)
        except OpenAIError as e:
            raise OracleError(f"{self.model} request failed: {e}", diagnostic=str(e)) from e

        return response.choices[0].message.content or ""


class OllamaOracle:
    """Chat oracle backed by a local Ollama model."""

    def __init__(
        self,
        model: str = "llama3.1:8b",
        temperature: float = 0.3,
        timeout: float | None = None,
    ):
        self.model = model
        self.temperature = temperature
        self.client = ollama.Client(timeout=timeout)

    def invoke(self, prompt: str) -> str:
        try:
            response = self.client.chat(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                options={"temperature": self.temperature},
            )
        except (ollama.ResponseError, ConnectionError, httpx.HTTPError) as e:
            raise OracleError(f"Ollama {self.model} failed: {e}", diagnostic=str(e)) from e

        return response["message"]["content"] or ""


def create_oracle(
    provider: str,
    config: Config,
    model: str | None = None,
    timeout: float | None = None,
) -> Oracle:
    """Create an oracle for the given provider.

    Raises:
        InvalidArgumentError: If the provider is unknown or its API key is missing
    """
    timeout = timeout if timeout is not None else config.oracle_timeout

    if provider == "claude":
        command = shlex.split(config.claude_command)
        if model:
            command += ["--model", model]
        return ClaudeCliOracle(command, timeout=timeout)

    if provider == "ollama":
        return OllamaOracle(model or config.ollama_model, timeout=timeout)

    if provider == "openai":
        if not config.has_openai():
            raise InvalidArgumentError("OPENAI_API_KEY environment variable required for OpenAI")
        client = OpenAI(api_key=config.openai_api_key, timeout=timeout)
        return OpenAIOracle(client, model or config.openai_model)

    if provider == "deepseek":
        if not config.has_deepseek():
            raise InvalidArgumentError("DEEPSEEK_API_KEY environment variable required for DeepSeek")
        client = OpenAI(
            api_key=config.deepseek_api_key,
            base_url=config.deepseek_base_url,
            timeout=timeout,
        )
        return OpenAIOracle(client, model or "deepseek-chat")

    if provider == "openrouter":
        if not config.has_openrouter():
            raise InvalidArgumentError("OPENROUTER_API_KEY environment variable required for OpenRouter")
        client = OpenAI(
            api_key=config.openrouter_api_key,
            base_url=config.openrouter_base_url,
            timeout=timeout,
        )
        return OpenAIOracle(client, model or f"openai/{config.openai_model}")

    if provider == "groq":
        if not config.has_groq():
            raise InvalidArgumentError("GROQ_API_KEY environment variable required for Groq")
        client = OpenAI(
            api_key=config.groq_api_key,
            base_url=config.groq_base_url,
            timeout=timeout,
        )
        return OpenAIOracle(client, model or "llama-3.3-70b-versatile")

    raise InvalidArgumentError(f"Unknown translation provider: {provider}")
