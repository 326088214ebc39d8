"""Text-generation backends used by the summarizer.

Every backend exposes ``generate(prompt) -> str`` and raises
:class:`~vault.errors.ServiceError` for any provider failure.
"""

from __future__ import annotations

from typing import Any, Protocol

import anthropic
import openai
from anthropic.types import TextBlock

from vault.config import Settings
from vault.errors import ConfigError, ServiceError


DEFAULT_MODELS = {
    "openai": "gpt-4",
    "anthropic": "claude-sonnet-4-20250514",
}


class TextGenerator(Protocol):
    def generate(self, prompt: str) -> str: ...


class OpenAIGenerator:
    """Chat-completion backend using the OpenAI SDK."""

    def __init__(
        self,
        model: str = "gpt-4",
        temperature: float = 0.5,
        api_key: str | None = None,
        client: Any | None = None,
    ) -> None:
        self.model = model
        self.temperature = temperature
        self._api_key = api_key or None  # None lets the SDK read OPENAI_API_KEY
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = openai.OpenAI(api_key=self._api_key)
        return self._client

    def generate(self, prompt: str) -> str:
        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.temperature,
            )
        except openai.OpenAIError as exc:
            raise ServiceError(f"OpenAI request failed: {exc}") from exc

        content = completion.choices[0].message.content if completion.choices else None
        if content is None:
            raise ServiceError("OpenAI returned an empty completion")
        return str(content)


class AnthropicGenerator:
    """Messages-API backend using the Anthropic SDK."""

    def __init__(
        self,
        model: str,
        temperature: float = 0.5,
        max_tokens: int = 1024,
        api_key: str | None = None,
        client: Any | None = None,
    ) -> None:
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._api_key = api_key or None
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = anthropic.Anthropic(api_key=self._api_key)
        return self._client

    def generate(self, prompt: str) -> str:
        try:
            response = self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.AnthropicError as exc:
            raise ServiceError(f"Anthropic request failed: {exc}") from exc

        # We only request plain text, so the first block should be a TextBlock.
        block = response.content[0] if response.content else None
        if not isinstance(block, TextBlock):
            raise ServiceError(f"Expected TextBlock from Claude, got {type(block).__name__}")
        return block.text


def build_generator(settings: Settings) -> TextGenerator:
    """Create the generation backend named by ``settings.llm_provider``.

    An empty ``settings.llm_model`` selects the provider's entry in
    :data:`DEFAULT_MODELS`.
    """
    if settings.llm_provider not in DEFAULT_MODELS:
        msg = f"Unknown LLM provider: {settings.llm_provider!r}. Supported: openai, anthropic"
        raise ConfigError(msg)

    model = settings.llm_model or DEFAULT_MODELS[settings.llm_provider]
    if settings.llm_provider == "openai":
        return OpenAIGenerator(
            model=model,
            temperature=settings.llm_temperature,
            api_key=settings.openai_api_key,
        )
    return AnthropicGenerator(
        model=model,
        temperature=settings.llm_temperature,
        max_tokens=settings.llm_max_tokens,
        api_key=settings.anthropic_api_key,
    )
