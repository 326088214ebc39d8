"""Tests for the OpenAI and Anthropic generation backends (SDK clients mocked)."""

from __future__ import annotations

from unittest.mock import MagicMock

import anthropic
import openai
import pytest
from anthropic.types import TextBlock

from vault.config import Settings
from vault.errors import ConfigError, ServiceError
from vault.summarization.generation import (
    DEFAULT_MODELS,
    AnthropicGenerator,
    OpenAIGenerator,
    build_generator,
)


def _openai_completion(content: str | None) -> MagicMock:
    completion = MagicMock()
    completion.choices = [MagicMock()]
    completion.choices[0].message.content = content
    return completion


class TestOpenAIGenerator:
    def test_returns_message_content(self) -> None:
        client = MagicMock()
        client.chat.completions.create.return_value = _openai_completion("- point one")

        gen = OpenAIGenerator(model="gpt-4", temperature=0.5, client=client)
        assert gen.generate("Summarize this") == "- point one"

        client.chat.completions.create.assert_called_once_with(
            model="gpt-4",
            messages=[{"role": "user", "content": "Summarize this"}],
            temperature=0.5,
        )

    def test_sdk_error_becomes_service_error(self) -> None:
        client = MagicMock()
        client.chat.completions.create.side_effect = openai.OpenAIError("quota exceeded")

        gen = OpenAIGenerator(client=client)
        with pytest.raises(ServiceError, match="quota exceeded"):
            gen.generate("prompt")

    def test_empty_content_is_service_error(self) -> None:
        client = MagicMock()
        client.chat.completions.create.return_value = _openai_completion(None)

        with pytest.raises(ServiceError, match="empty completion"):
            OpenAIGenerator(client=client).generate("prompt")


class TestAnthropicGenerator:
    def test_returns_text_block(self) -> None:
        client = MagicMock()
        client.messages.create.return_value.content = [TextBlock(type="text", text="- a point")]

        gen = AnthropicGenerator(model="claude-test", temperature=0.5, max_tokens=256, client=client)
        assert gen.generate("Summarize this") == "- a point"

        kwargs = client.messages.create.call_args.kwargs
        assert kwargs["model"] == "claude-test"
        assert kwargs["max_tokens"] == 256
        assert kwargs["temperature"] == 0.5
        assert kwargs["messages"] == [{"role": "user", "content": "Summarize this"}]

    def test_sdk_error_becomes_service_error(self) -> None:
        client = MagicMock()
        client.messages.create.side_effect = anthropic.AnthropicError("overloaded")

        with pytest.raises(ServiceError, match="overloaded"):
            AnthropicGenerator(model="m", client=client).generate("prompt")

    def test_non_text_block_is_service_error(self) -> None:
        client = MagicMock()
        client.messages.create.return_value.content = [MagicMock(type="tool_use")]

        with pytest.raises(ServiceError, match="Expected TextBlock"):
            AnthropicGenerator(model="m", client=client).generate("prompt")


class TestBuildGenerator:
    def test_openai_default(self) -> None:
        gen = build_generator(Settings(_env_file=None, llm_provider="openai", llm_model=""))  # type: ignore[call-arg]
        assert isinstance(gen, OpenAIGenerator)
        assert gen.model == "gpt-4"
        assert gen.temperature == 0.5

    def test_anthropic(self) -> None:
        gen = build_generator(
            Settings(_env_file=None, llm_provider="anthropic", llm_model="claude-x")  # type: ignore[call-arg]
        )
        assert isinstance(gen, AnthropicGenerator)
        assert gen.model == "claude-x"

    def test_anthropic_default_model(self) -> None:
        gen = build_generator(
            Settings(_env_file=None, llm_provider="anthropic", llm_model="")  # type: ignore[call-arg]
        )
        assert isinstance(gen, AnthropicGenerator)
        assert gen.model == DEFAULT_MODELS["anthropic"]
        assert gen.model.startswith("claude-")

    def test_unknown_provider(self) -> None:
        with pytest.raises(ConfigError, match="Unknown LLM provider"):
            build_generator(Settings(_env_file=None, llm_provider="mistral"))  # type: ignore[call-arg]
