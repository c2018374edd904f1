"""Tests for generation provider modules."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from vcsnote import config
from vcsnote.config import LLMProvider
from vcsnote.errors import COMMAND_NOT_FOUND
from vcsnote.llm import generate_commit_message, get_provider
from vcsnote.llm.anthropic_provider import AnthropicProvider
from vcsnote.llm.cli_provider import LLMCliProvider
from vcsnote.llm.exceptions import (
    EmptyGenerationError,
    GenerationServiceError,
    LLMError,
    MissingAPIKeyError,
)
from vcsnote.llm.prompts import SYSTEM_PROMPT


class TestGetProvider:
    """Tests for get_provider factory function."""

    def test_default_is_llm_cli(self):
        """Test that the llm command is the default provider."""
        provider = get_provider()
        assert isinstance(provider, LLMCliProvider)
        assert provider.model == config.DEFAULT_MODEL

    def test_returns_anthropic_provider(self):
        """Test getting Anthropic provider."""
        provider = get_provider(LLMProvider.ANTHROPIC)
        assert isinstance(provider, AnthropicProvider)

    def test_custom_model(self):
        """Test provider with custom model."""
        provider = get_provider(LLMProvider.LLM_CLI, model="claude-3.5-haiku")
        assert provider.model == "claude-3.5-haiku"

    def test_uses_active_config(self, monkeypatch):
        """Test that the configured provider and model are used."""
        monkeypatch.setattr(config, "ACTIVE_PROVIDER", LLMProvider.ANTHROPIC)
        monkeypatch.setattr(config, "ACTIVE_MODEL", "claude-3-5-haiku-latest")

        provider = get_provider()

        assert isinstance(provider, AnthropicProvider)
        assert provider.model == "claude-3-5-haiku-latest"

    def test_unsupported_provider_raises_error(self):
        """Test that unsupported provider raises ValueError."""
        with pytest.raises(ValueError) as exc_info:
            get_provider("invalid_provider")
        assert "Unsupported provider" in str(exc_info.value)


class TestLLMCliProvider:
    """Tests for the llm command provider."""

    def test_builds_command(self):
        """Test the argv carries model and system prompt, not the diff."""
        cmd = LLMCliProvider(model="gpt-4o").build_command()

        assert cmd == ["llm", "--model", "gpt-4o", "--system", SYSTEM_PROMPT]

    def test_sends_diff_on_stdin(self, fake_tools, sample_diff, sample_message):
        """Test the diff is passed verbatim as the only content."""
        fake_tools.llm_output(stdout=sample_message + "\n")

        result = LLMCliProvider(model="gpt-4o").generate(sample_diff)

        cmd, kwargs = fake_tools.find_call("llm")
        assert kwargs["input"] == sample_diff
        assert sample_diff not in cmd
        assert result.message == sample_message
        assert result.provider == "llm"
        assert result.model == "gpt-4o"
        assert result.input_chars == len(sample_diff)

    def test_non_zero_exit_propagates(self, fake_tools, sample_diff):
        """Test a failing service keeps its exit code."""
        fake_tools.llm_output(stdout="", returncode=2, stderr="Error: Unknown model")

        with pytest.raises(GenerationServiceError) as exc_info:
            LLMCliProvider(model="nope").generate(sample_diff)

        assert exc_info.value.exit_code == 2
        assert "Unknown model" in str(exc_info.value)
        assert "exited with code 2" in str(exc_info.value)

    def test_empty_output(self, fake_tools, sample_diff):
        """Test whitespace-only output is an empty generation result."""
        fake_tools.llm_output(stdout=" \n\n ")

        with pytest.raises(EmptyGenerationError):
            LLMCliProvider(model="gpt-4o").generate(sample_diff)

    def test_missing_executable(self, fake_tools, sample_diff):
        """Test a missing llm command maps to exit code 127."""
        fake_tools.installed.discard("llm")

        with pytest.raises(GenerationServiceError) as exc_info:
            LLMCliProvider(model="gpt-4o").generate(sample_diff)

        assert exc_info.value.exit_code == COMMAND_NOT_FOUND
        assert "not installed" in str(exc_info.value)

    def test_single_attempt(self, fake_tools, sample_diff):
        """Test a failure is not retried."""
        fake_tools.llm_output(stdout="", returncode=1)

        with pytest.raises(GenerationServiceError):
            generate_commit_message(sample_diff)

        assert len([c for c in fake_tools.commands() if c[0] == "llm"]) == 1


class TestAnthropicProvider:
    """Tests for AnthropicProvider."""

    def test_missing_api_key(self, sample_diff):
        """Test error when ANTHROPIC_API_KEY is not set."""
        with pytest.raises(MissingAPIKeyError) as exc_info:
            AnthropicProvider(model="claude-sonnet-4-20250514").generate(sample_diff)
        assert "ANTHROPIC_API_KEY" in str(exc_info.value)

    def test_generate(self, mocker, monkeypatch, sample_diff, sample_message):
        """Test the diff is the sole user message and the text is returned."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test")
        client = MagicMock()
        client.messages.create.return_value = SimpleNamespace(
            content=[SimpleNamespace(text=sample_message)]
        )
        mock_cls = mocker.patch(
            "vcsnote.llm.anthropic_provider.Anthropic", return_value=client
        )

        result = AnthropicProvider(model="claude-sonnet-4-20250514").generate(sample_diff)

        mock_cls.assert_called_once_with(api_key="sk-ant-test")
        kwargs = client.messages.create.call_args.kwargs
        assert kwargs["model"] == "claude-sonnet-4-20250514"
        assert kwargs["system"] == SYSTEM_PROMPT
        assert kwargs["messages"] == [{"role": "user", "content": sample_diff}]
        assert kwargs["max_tokens"] == config.MAX_TOKENS
        assert result.message == sample_message
        assert result.provider == "anthropic"

    def test_api_failure(self, mocker, monkeypatch, sample_diff):
        """Test SDK errors become LLMError with exit code 1."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test")
        client = MagicMock()
        client.messages.create.side_effect = RuntimeError("overloaded")
        mocker.patch("vcsnote.llm.anthropic_provider.Anthropic", return_value=client)

        with pytest.raises(LLMError) as exc_info:
            AnthropicProvider(model="claude-sonnet-4-20250514").generate(sample_diff)

        assert "overloaded" in str(exc_info.value)
        assert exc_info.value.exit_code == 1

    def test_empty_response(self, mocker, monkeypatch, sample_diff):
        """Test an empty text response is rejected."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test")
        client = MagicMock()
        client.messages.create.return_value = SimpleNamespace(
            content=[SimpleNamespace(text="   ")]
        )
        mocker.patch("vcsnote.llm.anthropic_provider.Anthropic", return_value=client)

        with pytest.raises(EmptyGenerationError):
            AnthropicProvider(model="claude-sonnet-4-20250514").generate(sample_diff)
