"""Anthropic Claude provider implementation."""

from anthropic import Anthropic

from vcsnote import config
from vcsnote.config import LLMProvider, get_api_key_env_var
from vcsnote.llm.base import BaseLLMProvider, LLMResult
from vcsnote.llm.exceptions import LLMError


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude provider using the Messages API."""

    provider_name = LLMProvider.ANTHROPIC.value

    def __init__(self, model: str):
        super().__init__(model)
        self.api_key_env_var = get_api_key_env_var(LLMProvider.ANTHROPIC)

    def get_api_key(self) -> str:
        """Get the Anthropic API key from the environment.

        Raises:
            MissingAPIKeyError: If ANTHROPIC_API_KEY is not set.
        """
        return self._get_api_key(self.api_key_env_var, "Anthropic")

    def generate(self, diff: str) -> LLMResult:
        """Generate a commit message using Anthropic Claude.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            LLMError: If the API call fails.
            EmptyGenerationError: If the response has no text.
        """
        api_key = self.get_api_key()

        client = Anthropic(api_key=api_key)

        try:
            message = client.messages.create(
                model=self.model,
                max_tokens=config.MAX_TOKENS,
                temperature=config.TEMPERATURE,
                system=self.system_prompt,
                messages=[{"role": "user", "content": diff}],
            )
        except Exception as e:
            raise LLMError(f"Anthropic API call failed: {e}")

        raw_response = "".join(
            getattr(block, "text", "") for block in message.content
        )
        return self._build_result(raw_response, diff)
