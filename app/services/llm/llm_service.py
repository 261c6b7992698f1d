import logging
from typing import Any

from openai import AsyncOpenAI, OpenAIError

from app.services.llm.config.llm_config import LlmConfig
from app.services.llm.llm_message import LlmMessage
from app.services.llm.llm_service_base import LlmService, ResponseGenerationError


logger = logging.getLogger(__name__)


class OpenAiLlmService(LlmService):
    """LLM service backed by an OpenAI-compatible chat completions API"""

    def __init__(self, api_key: str | None, base_url: str | None = None) -> None:
        self._api_key = api_key
        self._base_url = base_url

    def _build_request_params(self, config: LlmConfig) -> dict[str, Any]:
        """Reasoning models take max_completion_tokens and reject temperature"""
        if config.reasoning.is_enabled():
            return {
                "max_completion_tokens": config.max_tokens,
                "reasoning_effort": config.reasoning.effort.value,
            }

        params: dict[str, Any] = {"max_tokens": config.max_tokens}
        if config.temperature is not None:
            params["temperature"] = config.temperature
        return params

    async def get_completion(
        self,
        model: str,
        messages: list[LlmMessage],
        config: LlmConfig | None = None,
    ) -> LlmMessage:
        if config is None:
            config = LlmConfig.default()

        logger.debug("Requesting completion from %s with %d messages", model, len(messages))

        try:
            client = AsyncOpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
            )
            response = await client.chat.completions.create(
                model=model,
                messages=[msg.to_dict() for msg in messages],
                **self._build_request_params(config),
            )
        except OpenAIError as e:
            raise ResponseGenerationError(f"Completion request to '{model}' failed: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        content = (content or "").strip()
        if not content:
            raise ResponseGenerationError(f"Model '{model}' returned an empty completion")

        return LlmMessage.assistant(content)
