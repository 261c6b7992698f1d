import logging

from app.models.assistant.models import Assistant
from app.models.chat.models import ChatMessage
from app.models.model.models import ModelOption
from app.services.llm.config.llm_config import LlmConfig
from app.services.llm.llm_message import LlmMessage
from app.services.llm.llm_service_base import LlmService, ResponseGenerationError
from prompts.chat_prompts import (
    ASSISTANT_SYSTEM_MESSAGE_TEMPLATE,
    CHAT_TITLE_SYSTEM_MESSAGE,
    CHAT_TITLE_USER_MESSAGE_TEMPLATE,
)


TITLE_MAX_LENGTH = 50
TITLE_FALLBACK_LENGTH = 47
TITLE_MAX_TOKENS = 20
REPLY_MAX_TOKENS = 2000
TEMPERATURE = 0.7

logger = logging.getLogger(__name__)


def truncate_title(first_message: str, always_ellipsis: bool = False) -> str:
    """Derive a title from the message itself, used when the model gives no usable title"""
    truncated = first_message[:TITLE_FALLBACK_LENGTH]
    if always_ellipsis or len(first_message) > TITLE_FALLBACK_LENGTH:
        return truncated + "..."
    return truncated


class ChatCompletionService:
    """Builds prompts for chat titles and persona replies and sends them to the LLM"""

    def __init__(self, llm_service: LlmService, title_model: str) -> None:
        self._llm_service = llm_service
        self._title_model = title_model

    async def generate_title(self, first_message: str) -> str:
        """
        Ask the title model for a short title. Never raises: on failure the
        title falls back to a truncated copy of the first message.
        """
        try:
            response = await self._llm_service.get_completion(
                model=self._title_model,
                messages=[
                    LlmMessage.system(CHAT_TITLE_SYSTEM_MESSAGE),
                    LlmMessage.user(CHAT_TITLE_USER_MESSAGE_TEMPLATE.format(first_message=first_message)),
                ],
                config=LlmConfig(max_tokens=TITLE_MAX_TOKENS, temperature=TEMPERATURE),
            )
        except ResponseGenerationError as e:
            logger.warning("Falling back to truncated title: %s", e)
            return truncate_title(first_message)
        except Exception:
            logger.exception("Unexpected error while generating title, falling back to truncated title")
            return truncate_title(first_message)

        title = response.content.strip()
        if not title:
            logger.warning("Falling back to truncated title: model returned an empty title")
            return truncate_title(first_message)

        if len(title) > TITLE_MAX_LENGTH:
            logger.warning(
                "Falling back to truncated title: generated title has %d characters (limit %d)",
                len(title),
                TITLE_MAX_LENGTH,
            )
            return truncate_title(first_message, always_ellipsis=True)

        return title

    def _prepare_llm_messages(self, assistant: Assistant, history: list[ChatMessage]) -> list[LlmMessage]:
        return [
            LlmMessage.system(
                ASSISTANT_SYSTEM_MESSAGE_TEMPLATE.format(
                    instructions=assistant.instructions,
                    persona=assistant.persona,
                )
            ),
            *[LlmMessage(role=msg.role, content=msg.content) for msg in history],
        ]

    async def generate_reply(
        self,
        assistant: Assistant,
        history: list[ChatMessage],
        model_option: ModelOption,
    ) -> str:
        """Generate the assistant's next turn; raises ResponseGenerationError on failure"""
        response = await self._llm_service.get_completion(
            model=model_option.model_name,
            messages=self._prepare_llm_messages(assistant, history),
            config=LlmConfig(
                max_tokens=REPLY_MAX_TOKENS,
                temperature=TEMPERATURE,
                reasoning=model_option.reasoning,
            ),
        )
        return response.content
