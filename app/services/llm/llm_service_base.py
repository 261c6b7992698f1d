from abc import abstractmethod, ABC

from app.services.llm.config.llm_config import LlmConfig
from app.services.llm.llm_message import LlmMessage


class ResponseGenerationError(Exception):
    """Raised when the language model could not produce a usable completion"""
    pass


class LlmService(ABC):
    """Abstract base class for LLM service implementations"""

    @abstractmethod
    async def get_completion(
        self,
        model: str,
        messages: list[LlmMessage],
        config: LlmConfig | None = None,
    ) -> LlmMessage:
        """
        Prompt a model and get an answer.
        `messages` contains the conversation history including system, user, and assistant messages.
        The returned assistant message has its content trimmed and is never empty.
        Raises `ResponseGenerationError` if the request fails or the model returns no content.
        """
        pass
