from dataclasses import dataclass
from typing import Any

from app.models.chat.enums import MessageRole


@dataclass
class LlmMessage:
    role: MessageRole
    content: str

    @staticmethod
    def user(content: str) -> "LlmMessage":
        return LlmMessage(role=MessageRole.USER, content=content)

    @staticmethod
    def assistant(content: str) -> "LlmMessage":
        return LlmMessage(role=MessageRole.ASSISTANT, content=content)

    @staticmethod
    def system(content: str) -> "LlmMessage":
        return LlmMessage(role=MessageRole.SYSTEM, content=content)

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": self.role.value,
            "content": self.content,
        }
