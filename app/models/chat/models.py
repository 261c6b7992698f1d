from datetime import datetime
from dataclasses import dataclass

from app.models.assistant.models import Assistant
from app.models.chat.enums import MessageRole
from app.models.chat.responses import ChatMessageResponse, ChatResponse


@dataclass
class ChatMessage:
    id: str
    chat_id: str
    role: MessageRole
    content: str
    created_at: datetime

    def to_response(self) -> ChatMessageResponse:
        return ChatMessageResponse(
            id=self.id,
            chat_id=self.chat_id,
            role=self.role,
            content=self.content,
            created_at=self.created_at,
        )


@dataclass
class Chat:
    id: str
    assistant_id: str
    title: str
    created_at: datetime
    updated_at: datetime
    assistant: Assistant

    def to_response(self) -> ChatResponse:
        return ChatResponse(
            id=self.id,
            assistant_id=self.assistant_id,
            title=self.title,
            created_at=self.created_at,
            updated_at=self.updated_at,
            assistant=self.assistant.to_summary_response(),
        )
