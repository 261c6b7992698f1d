from datetime import datetime
from pydantic import BaseModel

from app.models.assistant.responses import AssistantSummaryResponse
from app.models.chat.enums import MessageRole


class ChatMessageResponse(BaseModel):
    id: str
    chat_id: str
    role: MessageRole
    content: str
    created_at: datetime


class ChatResponse(BaseModel):
    id: str
    assistant_id: str
    title: str
    created_at: datetime
    updated_at: datetime
    assistant: AssistantSummaryResponse


class ChatListResponse(BaseModel):
    chats: list[ChatResponse]


class SendMessageResponse(BaseModel):
    user_message: ChatMessageResponse
    assistant_message: ChatMessageResponse
