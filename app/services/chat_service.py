import logging
from datetime import datetime, timezone
from uuid import uuid4

from fastapi import HTTPException, status

from app.db.assistant_repo import AssistantRepo
from app.db.chat_repo import ChatRepo
from app.models.chat.enums import MessageRole
from app.models.chat.models import Chat, ChatMessage
from app.models.chat.requests import CreateChatRequest, UpdateChatRequest
from app.models.model.models import ModelOption
from app.services.chat_completion_service import ChatCompletionService
from app.services.model_option_service import ModelOptionService


logger = logging.getLogger(__name__)


class ChatService:
    def __init__(
        self,
        chat_repo: ChatRepo,
        assistant_repo: AssistantRepo,
        completion_service: ChatCompletionService,
        model_option_service: ModelOptionService,
    ) -> None:
        self._chat_repo = chat_repo
        self._assistant_repo = assistant_repo
        self._completion_service = completion_service
        self._model_option_service = model_option_service

    async def create_chat(self, request: CreateChatRequest) -> Chat | None:
        """
        Create a chat with a generated title and store the first user message.
        Returns None if the assistant does not exist. No reply is generated here.
        """
        assistant = self._assistant_repo.get_assistant_by_id(request.assistant_id)
        if assistant is None:
            return None

        title = await self._completion_service.generate_title(request.first_message)

        chat_id = str(uuid4())
        now = datetime.now(timezone.utc)
        chat = self._chat_repo.create_chat(
            chat_id=chat_id,
            assistant_id=assistant.id,
            title=title,
            created_at=now,
        )

        self._chat_repo.add_message(
            message_id=str(uuid4()),
            chat_id=chat_id,
            role=MessageRole.USER,
            content=request.first_message,
            created_at=now,
        )

        logger.info("Created chat %s for assistant %s: %r", chat_id, assistant.id, title)
        return chat

    async def get_chat(self, chat_id: str) -> Chat | None:
        return self._chat_repo.get_chat_by_id(chat_id)

    async def list_chats(self, assistant_id: str | None = None, search: str | None = None) -> list[Chat]:
        chats = self._chat_repo.list_chats(assistant_id)

        term = (search or "").strip().casefold()
        if term:
            chats = [c for c in chats if term in c.title.casefold()]

        return chats

    async def update_chat(self, chat_id: str, request: UpdateChatRequest) -> Chat | None:
        return self._chat_repo.update_chat(chat_id, title=request.title)

    async def delete_chat(self, chat_id: str) -> bool:
        deleted = self._chat_repo.delete_chat(chat_id)
        if deleted:
            logger.info("Deleted chat %s", chat_id)
        return deleted

    async def get_messages(self, chat_id: str) -> list[ChatMessage] | None:
        if self._chat_repo.get_chat_by_id(chat_id) is None:
            return None
        return self._chat_repo.get_messages(chat_id)

    async def send_message(
        self,
        chat_id: str,
        content: str,
        model_id: str | None = None,
    ) -> tuple[ChatMessage, ChatMessage] | None:
        """
        Store a user message and reply to it. Returns (user_message, assistant_message),
        or None if the chat does not exist. The user message stays stored if the reply fails.
        """
        chat = await self.get_chat(chat_id)
        if chat is None:
            return None

        model_option = self._resolve_model_option(model_id)

        user_message = self._chat_repo.add_message(
            message_id=str(uuid4()),
            chat_id=chat_id,
            role=MessageRole.USER,
            content=content,
            created_at=datetime.now(timezone.utc),
        )

        assistant_message = await self._reply(chat, model_option)
        return user_message, assistant_message

    async def generate_response(self, chat_id: str, model_id: str | None = None) -> ChatMessage | None:
        """Reply to the latest user message of a chat; returns None if the chat does not exist"""
        chat = await self.get_chat(chat_id)
        if chat is None:
            return None

        model_option = self._resolve_model_option(model_id)

        messages = self._chat_repo.get_messages(chat_id)
        if not messages:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No messages found in chat",
            )

        if messages[-1].role != MessageRole.USER:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Last message is not from user or already has a response",
            )

        return await self._reply(chat, model_option, history=messages)

    def _resolve_model_option(self, model_id: str | None) -> ModelOption:
        model_option = self._model_option_service.get_option(model_id)
        if model_option is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Unknown model",
            )
        return model_option

    async def _reply(
        self,
        chat: Chat,
        model_option: ModelOption,
        history: list[ChatMessage] | None = None,
    ) -> ChatMessage:
        if history is None:
            history = self._chat_repo.get_messages(chat.id)

        content = await self._completion_service.generate_reply(
            assistant=chat.assistant,
            history=history,
            model_option=model_option,
        )

        return self._chat_repo.add_message(
            message_id=str(uuid4()),
            chat_id=chat.id,
            role=MessageRole.ASSISTANT,
            content=content,
            created_at=datetime.now(timezone.utc),
        )
