from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.dependencies import ChatServiceDep
from app.middleware.auth import verify_api_key
from app.models.chat.requests import (
    CreateChatRequest,
    GenerateResponseRequest,
    SendMessageRequest,
    UpdateChatRequest,
)
from app.models.chat.responses import (
    ChatListResponse,
    ChatMessageResponse,
    ChatResponse,
    SendMessageResponse,
)
from app.models.common.responses import SuccessResponse

router = APIRouter(
    prefix="/chats",
    tags=["chats"],
    dependencies=[Depends(verify_api_key)],
)


def _chat_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Chat not found",
    )


@router.get("", response_model=ChatListResponse)
async def list_chats(
    chat_service: ChatServiceDep,
    assistant_id: str | None = Query(None, description="Only chats bound to this assistant"),
    search: str | None = Query(None, description="Filter by title"),
) -> ChatListResponse:
    chats = await chat_service.list_chats(assistant_id=assistant_id, search=search)

    return ChatListResponse(
        chats=[c.to_response() for c in chats],
    )


@router.post("", response_model=ChatResponse, status_code=status.HTTP_201_CREATED)
async def create_chat(
    request_body: CreateChatRequest,
    chat_service: ChatServiceDep,
) -> ChatResponse:
    chat = await chat_service.create_chat(request_body)
    if chat:
        return chat.to_response()

    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Assistant not found",
    )


@router.get("/{chat_id}", response_model=ChatResponse)
async def get_chat(
    chat_id: str,
    chat_service: ChatServiceDep,
) -> ChatResponse:
    chat = await chat_service.get_chat(chat_id)
    if chat:
        return chat.to_response()

    raise _chat_not_found()


@router.put("/{chat_id}", response_model=ChatResponse)
async def update_chat(
    chat_id: str,
    request_body: UpdateChatRequest,
    chat_service: ChatServiceDep,
) -> ChatResponse:
    chat = await chat_service.update_chat(chat_id, request_body)
    if chat:
        return chat.to_response()

    raise _chat_not_found()


@router.delete("/{chat_id}", response_model=SuccessResponse)
async def delete_chat(
    chat_id: str,
    chat_service: ChatServiceDep,
) -> SuccessResponse:
    if not await chat_service.delete_chat(chat_id):
        raise _chat_not_found()
    return SuccessResponse()


@router.get("/{chat_id}/messages", response_model=list[ChatMessageResponse])
async def get_messages(
    chat_id: str,
    chat_service: ChatServiceDep,
) -> list[ChatMessageResponse]:
    messages = await chat_service.get_messages(chat_id)
    if messages is not None:
        return [m.to_response() for m in messages]

    raise _chat_not_found()


@router.post(
    "/{chat_id}/messages",
    response_model=SendMessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def send_message(
    chat_id: str,
    request_body: SendMessageRequest,
    chat_service: ChatServiceDep,
) -> SendMessageResponse:
    result = await chat_service.send_message(chat_id, request_body.message, request_body.model_id)
    if result is None:
        raise _chat_not_found()

    user_message, assistant_message = result
    return SendMessageResponse(
        user_message=user_message.to_response(),
        assistant_message=assistant_message.to_response(),
    )


@router.post(
    "/{chat_id}/generate-response",
    response_model=ChatMessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def generate_response(
    chat_id: str,
    chat_service: ChatServiceDep,
    request_body: GenerateResponseRequest | None = None,
) -> ChatMessageResponse:
    model_id = request_body.model_id if request_body else None
    assistant_message = await chat_service.generate_response(chat_id, model_id)
    if assistant_message is None:
        raise _chat_not_found()

    return assistant_message.to_response()
