from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.dependencies import AssistantServiceDep
from app.middleware.auth import verify_api_key
from app.models.assistant.requests import CreateAssistantRequest, UpdateAssistantRequest
from app.models.assistant.responses import AssistantListResponse, AssistantResponse
from app.models.common.responses import SuccessResponse

router = APIRouter(
    prefix="/assistants",
    tags=["assistants"],
    dependencies=[Depends(verify_api_key)],
)


@router.get("", response_model=AssistantListResponse)
async def list_assistants(
    assistant_service: AssistantServiceDep,
    search: str | None = Query(None, description="Filter by name, instructions or persona"),
) -> AssistantListResponse:
    assistants, total = await assistant_service.list_assistants(search=search)

    return AssistantListResponse(
        assistants=[a.to_response() for a in assistants],
        total=total,
    )


@router.post("", response_model=AssistantResponse, status_code=status.HTTP_201_CREATED)
async def create_assistant(
    request_body: CreateAssistantRequest,
    assistant_service: AssistantServiceDep,
) -> AssistantResponse:
    return (await assistant_service.create_assistant(request_body)).to_response()


@router.get("/{assistant_id}", response_model=AssistantResponse)
async def get_assistant(
    assistant_id: str,
    assistant_service: AssistantServiceDep,
) -> AssistantResponse:
    assistant = await assistant_service.get_assistant(assistant_id)
    if assistant:
        return assistant.to_response()

    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Assistant not found",
    )


@router.put("/{assistant_id}", response_model=AssistantResponse)
async def update_assistant(
    assistant_id: str,
    request_body: UpdateAssistantRequest,
    assistant_service: AssistantServiceDep,
) -> AssistantResponse:
    assistant = await assistant_service.update_assistant(assistant_id, request_body)
    if assistant:
        return assistant.to_response()

    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Assistant not found",
    )


@router.delete("/{assistant_id}", response_model=SuccessResponse)
async def delete_assistant(
    assistant_id: str,
    assistant_service: AssistantServiceDep,
) -> SuccessResponse:
    if not await assistant_service.delete_assistant(assistant_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Assistant not found",
        )
    return SuccessResponse()
