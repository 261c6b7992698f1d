from fastapi import APIRouter, Depends, status

from app.api.dependencies import ModelOptionServiceDep
from app.middleware.auth import verify_api_key
from app.models.model.responses import ModelsListResponse

router = APIRouter(
    prefix="/models",
    tags=["models"],
    dependencies=[Depends(verify_api_key)],
)


@router.get("", response_model=ModelsListResponse, status_code=status.HTTP_200_OK)
async def list_models(
    model_option_service: ModelOptionServiceDep,
) -> ModelsListResponse:
    """Reply models a client can pick from when sending a message."""
    return ModelsListResponse(
        models=[option.to_response() for option in model_option_service.list_options()],
        default_model_id=model_option_service.default_model_id,
    )
