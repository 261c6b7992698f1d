from pydantic import BaseModel, ConfigDict


class ModelOptionResponse(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    id: str
    name: str
    description: str
    model_name: str
    supports_reasoning: bool


class ModelsListResponse(BaseModel):
    models: list[ModelOptionResponse]
    default_model_id: str
