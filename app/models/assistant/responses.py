from datetime import datetime
from pydantic import BaseModel


class AssistantResponse(BaseModel):
    id: str
    name: str
    instructions: str
    persona: str
    created_at: datetime
    updated_at: datetime


class AssistantSummaryResponse(BaseModel):
    id: str
    name: str
    instructions: str
    persona: str


class AssistantListResponse(BaseModel):
    assistants: list[AssistantResponse]
    total: int
