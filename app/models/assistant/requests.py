from pydantic import BaseModel, ConfigDict, Field


class CreateAssistantRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, description="Display name of the assistant")
    instructions: str = Field(..., min_length=1, description="System instructions for the model")
    persona: str = Field(..., min_length=1, description="Persona the model should adopt")


class UpdateAssistantRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(None, min_length=1)
    instructions: str | None = Field(None, min_length=1)
    persona: str | None = Field(None, min_length=1)
