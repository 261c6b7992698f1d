from pydantic import BaseModel, ConfigDict, Field


class CreateChatRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    assistant_id: str = Field(..., min_length=1, description="Assistant the chat is bound to")
    first_message: str = Field(..., min_length=1, description="Opening user message")


class UpdateChatRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(None, min_length=1)


class SendMessageRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, protected_namespaces=())

    message: str = Field(..., min_length=1, description="Message content")
    model_id: str | None = Field(None, description="Model option to reply with")


class GenerateResponseRequest(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_id: str | None = Field(None, description="Model option to reply with")
