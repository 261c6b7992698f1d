from pydantic import field_validator
from pydantic_settings import BaseSettings

from app.services.llm.config.reasoning_config import ReasoningEffort


class Settings(BaseSettings):
    app_name: str = "Persona Chat"
    app_version: str = "0.1.0"
    api_key: str | None = None
    db_path: str = "data/persona_chat.db"
    preserve_old_db: bool = False
    openai_api_key: str | None = None
    openai_base_url: str | None = None
    title_model: str = "gpt-3.5-turbo"
    chat_model: str = "gpt-4"
    reasoning_model: str = "o4-mini"
    reasoning_effort: ReasoningEffort = ReasoningEffort.MEDIUM
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    @field_validator("reasoning_effort")
    @classmethod
    def reasoning_model_needs_effort(cls, value: ReasoningEffort) -> ReasoningEffort:
        if value == ReasoningEffort.NONE:
            raise ValueError("the reasoning model option needs a reasoning effort other than 'none'")
        return value

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
