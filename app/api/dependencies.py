from typing import Annotated

from fastapi import Depends

from app.db.assistant_repo import AssistantRepo
from app.db.chat_repo import ChatRepo
from app.db.database import Database
from app.services.assistant_service import AssistantService
from app.services.chat_completion_service import ChatCompletionService
from app.services.chat_service import ChatService
from app.services.llm.llm_service import OpenAiLlmService
from app.services.model_option_service import ModelOptionService
from app.settings import settings

# Singleton instances
_database_instance = Database()
_assistant_repo_instance = AssistantRepo(_database_instance)
_chat_repo_instance = ChatRepo(_database_instance)
_llm_service_instance = OpenAiLlmService(
    api_key=settings.openai_api_key,
    base_url=settings.openai_base_url,
)
_model_option_service_instance = ModelOptionService()
_chat_completion_service_instance = ChatCompletionService(
    llm_service=_llm_service_instance,
    title_model=settings.title_model,
)
_assistant_service_instance = AssistantService(_assistant_repo_instance)
_chat_service_instance = ChatService(
    chat_repo=_chat_repo_instance,
    assistant_repo=_assistant_repo_instance,
    completion_service=_chat_completion_service_instance,
    model_option_service=_model_option_service_instance,
)


def get_database() -> Database:
    """Get the singleton Database instance"""
    return _database_instance


def get_model_option_service() -> ModelOptionService:
    """Get the singleton ModelOptionService instance"""
    return _model_option_service_instance


def get_assistant_service() -> AssistantService:
    """Get the singleton AssistantService instance"""
    return _assistant_service_instance


def get_chat_service() -> ChatService:
    """Get the singleton ChatService instance"""
    return _chat_service_instance


# Type annotations for dependencies
AssistantServiceDep = Annotated[AssistantService, Depends(get_assistant_service)]
ChatServiceDep = Annotated[ChatService, Depends(get_chat_service)]
ModelOptionServiceDep = Annotated[ModelOptionService, Depends(get_model_option_service)]
