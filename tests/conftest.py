import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_assistant_service, get_chat_service, get_database
from app.db.assistant_repo import AssistantRepo
from app.db.chat_repo import ChatRepo
from app.db.database import Database
from app.services.assistant_service import AssistantService
from app.services.chat_completion_service import ChatCompletionService
from app.services.chat_service import ChatService
from app.services.llm.config.llm_config import LlmConfig
from app.services.llm.llm_message import LlmMessage
from app.services.llm.llm_service_base import LlmService
from app.services.model_option_service import ModelOptionService
from app.settings import settings
from main import app


class FakeLlmService(LlmService):
    """Returns queued replies in order; queued exceptions are raised instead"""

    def __init__(self) -> None:
        self.replies: list[str | Exception] = []
        self.requests: list[dict] = []

    def queue(self, *replies: str | Exception) -> None:
        self.replies.extend(replies)

    async def get_completion(
        self,
        model: str,
        messages: list[LlmMessage],
        config: LlmConfig | None = None,
    ) -> LlmMessage:
        self.requests.append({"model": model, "messages": messages, "config": config})
        reply = self.replies.pop(0) if self.replies else "Fake reply"
        if isinstance(reply, Exception):
            raise reply
        return LlmMessage.assistant(reply)


@pytest.fixture
def database(tmp_path) -> Database:
    db = Database(str(tmp_path / "test.db"))
    db.setup()
    return db


@pytest.fixture
def assistant_repo(database) -> AssistantRepo:
    return AssistantRepo(database)


@pytest.fixture
def chat_repo(database) -> ChatRepo:
    return ChatRepo(database)


@pytest.fixture
def fake_llm() -> FakeLlmService:
    return FakeLlmService()


@pytest.fixture
def client(database, assistant_repo, chat_repo, fake_llm):
    completion_service = ChatCompletionService(llm_service=fake_llm, title_model=settings.title_model)
    assistant_service = AssistantService(assistant_repo)
    chat_service = ChatService(
        chat_repo=chat_repo,
        assistant_repo=assistant_repo,
        completion_service=completion_service,
        model_option_service=ModelOptionService(),
    )

    app.dependency_overrides[get_database] = lambda: database
    app.dependency_overrides[get_assistant_service] = lambda: assistant_service
    app.dependency_overrides[get_chat_service] = lambda: chat_service

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def create_assistant(client):
    def _create(name: str = "Tutor", instructions: str = "Explain things simply.", persona: str = "A patient tutor."):
        response = client.post(
            "/assistants",
            json={"name": name, "instructions": instructions, "persona": persona},
        )
        assert response.status_code == 201
        return response.json()

    return _create


@pytest.fixture
def create_chat(client, fake_llm):
    def _create(assistant_id: str, first_message: str = "How do tides work?", title: str = "Tides Explained"):
        fake_llm.queue(title)
        response = client.post(
            "/chats",
            json={"assistant_id": assistant_id, "first_message": first_message},
        )
        assert response.status_code == 201
        return response.json()

    return _create
