import logging
from datetime import datetime, timezone
from uuid import uuid4

from app.db.assistant_repo import AssistantRepo
from app.models.assistant.models import Assistant
from app.models.assistant.requests import CreateAssistantRequest, UpdateAssistantRequest


logger = logging.getLogger(__name__)


class AssistantService:
    def __init__(self, assistant_repo: AssistantRepo) -> None:
        self._assistant_repo = assistant_repo

    async def create_assistant(self, request: CreateAssistantRequest) -> Assistant:
        assistant = self._assistant_repo.create_assistant(
            assistant_id=str(uuid4()),
            name=request.name,
            instructions=request.instructions,
            persona=request.persona,
            created_at=datetime.now(timezone.utc),
        )
        logger.info("Created assistant %s (%s)", assistant.id, assistant.name)
        return assistant

    async def get_assistant(self, assistant_id: str) -> Assistant | None:
        return self._assistant_repo.get_assistant_by_id(assistant_id)

    async def list_assistants(self, search: str | None = None) -> tuple[list[Assistant], int]:
        """Return assistants matching `search` together with the unfiltered total"""
        assistants = self._assistant_repo.list_assistants()
        total = len(assistants)

        term = (search or "").strip()
        if term:
            assistants = [a for a in assistants if a.matches(term)]

        return assistants, total

    async def update_assistant(self, assistant_id: str, request: UpdateAssistantRequest) -> Assistant | None:
        return self._assistant_repo.update_assistant(
            assistant_id=assistant_id,
            name=request.name,
            instructions=request.instructions,
            persona=request.persona,
        )

    async def delete_assistant(self, assistant_id: str) -> bool:
        deleted = self._assistant_repo.delete_assistant(assistant_id)
        if deleted:
            logger.info("Deleted assistant %s", assistant_id)
        return deleted
