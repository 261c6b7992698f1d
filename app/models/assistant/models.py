from datetime import datetime
from dataclasses import dataclass

from app.models.assistant.responses import AssistantResponse, AssistantSummaryResponse


@dataclass
class Assistant:
    id: str
    name: str
    instructions: str
    persona: str
    created_at: datetime
    updated_at: datetime

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match over name, instructions and persona"""
        needle = term.casefold()
        return any(
            needle in field.casefold()
            for field in (self.name, self.instructions, self.persona)
        )

    def to_response(self) -> AssistantResponse:
        return AssistantResponse(
            id=self.id,
            name=self.name,
            instructions=self.instructions,
            persona=self.persona,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def to_summary_response(self) -> AssistantSummaryResponse:
        return AssistantSummaryResponse(
            id=self.id,
            name=self.name,
            instructions=self.instructions,
            persona=self.persona,
        )
