from dataclasses import dataclass

from app.models.model.responses import ModelOptionResponse
from app.services.llm.config.reasoning_config import ReasoningConfig


@dataclass
class ModelOption:
    """A reply model the user can pick for a chat turn"""
    id: str
    name: str
    description: str
    model_name: str
    reasoning: ReasoningConfig

    def to_response(self) -> ModelOptionResponse:
        return ModelOptionResponse(
            id=self.id,
            name=self.name,
            description=self.description,
            model_name=self.model_name,
            supports_reasoning=self.reasoning.is_enabled(),
        )
