from app.models.model.models import ModelOption
from app.services.llm.config.reasoning_config import ReasoningConfig
from app.settings import Settings, settings as app_settings


DEFAULT_MODEL_ID = "chat-model"


class ModelOptionService:
    """Resolves the reply model options offered to chat clients"""

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or app_settings
        self._options = [
            ModelOption(
                id=DEFAULT_MODEL_ID,
                name="Chat model",
                description="Primary model for all-purpose chat",
                model_name=settings.chat_model,
                reasoning=ReasoningConfig.default(),
            ),
            ModelOption(
                id="reasoning-model",
                name="Reasoning model",
                description="Uses advanced reasoning",
                model_name=settings.reasoning_model,
                reasoning=ReasoningConfig(effort=settings.reasoning_effort),
            ),
        ]

    @property
    def default_model_id(self) -> str:
        return DEFAULT_MODEL_ID

    def list_options(self) -> list[ModelOption]:
        return list(self._options)

    def get_option(self, model_id: str | None) -> ModelOption | None:
        """Look up an option by id; None selects the default option"""
        wanted = model_id or DEFAULT_MODEL_ID
        for option in self._options:
            if option.id == wanted:
                return option
        return None
