from dataclasses import dataclass, field

from app.services.llm.config.reasoning_config import ReasoningConfig


@dataclass
class LlmConfig:
    """Configuration for LLM completion requests"""
    max_tokens: int
    temperature: float | None = 0.7
    reasoning: ReasoningConfig = field(default_factory=ReasoningConfig.default)

    @classmethod
    def default(cls) -> "LlmConfig":
        """Create a default config (no reasoning, moderate temperature)"""
        return cls(max_tokens=2000)
