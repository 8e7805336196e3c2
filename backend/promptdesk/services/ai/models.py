"""AI service request/response models."""
import enum
from dataclasses import dataclass, field
from typing import Optional, List, Dict


class Provider(str, enum.Enum):
    """LLM provider enumeration."""
    OPENAI = "openai"
    AZURE = "azure"
    CUSTOM = "custom"


@dataclass
class ChatMessage:
    """Chat message model."""
    role: str  # "user", "assistant", "system"
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class ChatRequest:
    """Chat completion request model."""
    provider: Provider
    model: str
    temperature: float
    max_tokens: int
    messages: List[ChatMessage] = field(default_factory=list)
    api_key: str = ""
    base_url: str = ""


@dataclass
class AiUsage:
    """Token usage reported by the provider."""
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


@dataclass
class AiResponse:
    """Normalized chat completion response model."""
    content: str
    finish_reason: Optional[str] = None
    model: Optional[str] = None
    usage: Optional[AiUsage] = None
