"""API request/response models.

Field names follow the desktop UI's camelCase payloads.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from promptdesk.services.ai.models import (
    AiResponse,
    ChatMessage,
    ChatRequest,
    Provider,
)


class CamelModel(BaseModel):
    """Base model accepting and emitting camelCase field names."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChatMessageModel(CamelModel):
    """Model for a single chat message."""
    role: str = Field(..., description="Message role (system, user, assistant)")
    content: str = Field(..., description="Message text")


class ChatCommandRequest(CamelModel):
    """Request model for the chat_with_model operation."""
    provider: Provider = Field(Provider.OPENAI, description="Provider convention: openai, azure or custom")
    model: str = Field(..., description="Model identifier")
    temperature: float = Field(..., description="Sampling temperature")
    max_tokens: int = Field(..., ge=0, description="Maximum tokens to generate")
    # Defaults let the operation report its own validation messages
    messages: List[ChatMessageModel] = Field(default_factory=list, description="Ordered conversation")
    api_key: str = Field("", description="Provider API key")
    base_url: str = Field("", description="Provider base URL or full endpoint")

    def to_chat_request(self) -> ChatRequest:
        return ChatRequest(
            provider=self.provider,
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            messages=[ChatMessage(role=m.role, content=m.content) for m in self.messages],
            api_key=self.api_key,
            base_url=self.base_url,
        )


class AiUsageModel(CamelModel):
    """Token usage response model."""
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


class AiResponseModel(CamelModel):
    """Response model for the chat_with_model operation."""
    content: str
    finish_reason: Optional[str] = None
    model: Optional[str] = None
    usage: Optional[AiUsageModel] = None

    @classmethod
    def from_response(cls, response: AiResponse) -> "AiResponseModel":
        usage = None
        if response.usage is not None:
            usage = AiUsageModel(
                prompt_tokens=response.usage.prompt_tokens,
                completion_tokens=response.usage.completion_tokens,
                total_tokens=response.usage.total_tokens,
            )
        return cls(
            content=response.content,
            finish_reason=response.finish_reason,
            model=response.model,
            usage=usage,
        )


class ProviderInfo(CamelModel):
    """Description of a supported provider convention."""
    provider: Provider
    auth_header: str
    appends_completions_path: bool


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    service: str
