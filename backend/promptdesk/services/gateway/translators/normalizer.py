"""Response normalizer - converts provider chat completion bodies to AiResponse."""
import logging
from typing import List, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from promptdesk.services.ai.errors import AIEmptyResponseError, AIResponseParseError
from promptdesk.services.ai.models import AiResponse, AiUsage

logger = logging.getLogger(__name__)


class ProviderUsage(BaseModel):
    """Token usage block of a chat completion response."""
    prompt_tokens: Optional[int] = Field(None, ge=0)
    completion_tokens: Optional[int] = Field(None, ge=0)
    total_tokens: Optional[int] = Field(None, ge=0)


class ProviderMessage(BaseModel):
    role: str
    content: str


class ProviderChoice(BaseModel):
    finish_reason: Optional[str] = None
    message: ProviderMessage


class ProviderChatResponse(BaseModel):
    """OpenAI-format chat completion response.

    Azure and most custom endpoints return the same shape; fields this layer
    does not use are ignored.
    """
    id: Optional[str] = None
    model: Optional[str] = None
    usage: Optional[ProviderUsage] = None
    choices: List[ProviderChoice]


def _format_validation_error(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "body"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


def normalize_response(body: Union[str, bytes]) -> AiResponse:
    """
    Normalize a successful provider response body.

    Args:
        body: Raw response body

    Returns:
        AiResponse built from the first choice plus top-level model/usage

    Raises:
        AIResponseParseError: If the body is not JSON or has an unexpected shape
        AIEmptyResponseError: If the response contains no choices
    """
    try:
        parsed = ProviderChatResponse.model_validate_json(body)
    except ValidationError as e:
        detail = _format_validation_error(e)
        logger.warning(f"Failed to parse provider response: {detail}")
        raise AIResponseParseError(detail) from e

    if not parsed.choices:
        logger.warning(f"No choices in provider response (id={parsed.id}, model={parsed.model})")
        raise AIEmptyResponseError()

    choice = parsed.choices[0]
    usage = None
    if parsed.usage is not None:
        usage = AiUsage(
            prompt_tokens=parsed.usage.prompt_tokens,
            completion_tokens=parsed.usage.completion_tokens,
            total_tokens=parsed.usage.total_tokens,
        )

    logger.debug(f"Normalized response id={parsed.id} choices={len(parsed.choices)}")
    return AiResponse(
        content=choice.message.content,
        finish_reason=choice.finish_reason,
        model=parsed.model,
        usage=usage,
    )
