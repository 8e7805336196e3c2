"""Chat API endpoint invoked by the desktop shell."""
import logging
from typing import List

import httpx
from fastapi import APIRouter, Depends, HTTPException, status

from promptdesk.api.models import (
    AiResponseModel,
    ChatCommandRequest,
    ProviderInfo,
)
from promptdesk.core.http import get_http_client
from promptdesk.services.ai.client import ChatClient
from promptdesk.services.ai.errors import (
    AIClientError,
    AIEmptyResponseError,
    AIGatewayError,
    AINetworkError,
    AIResponseParseError,
    AIValidationError,
)
from promptdesk.services.ai.models import Provider
from promptdesk.services.gateway.translators import get_translator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


def get_chat_client(http_client: httpx.AsyncClient = Depends(get_http_client)) -> ChatClient:
    """Get a chat client bound to the shared HTTP client."""
    return ChatClient(http_client)


@router.post("/chat_with_model", response_model=AiResponseModel)
async def chat_with_model(
    request: ChatCommandRequest,
    client: ChatClient = Depends(get_chat_client)
):
    """Forward a conversation to the configured model and return its reply."""
    try:
        response = await client.chat(request.to_chat_request())
        return AiResponseModel.from_response(response)
    except AIValidationError as e:
        logger.warning(f"Rejected chat request: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except AINetworkError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    except (AIGatewayError, AIResponseParseError, AIEmptyResponseError) as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    except AIClientError as e:
        logger.error(f"Unexpected AI client error: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.get("/providers", response_model=List[ProviderInfo])
async def list_providers():
    """List supported provider conventions and how each is addressed."""
    providers = []
    for provider in Provider:
        translator = get_translator(provider)
        providers.append(ProviderInfo(
            provider=provider,
            auth_header=translator.authenticator.header_name(provider),
            appends_completions_path=translator.appends_completions_path,
        ))
    return providers
