"""Chat client that forwards a conversation to the configured provider."""
import json
import logging
from typing import Any, Dict

import httpx

from promptdesk.services.ai.errors import (
    AIClientError,
    AIEmptyResponseError,
    AIGatewayError,
    AINetworkError,
    AIResponseParseError,
    AIValidationError,
    MISSING_CREDENTIAL,
    NO_MESSAGES,
    UNKNOWN_PROVIDER,
)
from promptdesk.services.ai.models import AiResponse, ChatRequest, Provider
from promptdesk.services.gateway.auth.direct import mask_api_key, trim_credential
from promptdesk.services.gateway.translators import (
    chat_completions_url,
    get_translator,
    normalize_response,
)

logger = logging.getLogger(__name__)

__all__ = [
    "ChatClient",
    "chat_with_model",
    "AIClientError",
    "AIValidationError",
    "AINetworkError",
    "AIGatewayError",
    "AIResponseParseError",
    "AIEmptyResponseError",
]


class ChatClient:
    """Chat client bound to a shared HTTP connection pool.

    The client holds no per-call state; one instance can serve concurrent
    requests.
    """

    def __init__(self, http_client: httpx.AsyncClient):
        """Initialize chat client.

        Args:
            http_client: Shared ``httpx.AsyncClient``; never reconfigured here
        """
        self._client = http_client

    def _validate_request(self, request: ChatRequest) -> None:
        if not trim_credential(request.api_key):
            raise AIValidationError(MISSING_CREDENTIAL)
        if not request.messages:
            raise AIValidationError(NO_MESSAGES)
        try:
            Provider(request.provider)
        except ValueError:
            raise AIValidationError(UNKNOWN_PROVIDER.format(request.provider))

    async def _post(
        self,
        url: str,
        payload: Dict[str, Any],
        headers: Dict[str, str]
    ) -> httpx.Response:
        """Send one POST request. Transport failures are never retried.

        Raises:
            AINetworkError: For network errors
        """
        try:
            return await self._client.post(url, json=payload, headers=headers)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            detail = str(e) or type(e).__name__
            logger.error(f"Network error calling {url}: {detail}")
            raise AINetworkError(detail) from e

    def _gateway_error(self, response: httpx.Response) -> AIGatewayError:
        body = response.text
        headers = dict(response.headers)
        logger.error(
            f"Model error -> status={response.status_code} headers={headers} body={body}"
        )
        return AIGatewayError(body, status_code=response.status_code, headers=headers)

    async def chat(self, request: ChatRequest) -> AiResponse:
        """
        Send a chat completion request to the provider.

        Args:
            request: Chat request

        Returns:
            Normalized AiResponse

        Raises:
            AIValidationError: If the request is rejected before any I/O
            AINetworkError: For network errors
            AIGatewayError: For non-success responses
            AIResponseParseError: For malformed response bodies
            AIEmptyResponseError: If the provider returned no choices
        """
        self._validate_request(request)

        translator = get_translator(request.provider)
        url, payload, headers = translator.transform_request(request)

        logger.info(
            f"Sending chat request: endpoint={url}, provider={translator.provider.value}, "
            f"model={request.model}, api_key={mask_api_key(trim_credential(request.api_key))}, "
            f"messages={len(request.messages)}"
        )
        logger.debug(f"Request payload: {json.dumps(payload, ensure_ascii=False)}")

        response = await self._post(url, payload, headers)

        # Some OpenAI-like servers expect the base URL plus the completions path;
        # retry exactly once there on 404 and on nothing else.
        if response.status_code == httpx.codes.NOT_FOUND:
            fallback_url = chat_completions_url(request.base_url)
            logger.warning(
                f"Primary endpoint returned 404, retrying once with alternate endpoint={fallback_url}"
            )
            response = await self._post(fallback_url, payload, headers)

        if not response.is_success:
            raise self._gateway_error(response)

        chat_response = normalize_response(response.content)

        usage = chat_response.usage
        logger.info(
            f"Chat completion successful: model={chat_response.model}, "
            f"tokens={usage.total_tokens if usage else None}, "
            f"content_len={len(chat_response.content)}, finish_reason={chat_response.finish_reason}"
        )
        return chat_response


async def chat_with_model(request: ChatRequest, http_client: httpx.AsyncClient) -> AiResponse:
    """Forward a chat request using the shared HTTP client.

    Raises:
        AIClientError: Subclass whose message is shown to the user
    """
    return await ChatClient(http_client).chat(request)
