"""Base translator interface."""
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, Tuple

from promptdesk.services.ai.models import ChatRequest, Provider
from promptdesk.services.gateway.auth.direct import DirectAuthenticator

CHAT_COMPLETIONS_PATH = "/chat/completions"


def trim_base_url(base_url: str) -> str:
    """Strip surrounding whitespace and every trailing slash."""
    return (base_url or "").strip().rstrip("/")


def chat_completions_url(base_url: str) -> str:
    """Return ``<trimmed base>/chat/completions``."""
    return f"{trim_base_url(base_url)}{CHAT_COMPLETIONS_PATH}"


class BaseTranslator(ABC):
    """Base class for request translators."""

    provider: Provider
    appends_completions_path: bool = False

    def __init__(self, authenticator: Optional[DirectAuthenticator] = None):
        self.authenticator = authenticator or DirectAuthenticator()

    @abstractmethod
    def build_endpoint(self, base_url: str) -> str:
        """
        Build the primary endpoint URL for the provider.

        Args:
            base_url: Base URL as entered by the user

        Returns:
            Endpoint URL
        """
        pass

    def build_payload(self, request: ChatRequest) -> Dict[str, Any]:
        """Build the JSON body; message content passes through unchanged."""
        return {
            "model": request.model,
            "temperature": request.temperature,
            "max_tokens": request.max_tokens,
            "messages": [message.to_dict() for message in request.messages],
        }

    def build_headers(self, request: ChatRequest) -> Dict[str, str]:
        headers = self.authenticator.auth_headers(self.provider, request.api_key)
        headers["Content-Type"] = "application/json"
        return headers

    def transform_request(
        self,
        request: ChatRequest
    ) -> Tuple[str, Dict[str, Any], Dict[str, str]]:
        """
        Transform a chat request into the provider's HTTP request.

        Args:
            request: Chat request

        Returns:
            Tuple of (url, payload, headers)

        Raises:
            AIValidationError: If the API key cannot be sent as a header
        """
        headers = self.build_headers(request)
        url = self.build_endpoint(request.base_url)
        payload = self.build_payload(request)
        return url, payload, headers
