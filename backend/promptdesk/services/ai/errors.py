"""AI client exceptions.

Every exception's ``str()`` is the message shown to the desktop UI.
"""
from typing import Dict, Optional


class AIClientError(Exception):
    """Base exception for AI client errors."""
    pass


class AIValidationError(AIClientError):
    """Exception for requests rejected before any network I/O."""
    pass


class AINetworkError(AIClientError):
    """Exception for network errors."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"network failure: {detail}")


class AIGatewayError(AIClientError):
    """Exception for non-success responses from the provider."""

    def __init__(
        self,
        body: str,
        status_code: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None
    ):
        self.body = body
        self.status_code = status_code
        self.headers = headers or {}
        super().__init__(f"server error: {body}")


class AIResponseParseError(AIClientError):
    """Exception for malformed or unexpectedly shaped response bodies."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"response parse failure: {detail}")


class AIEmptyResponseError(AIClientError):
    """Exception for responses that contain no choices."""

    def __init__(self):
        super().__init__("no content returned by model")


MISSING_CREDENTIAL = "missing credential"
NO_MESSAGES = "no messages provided"
INVALID_CREDENTIAL = "invalid credential characters"
UNKNOWN_PROVIDER = "unknown provider: {}"
