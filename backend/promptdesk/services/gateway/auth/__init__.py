"""Authentication adapters for provider requests."""
from promptdesk.services.gateway.auth.direct import DirectAuthenticator, mask_api_key

__all__ = [
    "DirectAuthenticator",
    "mask_api_key",
]
