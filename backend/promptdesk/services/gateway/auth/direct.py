"""Direct API key authenticator."""
import logging
import re
from typing import Dict

from promptdesk.services.ai.errors import (
    AIValidationError,
    MISSING_CREDENTIAL,
    INVALID_CREDENTIAL,
)
from promptdesk.services.ai.models import Provider

logger = logging.getLogger(__name__)

AZURE_API_KEY_HEADER = "api-key"
AUTHORIZATION_HEADER = "Authorization"

# TAB plus printable ASCII; everything else is rejected as a header value
_HEADER_VALUE_RE = re.compile(r"^[\t\x20-\x7e]*$")

# Unicode White_Space only. str.strip() would also drop the \x1c-\x1f
# separators, which must reach the header check instead.
CREDENTIAL_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def trim_credential(api_key: str) -> str:
    """Strip surrounding Unicode whitespace from an API key."""
    return (api_key or "").strip(CREDENTIAL_WHITESPACE)


def mask_api_key(api_key: str) -> str:
    """Mask an API key for logging, keeping only the first four characters."""
    if len(api_key) > 4:
        return f"{api_key[:4]}****"
    return "****"


class DirectAuthenticator:
    """Authenticator for API keys supplied directly by the caller.

    The key is never looked up or refreshed; it is trimmed, checked for
    characters that cannot appear in an HTTP header, and placed in the header
    the provider expects.
    """

    def get_token(self, api_key: str) -> str:
        """Return the trimmed API key.

        Raises:
            AIValidationError: If the key is empty or contains characters
                illegal in an HTTP header value
        """
        token = trim_credential(api_key)
        if not token:
            raise AIValidationError(MISSING_CREDENTIAL)
        if not _HEADER_VALUE_RE.match(token):
            logger.warning("Rejected API key with characters illegal in an HTTP header")
            raise AIValidationError(INVALID_CREDENTIAL)
        return token

    def header_name(self, provider: Provider) -> str:
        """Azure expects the key in an ``api-key`` header; every other provider takes a bearer token."""
        if provider == Provider.AZURE:
            return AZURE_API_KEY_HEADER
        return AUTHORIZATION_HEADER

    def auth_headers(self, provider: Provider, api_key: str) -> Dict[str, str]:
        """Build the authentication header for the provider."""
        token = self.get_token(api_key)
        name = self.header_name(provider)
        if name == AUTHORIZATION_HEADER:
            return {name: f"Bearer {token}"}
        return {name: token}
