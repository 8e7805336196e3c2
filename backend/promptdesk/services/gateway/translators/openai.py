"""OpenAI-compatible translators (bearer token authentication)."""
from promptdesk.services.ai.models import Provider
from promptdesk.services.gateway.translators.base import (
    BaseTranslator,
    chat_completions_url,
    trim_base_url,
)


class OpenAITranslator(BaseTranslator):
    """Translator for OpenAI and OpenAI-compatible APIs.

    The base URL points at the API root (e.g. ``https://api.openai.com/v1``),
    so the completions path is appended.
    """

    provider = Provider.OPENAI
    appends_completions_path = True

    def build_endpoint(self, base_url: str) -> str:
        return chat_completions_url(base_url)


class CustomTranslator(OpenAITranslator):
    """Translator for custom OpenAI-like endpoints.

    The caller supplies the full endpoint path, so the base URL is used as is.
    """

    provider = Provider.CUSTOM
    appends_completions_path = False

    def build_endpoint(self, base_url: str) -> str:
        return trim_base_url(base_url)
