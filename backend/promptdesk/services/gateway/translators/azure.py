"""Azure OpenAI translator."""
from promptdesk.services.ai.models import Provider
from promptdesk.services.gateway.translators.base import BaseTranslator, trim_base_url


class AzureTranslator(BaseTranslator):
    """Translator for Azure OpenAI deployments.

    Azure endpoints embed the deployment name and ``api-version`` query in the
    URL, so the configured base URL is the full endpoint. Authentication uses
    the ``api-key`` header instead of a bearer token.
    """

    provider = Provider.AZURE

    def build_endpoint(self, base_url: str) -> str:
        return trim_base_url(base_url)
