"""Request translators and response normalizer for provider chat APIs."""
from typing import Dict, Type, Union

from promptdesk.services.ai.models import Provider
from promptdesk.services.gateway.translators.base import (
    BaseTranslator,
    chat_completions_url,
    trim_base_url,
)
from promptdesk.services.gateway.translators.openai import OpenAITranslator, CustomTranslator
from promptdesk.services.gateway.translators.azure import AzureTranslator
from promptdesk.services.gateway.translators.normalizer import normalize_response

__all__ = [
    "BaseTranslator",
    "OpenAITranslator",
    "CustomTranslator",
    "AzureTranslator",
    "chat_completions_url",
    "trim_base_url",
    "normalize_response",
    "get_translator",
]

_TRANSLATORS: Dict[Provider, Type[BaseTranslator]] = {
    Provider.OPENAI: OpenAITranslator,
    Provider.AZURE: AzureTranslator,
    Provider.CUSTOM: CustomTranslator,
}


def get_translator(provider: Union[Provider, str]) -> BaseTranslator:
    """
    Get translator instance for provider.

    Args:
        provider: Provider enum member or its value ("openai", "azure", "custom")

    Returns:
        Translator instance

    Raises:
        ValueError: If provider is not recognized
    """
    try:
        provider = Provider(provider)
    except ValueError:
        raise ValueError(
            f"Unknown provider: '{provider}'. Supported providers: "
            f"{', '.join(p.value for p in Provider)}"
        )
    return _TRANSLATORS[provider]()
