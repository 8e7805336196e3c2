"""Tests for gateway request translators and response normalizer."""
import json

import pytest

from conftest import completion_body
from promptdesk.services.ai.errors import (
    AIEmptyResponseError,
    AIResponseParseError,
    AIValidationError,
)
from promptdesk.services.ai.models import AiUsage, ChatMessage, ChatRequest, Provider
from promptdesk.services.gateway.translators import (
    AzureTranslator,
    CustomTranslator,
    OpenAITranslator,
    chat_completions_url,
    get_translator,
    normalize_response,
    trim_base_url,
)


def make_request(**overrides):
    fields = dict(
        provider=Provider.OPENAI,
        model="gpt-4o-mini",
        temperature=0.35,
        max_tokens=1024,
        messages=[ChatMessage(role="user", content="Hello")],
        api_key="sk-test123",
        base_url="https://api.openai.com/v1",
    )
    fields.update(overrides)
    return ChatRequest(**fields)


# ===== URL helpers =====

@pytest.mark.parametrize("base_url, expected", [
    ("https://api.openai.com/v1", "https://api.openai.com/v1"),
    ("https://api.openai.com/v1/", "https://api.openai.com/v1"),
    (" https://api.openai.com/v1// \n", "https://api.openai.com/v1"),
    ("", ""),
])
def test_trim_base_url(base_url, expected):
    assert trim_base_url(base_url) == expected


def test_chat_completions_url_no_double_slash():
    assert chat_completions_url("https://api.openai.com/v1//") == "https://api.openai.com/v1/chat/completions"


# ===== Translator selection =====

@pytest.mark.parametrize("provider, translator_cls", [
    (Provider.OPENAI, OpenAITranslator),
    (Provider.AZURE, AzureTranslator),
    (Provider.CUSTOM, CustomTranslator),
    ("openai", OpenAITranslator),
    ("azure", AzureTranslator),
    ("custom", CustomTranslator),
])
def test_get_translator(provider, translator_cls):
    assert type(get_translator(provider)) is translator_cls


def test_get_translator_unknown_provider():
    """Test that unknown providers raise ValueError."""
    with pytest.raises(ValueError, match="Unknown provider"):
        get_translator("vertex")


# ===== OpenAI Translator Tests =====

def test_openai_translator_request():
    """Test OpenAI translator appends the completions path and uses a bearer token."""
    url, payload, headers = OpenAITranslator().transform_request(make_request())

    assert url == "https://api.openai.com/v1/chat/completions"
    assert payload == {
        "model": "gpt-4o-mini",
        "temperature": 0.35,
        "max_tokens": 1024,
        "messages": [{"role": "user", "content": "Hello"}],
    }
    assert headers == {
        "Authorization": "Bearer sk-test123",
        "Content-Type": "application/json",
    }


def test_openai_translator_trims_credential():
    _, _, headers = OpenAITranslator().transform_request(make_request(api_key="  sk-test123\n"))
    assert headers["Authorization"] == "Bearer sk-test123"


def test_openai_translator_payload_is_json_serializable():
    _, payload, _ = OpenAITranslator().transform_request(make_request())
    assert json.loads(json.dumps(payload)) == payload


# ===== Azure Translator Tests =====

def test_azure_translator_request():
    """Test Azure translator uses the base URL verbatim and the api-key header."""
    endpoint = "https://res.openai.azure.com/openai/deployments/gpt4/chat/completions?api-version=2024-02-01"
    url, _, headers = AzureTranslator().transform_request(
        make_request(provider=Provider.AZURE, base_url=endpoint + "/")
    )

    assert url == endpoint
    assert headers == {"api-key": "sk-test123", "Content-Type": "application/json"}


# ===== Custom Translator Tests =====

def test_custom_translator_request():
    """Test custom translator keeps the caller's full path and a bearer token."""
    url, _, headers = CustomTranslator().transform_request(
        make_request(provider=Provider.CUSTOM, base_url="http://localhost:8080/v1/chat/completions/")
    )

    assert url == "http://localhost:8080/v1/chat/completions"
    assert headers["Authorization"] == "Bearer sk-test123"
    assert "api-key" not in headers


def test_translator_rejects_illegal_credential():
    with pytest.raises(AIValidationError, match="invalid credential characters"):
        CustomTranslator().transform_request(make_request(api_key="sk-\r\nX-Injected: 1"))


@pytest.mark.parametrize("translator_cls, expected", [
    (OpenAITranslator, True),
    (AzureTranslator, False),
    (CustomTranslator, False),
])
def test_appends_completions_path(translator_cls, expected):
    assert translator_cls.appends_completions_path is expected


# ===== Normalizer Tests =====

def test_normalize_response_first_choice():
    """Test normalizer returns content and finish reason of the first choice."""
    response = normalize_response(json.dumps(completion_body("hello", "stop")))

    assert response.content == "hello"
    assert response.finish_reason == "stop"
    assert response.model == "gpt-x"
    assert response.usage == AiUsage(prompt_tokens=5, completion_tokens=7, total_tokens=12)


def test_normalize_response_accepts_bytes():
    response = normalize_response(json.dumps(completion_body("bytes")).encode("utf-8"))
    assert response.content == "bytes"


def test_normalize_response_partial_usage():
    """Test each usage count is independently optional."""
    body = completion_body(usage={"total_tokens": 40})
    response = normalize_response(json.dumps(body))

    assert response.usage == AiUsage(total_tokens=40)


def test_normalize_response_null_finish_reason():
    response = normalize_response(json.dumps(completion_body(finish_reason=None)))
    assert response.finish_reason is None


def test_normalize_response_no_choices():
    """Test empty choices raise the no-content error."""
    with pytest.raises(AIEmptyResponseError, match="no content returned by model"):
        normalize_response(json.dumps(completion_body(choices=[])))


@pytest.mark.parametrize("body", [
    "",
    "not json",
    "[]",
    '{"id": "x"}',
    '{"choices": [{"finish_reason": "stop"}]}',
    '{"choices": [{"message": {"role": "assistant", "content": null}}]}',
    '{"choices": [{"message": {"role": "assistant", "content": "x"}}], "usage": {"total_tokens": -1}}',
])
def test_normalize_response_parse_failure(body):
    """Test malformed or unexpectedly shaped bodies raise a parse error."""
    with pytest.raises(AIResponseParseError) as exc_info:
        normalize_response(body)
    assert str(exc_info.value).startswith("response parse failure: ")
