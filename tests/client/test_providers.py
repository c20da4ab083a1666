"""Tests for provider adapters and model resolution."""

from types import SimpleNamespace
from unittest.mock import AsyncMock
from urllib.parse import parse_qs

import httpx
import pytest

from translation_app.client.providers import DeepLProvider, GeminiProvider, OpenAIProvider
from translation_app.errors import ProviderError, UnsupportedLanguageError, UnsupportedModelError
from translation_app.languages import ProviderKind, resolve_provider


@pytest.mark.parametrize(
    "model,kind",
    [
        ("gpt-3.5-turbo", ProviderKind.OPENAI),
        ("gpt-4-turbo", ProviderKind.OPENAI),
        ("gemini-1.5-flash-002", ProviderKind.GEMINI),
        ("deepl", ProviderKind.DEEPL),
    ],
)
def test_resolve_provider(model, kind):
    assert resolve_provider(model) is kind


@pytest.mark.parametrize("model", ["", "claude-3", "deepl-pro", "GPT-4"])
def test_resolve_provider_unknown(model):
    with pytest.raises(UnsupportedModelError):
        resolve_provider(model)


def openai_client(content: str):
    completion = SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )
    create = AsyncMock(return_value=completion)
    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create))), create


@pytest.mark.asyncio
async def test_openai_provider_request_and_trim():
    client, create = openai_client("  Bonjour le monde \n")
    provider = OpenAIProvider("sk-test", client=client)

    result = await provider.translate("Hello world", "French", "gpt-4")

    assert result == "Bonjour le monde"
    create.assert_awaited_once_with(
        model="gpt-4",
        messages=[
            {"role": "system", "content": "Translate this sentence into French."},
            {"role": "user", "content": "Hello world"},
        ],
        temperature=0.3,
        max_tokens=100,
    )


@pytest.mark.asyncio
async def test_gemini_provider_returns_text_unmodified():
    generate = AsyncMock(return_value=SimpleNamespace(text=" Hola mundo\n"))
    client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate)))
    provider = GeminiProvider("g-test", client=client)

    result = await provider.translate("Hello world", "Spanish", "gemini-1.5-pro-001")

    assert result == " Hola mundo\n"
    generate.assert_awaited_once_with(
        model="gemini-1.5-pro-001",
        contents="Translate the text: Hello world into Spanish",
    )


@pytest.mark.asyncio
async def test_deepl_provider_form_request():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"translations": [{"text": "Hallo Welt"}]})

    provider = DeepLProvider(
        "dl-test",
        api_url="https://deepl.test/v2/translate",
        transport=httpx.MockTransport(handler),
    )

    result = await provider.translate("Hello world", "German")

    assert result == "Hallo Welt"
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "https://deepl.test/v2/translate"
    assert request.headers["content-type"] == "application/x-www-form-urlencoded"
    assert parse_qs(request.content.decode()) == {
        "auth_key": ["dl-test"],
        "text": ["Hello world"],
        "source_lang": ["EN"],
        "target_lang": ["DE"],
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("language", ["Korean", "Telugu", "Arabic", "Klingon"])
async def test_deepl_unsupported_language_makes_no_request(language):
    handler = AsyncMock()
    provider = DeepLProvider("dl-test", transport=httpx.MockTransport(handler))

    with pytest.raises(UnsupportedLanguageError):
        await provider.translate("Hello", language)

    handler.assert_not_called()


@pytest.mark.asyncio
async def test_deepl_http_error_raises():
    provider = DeepLProvider(
        "dl-test",
        transport=httpx.MockTransport(lambda request: httpx.Response(403)),
    )

    with pytest.raises(httpx.HTTPStatusError):
        await provider.translate("Hello", "French")


@pytest.mark.asyncio
async def test_gemini_provider_without_text_raises():
    generate = AsyncMock(return_value=SimpleNamespace(text=None))
    client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate)))
    provider = GeminiProvider("g-test", client=client)

    with pytest.raises(ProviderError, match="no text"):
        await provider.translate("Hello world", "Spanish", "gemini-1.5-pro-001")
