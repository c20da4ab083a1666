"""Tests for the provider dispatcher."""

import asyncio

import pytest

from translation_app.client.dispatcher import Dispatcher, TranslationRequest
from translation_app.errors import (
    ProviderError,
    UnsupportedLanguageError,
    UnsupportedModelError,
)
from translation_app.languages import ProviderKind


class FakeProvider:
    def __init__(self, result="translated", error=None, delay=0.0):
        self.result = result
        self.error = error
        self.delay = delay
        self.calls = []

    async def translate(self, text, language, model):
        self.calls.append((text, language, model))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return self.result


def make_dispatcher():
    providers = {kind: FakeProvider(result=kind.value) for kind in ProviderKind}
    return Dispatcher(providers, timeout=1.0), providers


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "model,kind",
    [("gpt-4", ProviderKind.OPENAI), ("gemini-1.5-pro-001", ProviderKind.GEMINI), ("deepl", ProviderKind.DEEPL)],
)
async def test_routes_to_matching_provider(model, kind):
    dispatcher, providers = make_dispatcher()

    result = await dispatcher.translate(TranslationRequest("French", "Hello", model))

    assert result == kind.value
    assert providers[kind].calls == [("Hello", "French", model)]
    others = [p for k, p in providers.items() if k is not kind]
    assert all(not p.calls for p in others)


@pytest.mark.asyncio
async def test_unknown_model_fails_explicitly():
    dispatcher, providers = make_dispatcher()

    with pytest.raises(UnsupportedModelError):
        await dispatcher.translate(TranslationRequest("French", "Hello", "llama-3"))

    assert all(not p.calls for p in providers.values())


@pytest.mark.asyncio
async def test_provider_exception_wrapped():
    failing = FakeProvider(error=RuntimeError("quota exceeded"))
    dispatcher = Dispatcher({**{k: FakeProvider() for k in ProviderKind}, ProviderKind.OPENAI: failing})

    with pytest.raises(ProviderError) as exc_info:
        await dispatcher.translate(TranslationRequest("French", "Hello", "gpt-4"))

    assert exc_info.value.provider == "openai"
    assert isinstance(exc_info.value.__cause__, RuntimeError)


@pytest.mark.asyncio
async def test_unsupported_language_passes_through():
    deepl = FakeProvider(error=UnsupportedLanguageError("Korean"))
    dispatcher = Dispatcher({**{k: FakeProvider() for k in ProviderKind}, ProviderKind.DEEPL: deepl})

    with pytest.raises(UnsupportedLanguageError):
        await dispatcher.translate(TranslationRequest("Korean", "Hello", "deepl"))


@pytest.mark.asyncio
async def test_provider_timeout():
    slow = FakeProvider(delay=1.0)
    dispatcher = Dispatcher({**{k: FakeProvider() for k in ProviderKind}, ProviderKind.GEMINI: slow}, timeout=0.01)

    with pytest.raises(ProviderError, match="timed out"):
        await dispatcher.translate(TranslationRequest("French", "Hello", "gemini-1.5-flash-001"))
