"""Route a translation request to the provider its model resolves to."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Mapping

from translation_app.client.providers import (
    DeepLProvider,
    GeminiProvider,
    OpenAIProvider,
    TranslationProvider,
)
from translation_app.config import ClientSettings
from translation_app.errors import ProviderError, TranslationError
from translation_app.languages import ProviderKind, resolve_provider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranslationRequest:
    """Immutable snapshot of the form at submit time."""

    target_language: str
    source_text: str
    model: str

    @property
    def provider(self) -> ProviderKind:
        return resolve_provider(self.model)


class Dispatcher:
    """Holds one provider per kind and runs each call under a timeout."""

    def __init__(self, providers: Mapping[ProviderKind, TranslationProvider], timeout: float = 30.0):
        self._providers = dict(providers)
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> "Dispatcher":
        """Build the default provider set from client settings."""
        return cls(
            {
                ProviderKind.OPENAI: OpenAIProvider(
                    settings.openai_api_key, timeout=settings.provider_timeout
                ),
                ProviderKind.GEMINI: GeminiProvider(
                    settings.google_api_key, timeout=settings.provider_timeout
                ),
                ProviderKind.DEEPL: DeepLProvider(
                    settings.deepl_api_key,
                    api_url=settings.deepl_api_url,
                    timeout=settings.provider_timeout,
                ),
            },
            timeout=settings.provider_timeout,
        )

    async def translate(self, request: TranslationRequest) -> str:
        """
        Translate the request with the matching provider.

        Raises:
            UnsupportedModelError: unknown model identifier
            UnsupportedLanguageError: DeepL target without a language code
            ProviderError: any failure inside the provider call
        """
        kind = request.provider
        provider = self._providers[kind]

        try:
            return await asyncio.wait_for(
                provider.translate(request.source_text, request.target_language, request.model),
                timeout=self._timeout,
            )
        except TranslationError:
            raise
        except asyncio.TimeoutError as e:
            raise ProviderError(kind.value, f"timed out after {self._timeout}s") from e
        except Exception as e:
            raise ProviderError(kind.value, str(e)) from e
