"""Translation provider adapters (OpenAI chat, Gemini, DeepL)."""

import logging
from typing import Optional, Protocol

import httpx
from google import genai
from google.genai import types
from openai import AsyncOpenAI

from translation_app.errors import ProviderError, UnsupportedLanguageError
from translation_app.languages import DEEPL_LANGUAGE_CODES

logger = logging.getLogger(__name__)


class TranslationProvider(Protocol):
    async def translate(self, text: str, language: str, model: str) -> str: ...


class OpenAIProvider:
    """Hosted chat-completion translation."""

    TEMPERATURE = 0.3
    MAX_TOKENS = 100

    def __init__(self, api_key: str, timeout: float = 30.0, client: Optional[AsyncOpenAI] = None):
        self._client = client or AsyncOpenAI(api_key=api_key, timeout=timeout)

    async def translate(self, text: str, language: str, model: str) -> str:
        response = await self._client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": f"Translate this sentence into {language}."},
                {"role": "user", "content": text},
            ],
            temperature=self.TEMPERATURE,
            max_tokens=self.MAX_TOKENS,
        )
        return response.choices[0].message.content.strip()


class GeminiProvider:
    """Hosted generative-content translation."""

    PROMPT = "Translate the text: {message} into {language}"

    def __init__(self, api_key: str, timeout: float = 30.0, client: Optional[genai.Client] = None):
        self._client = client or genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=int(timeout * 1000)),
        )

    async def translate(self, text: str, language: str, model: str) -> str:
        prompt = self.PROMPT.format(message=text, language=language)
        response = await self._client.aio.models.generate_content(
            model=model,
            contents=prompt,
        )
        if response.text is None:
            raise ProviderError("gemini", "response contained no text")
        return response.text


class DeepLProvider:
    """DeepL machine translation over its form-encoded HTTP API."""

    SOURCE_LANG = "EN"

    def __init__(
        self,
        api_key: str,
        api_url: str = "https://api-free.deepl.com/v2/translate",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = api_key
        self._api_url = api_url
        self._timeout = timeout
        self._transport = transport

    async def translate(self, text: str, language: str, model: str = "deepl") -> str:
        target_code = DEEPL_LANGUAGE_CODES.get(language)
        if not target_code:
            logger.warning(f"DeepL has no language code for {language!r}")
            raise UnsupportedLanguageError(language)

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            response = await client.post(
                self._api_url,
                data={
                    "auth_key": self._api_key,
                    "text": text,
                    "source_lang": self.SOURCE_LANG,
                    "target_lang": target_code,
                },
            )
            response.raise_for_status()
            data = response.json()

        return data["translations"][0]["text"]
