"""Static model and language tables used to populate the selection controls."""

import enum

from translation_app.errors import UnsupportedModelError

MODELS = [
    "gpt-3.5-turbo",
    "gpt-4",
    "gpt-4-turbo",
    "gemini-1.5-pro-001",
    "gemini-1.5-flash-001",
    "gemini-1.5-pro-002",
    "gemini-1.5-flash-002",
    "deepl",
]

SUPPORTED_LANGUAGES: dict[str, list[str]] = {
    "gpt-3.5-turbo": [
        "Spanish",
        "French",
        "German",
        "Italian",
        "Portuguese",
        "Dutch",
        "Russian",
        "Chinese (Simplified)",
        "Japanese",
    ],
    "gpt-4": [
        "Spanish",
        "French",
        "Telugu",
        "German",
        "Italian",
        "Portuguese",
        "Dutch",
        "Russian",
        "Chinese (Simplified)",
        "Japanese",
        "Korean",
    ],
    "gpt-4-turbo": [
        "Spanish",
        "French",
        "Telugu",
        "Japanese",
        "German",
        "Italian",
        "Portuguese",
        "Dutch",
        "Russian",
        "Chinese (Simplified)",
        "Korean",
        "Arabic",
    ],
    "gemini-1.5-pro-001": [
        "Spanish",
        "French",
        "German",
        "Italian",
        "Portuguese",
        "Dutch",
        "Russian",
        "Chinese (Simplified)",
    ],
    "gemini-1.5-flash-001": [
        "Spanish",
        "French",
        "German",
        "Italian",
        "Portuguese",
        "Dutch",
        "Russian",
        "Chinese (Simplified)",
    ],
    "gemini-1.5-pro-002": [
        "Spanish",
        "French",
        "German",
        "Italian",
        "Portuguese",
        "Dutch",
        "Russian",
        "Chinese (Simplified)",
        "Japanese",
        "Korean",
    ],
    "gemini-1.5-flash-002": [
        "Spanish",
        "French",
        "German",
        "Italian",
        "Portuguese",
        "Dutch",
        "Russian",
        "Chinese (Simplified)",
        "Japanese",
        "Korean",
        "Arabic",
    ],
    "deepl": [
        "Spanish",
        "French",
        "Japanese",
        "German",
        "Italian",
        "Dutch",
        "Russian",
        "Chinese (Simplified)",
        "Polish",
        "Portuguese",
    ],
}

# DeepL target codes. Not every language offered for "deepl" above needs to be
# here; a missing entry fails at translation time.
DEEPL_LANGUAGE_CODES = {
    "Spanish": "ES",
    "French": "FR",
    "German": "DE",
    "Italian": "IT",
    "Dutch": "NL",
    "Russian": "RU",
    "Chinese (Simplified)": "ZH",
    "Japanese": "JA",
    "Portuguese": "PT",
    "Polish": "PL",
}


def languages_for(model: str) -> list[str]:
    """Languages offered for a model; empty for unknown models."""
    return list(SUPPORTED_LANGUAGES.get(model, []))


class ProviderKind(str, enum.Enum):
    """Translation backends a model identifier can resolve to."""

    OPENAI = "openai"
    GEMINI = "gemini"
    DEEPL = "deepl"


def resolve_provider(model: str) -> ProviderKind:
    """
    Resolve a model identifier to its provider. First match wins.

    Raises:
        UnsupportedModelError: if no provider handles the identifier
    """
    if model.startswith("gpt"):
        return ProviderKind.OPENAI
    if model.startswith("gemini"):
        return ProviderKind.GEMINI
    if model == "deepl":
        return ProviderKind.DEEPL
    raise UnsupportedModelError(model)
