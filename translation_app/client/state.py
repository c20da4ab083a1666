"""Form state and the events that move it."""

from dataclasses import dataclass, replace
from typing import Union

from translation_app.languages import languages_for

DEFAULT_LANGUAGE = "French"
DEFAULT_MODEL = "gemini-1.5-flash-001"

EMPTY_MESSAGE_ERROR = "Please enter the message."
TRANSLATION_FAILED_ERROR = "Translation failed. Please try again."
EXPORT_FAILED_ERROR = "Failed to export data. Please try again."


@dataclass(frozen=True)
class FormState:
    language: str = DEFAULT_LANGUAGE
    message: str = ""
    model: str = DEFAULT_MODEL
    translation: str = ""
    error: str = ""
    is_loading: bool = False


@dataclass(frozen=True)
class ModelSelected:
    model: str


@dataclass(frozen=True)
class LanguageSelected:
    language: str


@dataclass(frozen=True)
class MessageChanged:
    message: str


@dataclass(frozen=True)
class TranslationStarted:
    pass


@dataclass(frozen=True)
class TranslationSucceeded:
    translation: str


@dataclass(frozen=True)
class TranslationFailed:
    error: str = TRANSLATION_FAILED_ERROR


@dataclass(frozen=True)
class ErrorRaised:
    error: str


Event = Union[
    ModelSelected,
    LanguageSelected,
    MessageChanged,
    TranslationStarted,
    TranslationSucceeded,
    TranslationFailed,
    ErrorRaised,
]


def reduce(state: FormState, event: Event) -> FormState:
    """Return the state that follows ``event``. Edits clear any visible error."""
    if isinstance(event, ModelSelected):
        languages = languages_for(event.model)
        language = state.language
        if languages and language not in languages:
            language = languages[0]
        return replace(state, model=event.model, language=language, error="")
    if isinstance(event, LanguageSelected):
        return replace(state, language=event.language, error="")
    if isinstance(event, MessageChanged):
        return replace(state, message=event.message, error="")
    if isinstance(event, TranslationStarted):
        return replace(state, is_loading=True, error="")
    if isinstance(event, TranslationSucceeded):
        return replace(state, translation=event.translation, is_loading=False)
    if isinstance(event, TranslationFailed):
        return replace(state, error=event.error, is_loading=False)
    if isinstance(event, ErrorRaised):
        return replace(state, error=event.error)
    raise TypeError(f"Unknown event: {event!r}")
