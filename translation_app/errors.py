"""Exceptions raised by the translation client."""


class TranslationAppError(Exception):
    """Base class for all application errors."""


class ConfigurationError(TranslationAppError):
    """Required configuration (usually an API key) is missing or invalid."""


class InputValidationError(TranslationAppError):
    """The form was submitted with invalid input."""


class TranslationError(TranslationAppError):
    """A translation could not be produced."""


class UnsupportedModelError(TranslationError):
    """The selected model does not map to any provider."""

    def __init__(self, model: str):
        super().__init__(f"Unsupported model: {model}")
        self.model = model


class UnsupportedLanguageError(TranslationError):
    """The provider has no code for the requested target language."""

    def __init__(self, language: str):
        super().__init__(f"Unsupported language: {language}")
        self.language = language


class ProviderError(TranslationError):
    """The provider call failed; the original exception is kept as __cause__."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider


class AuditLogError(TranslationAppError):
    """A call to the logging service failed."""
