"""Translation screen controller: form state, submit, audit and export."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

from translation_app.client.audit import AuditLogClient
from translation_app.client.dispatcher import Dispatcher, TranslationRequest
from translation_app.client.state import (
    EMPTY_MESSAGE_ERROR,
    EXPORT_FAILED_ERROR,
    ErrorRaised,
    Event,
    FormState,
    TranslationFailed,
    TranslationStarted,
    TranslationSucceeded,
    reduce,
)
from translation_app.config import ClientSettings
from translation_app.errors import (
    AuditLogError,
    InputValidationError,
    TranslationError,
    UnsupportedModelError,
)

logger = logging.getLogger(__name__)


class TranslationController:
    """
    Owns the current FormState and applies events to it.

    Only one translation runs at a time; a submit while one is in flight is
    ignored. The audit write runs as a background task and its failures are
    logged only.
    """

    def __init__(
        self,
        dispatcher: Dispatcher,
        audit_client: AuditLogClient,
        state: Optional[FormState] = None,
    ):
        self.dispatcher = dispatcher
        self.audit_client = audit_client
        self.state = state or FormState()
        self._pending: set[asyncio.Task] = set()

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> "TranslationController":
        return cls(
            Dispatcher.from_settings(settings),
            AuditLogClient(settings.logging_service_url, timeout=settings.service_timeout),
        )

    def dispatch(self, event: Event) -> FormState:
        self.state = reduce(self.state, event)
        return self.state

    def _build_request(self) -> TranslationRequest:
        if not self.state.message:
            raise InputValidationError(EMPTY_MESSAGE_ERROR)
        return TranslationRequest(
            target_language=self.state.language,
            source_text=self.state.message,
            model=self.state.model,
        )

    async def submit(self) -> FormState:
        """Validate the form and translate the current message."""
        if self.state.is_loading:
            logger.info("Translation already in progress, ignoring submit")
            return self.state

        try:
            request = self._build_request()
        except InputValidationError as e:
            return self.dispatch(ErrorRaised(str(e)))

        self.dispatch(TranslationStarted())

        try:
            translated = await self.dispatcher.translate(request)
        except UnsupportedModelError as e:
            logger.error(f"Translation error: {e}")
            return self.dispatch(TranslationFailed(str(e)))
        except TranslationError as e:
            logger.error(f"Translation error: {e}", exc_info=e.__cause__ is not None)
            return self.dispatch(TranslationFailed())

        self.dispatch(TranslationSucceeded(translated))
        self._schedule_audit(request, translated)
        return self.state

    def _schedule_audit(self, request: TranslationRequest, translated: str) -> None:
        task = asyncio.create_task(self._record(request, translated))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _record(self, request: TranslationRequest, translated: str) -> None:
        try:
            await self.audit_client.record(
                original_message=request.source_text,
                translated_message=translated,
                language=request.target_language,
                model=request.model,
            )
        except AuditLogError as e:
            logger.warning(f"Audit log write failed: {e}")
        except Exception as e:
            logger.warning(f"Audit log write failed unexpectedly: {e!r}", exc_info=True)

    async def wait_for_audit(self) -> None:
        """Wait for outstanding audit writes (used on shutdown)."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    async def export_csv(self, directory: Path = Path("."), filename: str = "output_file.csv") -> Optional[Path]:
        """Download the CSV export into ``directory``. Returns the written path."""
        try:
            content = await self.audit_client.export_csv()
        except AuditLogError as e:
            logger.error(f"Export error: {e}")
            self.dispatch(ErrorRaised(EXPORT_FAILED_ERROR))
            return None

        path = Path(directory) / filename
        try:
            path.write_bytes(content)
        except OSError as e:
            logger.error(f"Export error: could not write {path}: {e}")
            self.dispatch(ErrorRaised(EXPORT_FAILED_ERROR))
            return None

        logger.info(f"Exported translation log to {path}")
        return path
