"""Translation log service: insert rows and render the CSV export."""

import csv
import io
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from translation_app.db.models import TRANSLATION_COLUMNS, Translation
from translation_app.schemas.schemas import TranslationCreate


def _format_cell(value):
    """Render a column value the way the export has always shown it."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, datetime):
        return value.isoformat()
    return value


class TranslationLogService:
    """Service for storing and exporting translation events."""

    async def create_translation(
        self,
        db: AsyncSession,
        request: TranslationCreate,
    ) -> Translation:
        """
        Insert one translation row.

        Args:
            db: Database session
            request: Validated translation event

        Returns:
            The stored row with id and created_at populated
        """
        translation = Translation(
            original_message=request.original_message,
            translated_message=request.translated_message,
            language=request.language,
            model=request.model,
            ranking=request.ranking if request.ranking is not None else 0,
            rating=request.rating if request.rating is not None else 0,
        )
        db.add(translation)
        await db.flush()
        await db.refresh(translation)

        return translation

    async def list_translations(self, db: AsyncSession) -> list[Translation]:
        """Get every stored translation ordered by id."""
        result = await db.execute(select(Translation).order_by(Translation.id))
        return list(result.scalars().all())

    def to_csv(self, translations: list[Translation]) -> str:
        """Serialize rows to CSV with a header of table column names."""
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(TRANSLATION_COLUMNS)
        for translation in translations:
            writer.writerow(
                [_format_cell(getattr(translation, column)) for column in TRANSLATION_COLUMNS]
            )
        return output.getvalue()

    async def export_csv(self, db: AsyncSession) -> str:
        """Read all rows and return them as CSV text."""
        translations = await self.list_translations(db)
        return self.to_csv(translations)


# Singleton instance
translation_log_service = TranslationLogService()
