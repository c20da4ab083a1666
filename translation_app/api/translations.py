"""Translation log API routes."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from translation_app.config import get_settings
from translation_app.db.session import get_db
from translation_app.schemas.schemas import (
    ErrorResponse,
    TranslationCreate,
    TranslationResponse,
)
from translation_app.services.translation_log import translation_log_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Translations"])

settings = get_settings()


@router.post(
    "/translations",
    response_model=TranslationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Record a translation",
    description="Store one translation produced by a client.",
)
async def create_translation(
    request: TranslationCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Record a translation event.

    - **original_message**, **translated_message**, **language**, **model**: required
    - **ranking**: optional, defaults to 0
    - **rating**: optional, 0-5, defaults to 0
    - **classification**: optional, accepted but not stored
    """
    try:
        translation = await translation_log_service.create_translation(db, request)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Database insertion error: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Database insertion error"},
        )

    logger.info(f"Recorded translation {translation.id} ({translation.model} -> {translation.language})")
    return TranslationResponse.model_validate(translation)


@router.get(
    "/export",
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}}},
    summary="Export translations as CSV",
    description="Download every stored translation as a CSV attachment.",
)
async def export_translations(db: AsyncSession = Depends(get_db)):
    """Export the whole translation log."""
    try:
        content = await translation_log_service.export_csv(db)
    except Exception as e:
        logger.error(f"Error exporting to CSV: {e}")
        return PlainTextResponse(
            "Internal Server Error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return Response(
        content=content,
        media_type="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{settings.export_filename}"'
        },
    )
