"""Health check and system info routes."""

from fastapi import APIRouter
from sqlalchemy import text

from translation_app.config import get_settings
from translation_app.languages import MODELS, languages_for, resolve_provider
from translation_app.schemas.schemas import HealthResponse, ModelInfo

router = APIRouter(tags=["System"])

settings = get_settings()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the service and its database.",
)
async def health_check():
    """Health check endpoint."""
    db_status = "ok"
    try:
        from translation_app.db.session import engine
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception:
        db_status = "error"

    return HealthResponse(
        status="healthy" if db_status == "ok" else "degraded",
        version="1.0.0",
        database=db_status,
    )


@router.get(
    "/api/models",
    response_model=list[ModelInfo],
    summary="List models",
    description="Get the selectable models and the languages offered for each.",
)
async def list_models():
    """Get list of models with their languages."""
    return [
        ModelInfo(
            model=model,
            provider=resolve_provider(model).value,
            languages=languages_for(model),
        )
        for model in MODELS
    ]
