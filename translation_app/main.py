"""Main FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from translation_app.api import health, translations
from translation_app.config import get_settings
from translation_app.db.session import init_db

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

REQUIRED_FIELDS = {"original_message", "translated_message", "language", "model"}
MISSING_FIELD_ERRORS = {"missing", "string_type", "string_too_short"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    logger.info("Starting Translation Log Service...")

    try:
        await init_db()
        logger.info('Table "translations" is ready.')
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise

    yield

    logger.info("Shutting down Translation Log Service...")


app = FastAPI(
    title="Translation Log Service",
    description="""
## Translation audit log

Records every translation produced by the translation app and exports the
log as CSV.

- `POST /api/translations`: record one translation
- `GET /api/export`: download all translations as `output_file.csv`
- `GET /api/models`: models and the languages offered for each
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report body validation failures as 400 without echoing the input."""
    missing = any(
        err["type"] in MISSING_FIELD_ERRORS and err["loc"][-1] in REQUIRED_FIELDS
        for err in exc.errors()
    )
    logger.info(f"Rejected request to {request.url.path}: {len(exc.errors())} validation error(s)")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Missing required fields" if missing else "Invalid request body"},
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle uncaught exceptions."""
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": str(exc) if settings.debug else "An unexpected error occurred",
        },
    )


# Include routers
app.include_router(health.router)
app.include_router(translations.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with service info."""
    return {
        "service": "Translation Log Service",
        "version": "1.0.0",
        "environment": settings.app_env,
        "docs": "/docs",
        "health": "/health",
    }


def run():
    """Console entry point."""
    import uvicorn

    uvicorn.run(
        "translation_app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
