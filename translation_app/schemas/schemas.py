"""Pydantic schemas for request/response validation."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ============== Translation Schemas ==============


class TranslationCreate(BaseModel):
    """A translation event sent by the client."""

    original_message: str = Field(..., min_length=1, description="Text the user submitted")
    translated_message: str = Field(..., min_length=1, description="Text the provider returned")
    language: str = Field(..., min_length=1, max_length=50, description="Target language name")
    model: str = Field(..., min_length=1, max_length=50, description="Model identifier used")
    ranking: Optional[int] = Field(None, description="Client ranking (defaults to 0)")
    rating: Optional[float] = Field(None, ge=0, le=5, description="Client rating between 0 and 5")
    classification: Optional[str] = Field(
        None, description="Accepted for compatibility; not stored"
    )


class TranslationResponse(BaseModel):
    """A stored translation row."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    original_message: str
    translated_message: str
    language: str
    model: str
    ranking: int
    rating: float
    created_at: datetime


# ============== Health & Misc Schemas ==============


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    database: str


class ModelInfo(BaseModel):
    """A selectable model and the languages offered for it."""

    model: str
    provider: str
    languages: list[str]


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    detail: Optional[str] = None
