"""Pydantic models for API request/response validation.

Defines data structures for all API endpoints.
"""

from pydantic import BaseModel, Field

from core.config import DEFAULT_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH, MAX_ANALYZE_LENGTH


class PasswordAnalyzeRequest(BaseModel):
    """Request model for password analysis.

    Empty passwords are accepted and score 0.
    """
    password: str = Field(..., max_length=MAX_ANALYZE_LENGTH, description="Password to analyze")


class PasswordAnalyzeResponse(BaseModel):
    """Response model for password analysis."""
    score: int = Field(..., ge=0, le=100)
    label: str
    feedback: list[str]
    is_common: bool
    length: int
    dictionary_loaded: bool


class PasswordGenerateRequest(BaseModel):
    """Request model for password generation."""
    length: int = Field(
        default=DEFAULT_PASSWORD_LENGTH, ge=1, le=MAX_PASSWORD_LENGTH, description="Password length"
    )
    allow_symbols: bool = Field(default=True, description="Include symbols")
    require_all_classes: bool = Field(
        default=False, description="Re-roll until every character type is present"
    )


class PasswordGenerateResponse(BaseModel):
    """Response model for generated password."""
    password: str
    score: int
    label: str
    feedback: list[str]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    dictionary_loaded: bool
    dictionary_size: int
