"""Health check endpoints.

Public endpoints for service health monitoring.
"""

from datetime import datetime

from fastapi import APIRouter, Depends

from api.dependencies import get_analyzer
from api.models import HealthResponse
from password_checker import PasswordAnalyzer


router = APIRouter(tags=["Health"])


@router.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "healthy", "service": "Password Analyzer API"}


@router.get("/health", response_model=HealthResponse)
async def health_check(analyzer: PasswordAnalyzer = Depends(get_analyzer)):
    """Detailed health check including dictionary status."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now().isoformat(),
        dictionary_loaded=analyzer.is_dictionary_loaded(),
        dictionary_size=analyzer.dictionary_size,
    )
