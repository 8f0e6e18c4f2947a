"""Password tools endpoints.

Public endpoints for password analysis and generation.
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from api.dependencies import get_analyzer, get_client_ip
from api.models import (
    PasswordAnalyzeRequest,
    PasswordAnalyzeResponse,
    PasswordGenerateRequest,
    PasswordGenerateResponse,
)
from core import GenerationError, InvalidLengthError, generate_password_with_coverage, log_event
from password_checker import PasswordAnalyzer


router = APIRouter(tags=["Password Tools"])


@router.post("/analyze", response_model=PasswordAnalyzeResponse)
async def analyze_password(
    body: PasswordAnalyzeRequest,
    request: Request,
    analyzer: PasswordAnalyzer = Depends(get_analyzer),
):
    """Score, classify and review a password."""
    report = analyzer.analyze(body.password)

    log_event(
        "password_analyzed",
        source="api",
        details={
            "length": report.signals.length,
            "score": report.score,
            "label": report.label,
            "is_common": report.is_common,
            "ip_address": get_client_ip(request),
        },
    )

    return PasswordAnalyzeResponse(
        score=report.score,
        label=report.label,
        feedback=list(report.feedback),
        is_common=report.is_common,
        length=report.signals.length,
        dictionary_loaded=analyzer.is_dictionary_loaded(),
    )


@router.post("/generate", response_model=PasswordGenerateResponse)
async def generate_new_password(
    body: PasswordGenerateRequest,
    request: Request,
    analyzer: PasswordAnalyzer = Depends(get_analyzer),
):
    """Generate a random password and report its strength."""
    try:
        if body.require_all_classes:
            password = generate_password_with_coverage(body.length, body.allow_symbols)
        else:
            password = analyzer.generate_password(body.length, body.allow_symbols)
    except (InvalidLengthError, GenerationError) as e:
        log_event(
            "password_generated",
            status="FAILURE",
            source="api",
            details={"length": body.length, "ip_address": get_client_ip(request)},
        )
        raise HTTPException(status_code=400, detail=str(e))

    report = analyzer.analyze(password)

    log_event(
        "password_generated",
        source="api",
        details={
            "length": body.length,
            "allow_symbols": body.allow_symbols,
            "score": report.score,
            "ip_address": get_client_ip(request),
        },
    )

    return PasswordGenerateResponse(
        password=password,
        score=report.score,
        label=report.label,
        feedback=list(report.feedback),
    )
