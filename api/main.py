"""FastAPI application configuration.

Main entry point for the Password Analyzer REST API.
Applies rate limiting, security headers, optional HTTPS enforcement and
restrictive CORS configuration.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from core import DICTIONARY_FILE, configure_logging
from core.config import API_RATE_LIMIT, CORS_ORIGINS, REQUIRE_HTTPS
from api.routes import health_router, tools_router
from password_checker import PasswordAnalyzer


logger = logging.getLogger(__name__)

# Rate limiter configuration
# Uses client IP for rate limit tracking
limiter = Limiter(key_func=get_remote_address, default_limits=[API_RATE_LIMIT])


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the common password dictionary once at startup."""
    configure_logging()
    app.state.analyzer = PasswordAnalyzer.from_file(DICTIONARY_FILE)
    if not app.state.analyzer.is_dictionary_loaded():
        logger.warning("API running without a common password dictionary")
    yield
    app.state.analyzer = None


app = FastAPI(
    title="Password Analyzer API",
    description="""
    Password strength analysis API with:
    - Heuristic 0-100 scoring and five-level classification
    - Common password detection
    - Actionable improvement feedback
    - Random password generation
    - Rate limiting
    """,
    version="1.0.0",
    lifespan=lifespan
)

# Attach rate limiter to app
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)


# HTTPS enforcement middleware
@app.middleware("http")
async def enforce_https(request: Request, call_next) -> Response:
    """Reject plain HTTP requests when REQUIRE_HTTPS is enabled.

    Health checks are exempted to allow load balancer probes. Passwords
    submitted for analysis travel in request bodies, so production
    deployments should set REQUIRE_HTTPS=true.
    """
    if REQUIRE_HTTPS:
        if request.url.path in ["/", "/health"]:
            return await call_next(request)

        # X-Forwarded-Proto is set by reverse proxies (nginx, traefik, etc.)
        forwarded_proto = request.headers.get("X-Forwarded-Proto", "")
        is_https = (
            request.url.scheme == "https" or
            forwarded_proto.lower() == "https"
        )

        if not is_https:
            return JSONResponse(
                status_code=403,
                content={
                    "detail": "HTTPS required. This API requires secure connections.",
                    "error": "https_required"
                }
            )

    return await call_next(request)


# Security headers middleware
@app.middleware("http")
async def add_security_headers(request: Request, call_next) -> Response:
    """Add security headers to all responses.

    Responses may contain generated passwords, so caching is disabled.
    """
    response = await call_next(request)

    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Content-Security-Policy"] = "default-src 'self'; frame-ancestors 'none'"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

    # Prevent caching of sensitive responses
    response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, private"
    response.headers["Pragma"] = "no-cache"

    return response


# CORS configuration - explicitly restricted
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "Origin"],
    expose_headers=["X-RateLimit-Limit", "X-RateLimit-Remaining", "X-RateLimit-Reset"],
    max_age=600,  # Cache preflight requests for 10 minutes
)

# Register routers
app.include_router(health_router)
app.include_router(tools_router)


def run() -> None:
    """Serve the API with uvicorn on localhost."""
    import uvicorn
    uvicorn.run("api.main:app", host="127.0.0.1", port=8000)


if __name__ == "__main__":
    run()
