"""FastAPI dependencies.

Provides the shared analyzer instance and client address resolution for
the password tool endpoints.
"""

from fastapi import Request

from password_checker import PasswordAnalyzer, get_default_analyzer


def get_analyzer(request: Request) -> PasswordAnalyzer:
    """Return the analyzer loaded at startup, or the process default.

    The analyzer is read-only, so a single instance serves all requests.
    """
    analyzer = getattr(request.app.state, "analyzer", None)
    if analyzer is None:
        analyzer = get_default_analyzer()
    return analyzer


def get_client_ip(request: Request) -> str:
    """Direct client address, used for event logging only."""
    return request.client.host if request.client else "unknown"
