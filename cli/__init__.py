"""CLI package for the Password Analyzer.

Provides modular CLI flows for the interactive menu.
"""

from cli.analyze import analyze_password_flow, display_report
from cli.generator import generate_password_flow

__all__ = [
    "analyze_password_flow",
    "display_report",
    "generate_password_flow",
]
