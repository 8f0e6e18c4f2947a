"""Password analysis CLI flow.

Reads a password, prints its score, rating and improvement advice.
"""

from core import log_event, render_feedback
from password_checker import PasswordAnalyzer, PasswordReport

from cli.prompts import prompt_for_password


def display_report(report: PasswordReport) -> None:
    """Print an analysis report."""
    print("\n=== Analysis Result ===")
    print(f"Score: {report.score} / 100")
    print(f"Rating: {report.label}\n")

    print("Feedback:")
    print(render_feedback(report.feedback))

    if report.is_common:
        print("\n[Warning] This password appears in a common password list.")
        print("          You should choose a different one.")


def analyze_password_flow(analyzer: PasswordAnalyzer) -> PasswordReport:
    """Prompt for a password and display its analysis."""
    password = prompt_for_password()

    report = analyzer.analyze(password)
    display_report(report)
    print()

    log_event(
        "password_analyzed",
        details={
            "length": report.signals.length,
            "score": report.score,
            "label": report.label,
            "is_common": report.is_common,
        },
    )
    return report
