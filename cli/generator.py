"""Password generation CLI flow.

Prompts for length and symbol preference, generates a password and shows
how it scores.
"""

from typing import Optional

from core import InvalidLengthError, log_event
from password_checker import PasswordAnalyzer

from cli.prompts import prompt_for_password_length, prompt_yes_no


def generate_password_flow(analyzer: PasswordAnalyzer) -> Optional[str]:
    """Full interactive flow for generating a password.

    Returns:
        The generated password, or None if canceled or the length was invalid
    """
    length = prompt_for_password_length()
    if length is None:
        print("Canceled password generation.\n")
        return None

    use_symbols = prompt_yes_no("Include symbols?")

    try:
        password = analyzer.generate_password(length, use_symbols)
    except InvalidLengthError as e:
        print(f"Error: {e}\n")
        log_event(
            "password_generated",
            status="FAILURE",
            details={"length": length, "allow_symbols": use_symbols},
        )
        return None

    score = analyzer.calculate_score(password)
    print(f"\nGenerated password: {password}")
    print(f"Score: {score} / 100 ({analyzer.classify_score(score)})\n")

    log_event(
        "password_generated",
        details={"length": length, "allow_symbols": use_symbols, "score": score},
    )
    return password
