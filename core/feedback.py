"""Human-readable advice for improving a password.

Each detected weakness contributes one line; lines are independent and
always appear in the same order.
"""

from typing import Sequence

from core.composition import CompositionSignals, analyze_composition
from core.config import RECOMMENDED_PASSWORD_LENGTH


EMPTY_PASSWORD_MESSAGE = "Your password is empty. You should definitely set a password!"
BEST_PRACTICES_MESSAGE = "Nice! Your password already follows most best practices."

SHORT_LENGTH_TIP = (
    f"Consider using at least {RECOMMENDED_PASSWORD_LENGTH} characters for better security."
)
GOOD_LENGTH_TIP = "Good length! Longer passwords are harder to crack."
MIX_CASE_TIP = "Mix UPPERCASE and lowercase letters to increase complexity."
ADD_DIGITS_TIP = "Add some digits (0-9) to strengthen your password."
ADD_SYMBOLS_TIP = "Consider adding symbols (e.g. !, @, #, $, %) to make it harder to guess."
REPEATED_PATTERN_TIP = "Try to avoid repeated patterns like 'abab' or '123123'."
COMMON_PASSWORD_TIP = "This password appears in a common password list. You should NOT use it."

STANDALONE_MESSAGES = (EMPTY_PASSWORD_MESSAGE, BEST_PRACTICES_MESSAGE)


def build_feedback(password: str, is_common: bool = False) -> list[str]:
    """Build the ordered list of advice lines for a password.

    Args:
        password: Password to review
        is_common: Whether the password appears in the common password list

    Returns:
        List of feedback messages (never empty)
    """
    if not password:
        return [EMPTY_PASSWORD_MESSAGE]
    return feedback_from_signals(analyze_composition(password, is_common))


def feedback_from_signals(signals: CompositionSignals) -> list[str]:
    """Build advice lines from precomputed composition signals."""
    if signals.length == 0:
        return [EMPTY_PASSWORD_MESSAGE]

    feedback = []

    if signals.length < RECOMMENDED_PASSWORD_LENGTH:
        feedback.append(SHORT_LENGTH_TIP)
    else:
        feedback.append(GOOD_LENGTH_TIP)

    if not signals.has_lower or not signals.has_upper:
        feedback.append(MIX_CASE_TIP)

    if not signals.has_digit:
        feedback.append(ADD_DIGITS_TIP)

    if not signals.has_symbol:
        feedback.append(ADD_SYMBOLS_TIP)

    if signals.has_repeated_pattern:
        feedback.append(REPEATED_PATTERN_TIP)

    if signals.is_common:
        feedback.append(COMMON_PASSWORD_TIP)

    # Unreachable while the length line always fires; kept for compatibility
    if not feedback:
        feedback.append(BEST_PRACTICES_MESSAGE)

    return feedback


def render_feedback(feedback: Sequence[str]) -> str:
    """Format feedback lines as multi-line text.

    Advice lines become "- <tip>" bullets, one per line. The empty-password
    and best-practices sentences are returned on their own without a bullet.
    """
    if len(feedback) == 1 and feedback[0] in STANDALONE_MESSAGES:
        return feedback[0]
    return "".join(f"- {tip}\n" for tip in feedback)
