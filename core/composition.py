"""Character composition analysis.

Detects which ASCII character classes a password uses and whether it
contains adjacent repeated substrings. Classification is locale
independent: anything outside ASCII letters and digits counts as a symbol.
"""

import string
from dataclasses import dataclass


ASCII_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)
MIN_REPEAT_CHECK_LENGTH = 4


@dataclass(frozen=True)
class CompositionSignals:
    """Per-call facts about a password used by scoring and feedback."""
    has_lower: bool
    has_upper: bool
    has_digit: bool
    has_symbol: bool
    has_repeated_pattern: bool
    is_common: bool
    length: int

    @property
    def variety_count(self) -> int:
        """Number of character classes present (0-4)."""
        return sum([self.has_lower, self.has_upper, self.has_digit, self.has_symbol])


def has_lower(password: str) -> bool:
    return any(c in string.ascii_lowercase for c in password)


def has_upper(password: str) -> bool:
    return any(c in string.ascii_uppercase for c in password)


def has_digit(password: str) -> bool:
    return any(c in string.digits for c in password)


def has_symbol(password: str) -> bool:
    return any(c not in ASCII_ALPHANUMERIC for c in password)


def has_repeated_sequences(password: str) -> bool:
    """Check for two adjacent identical substrings of length 2 or more.

    Examples flagged: "abab", "123123", "aaaa", "xyzxyz!".
    Passwords shorter than 4 characters are never flagged, and runs of a
    single character only count once they form a repeated pair ("aaaa").

    Args:
        password: Password to inspect

    Returns:
        True on the first repeated pair found, False otherwise
    """
    n = len(password)
    if n < MIN_REPEAT_CHECK_LENGTH:
        return False

    for size in range(2, n // 2 + 1):
        for i in range(0, n - 2 * size + 1):
            if password[i:i + size] == password[i + size:i + 2 * size]:
                return True
    return False


def analyze_composition(password: str, is_common: bool = False) -> CompositionSignals:
    """Extract composition signals for a password.

    Args:
        password: Password to analyze
        is_common: Result of the common-password check, supplied by the caller

    Returns:
        Fresh CompositionSignals for this password
    """
    return CompositionSignals(
        has_lower=has_lower(password),
        has_upper=has_upper(password),
        has_digit=has_digit(password),
        has_symbol=has_symbol(password),
        has_repeated_pattern=has_repeated_sequences(password),
        is_common=is_common,
        length=len(password),
    )
