"""Random password generation.

Draws characters uniformly, with replacement, from letters and digits plus
an optional fixed symbol set. A fresh random source is created per call
unless the caller injects one.
"""

import secrets
import string
from random import Random
from typing import Optional

from core.composition import analyze_composition
from core.config import GENERATION_SYMBOLS, MAX_COVERAGE_ATTEMPTS


class InvalidLengthError(ValueError):
    """Requested password length is not a positive integer."""
    pass


class GenerationError(Exception):
    """Generation could not satisfy the requested constraints."""
    pass


def build_charset(allow_symbols: bool = True) -> str:
    """Return the generation charset for the symbol option."""
    charset = string.ascii_lowercase + string.ascii_uppercase + string.digits
    if allow_symbols:
        charset += GENERATION_SYMBOLS
    return charset


def _validate_length(length: int) -> None:
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLengthError("Password length must be an integer.")
    if length <= 0:
        raise InvalidLengthError("Password length must be positive.")


def generate_password(
    length: int,
    allow_symbols: bool = True,
    rng: Optional[Random] = None
) -> str:
    """Generate a random password.

    Character classes are not guaranteed to appear; use
    generate_password_with_coverage() when every class is required.

    Args:
        length: Number of characters (must be positive)
        allow_symbols: Include the fixed symbol set in the charset
        rng: Random source to draw from (default: new SystemRandom)

    Returns:
        Generated password string of exactly `length` characters

    Raises:
        InvalidLengthError: If length is zero, negative or not an integer
    """
    _validate_length(length)

    if rng is None:
        rng = secrets.SystemRandom()

    charset = build_charset(allow_symbols)
    return ''.join(rng.choice(charset) for _ in range(length))


def generate_password_with_coverage(
    length: int,
    allow_symbols: bool = True,
    rng: Optional[Random] = None,
    max_attempts: int = MAX_COVERAGE_ATTEMPTS
) -> str:
    """Generate a password that contains every class of its charset.

    Re-rolls generate_password() until lowercase, uppercase, digits and
    (when allowed) symbols are all present.

    Raises:
        InvalidLengthError: If length cannot hold one character per class
        GenerationError: If no candidate qualified within max_attempts
    """
    _validate_length(length)

    required_classes = 4 if allow_symbols else 3
    if length < required_classes:
        raise InvalidLengthError(
            f"Password length must be at least {required_classes} "
            "to include all character types."
        )

    if rng is None:
        rng = secrets.SystemRandom()

    for _ in range(max_attempts):
        candidate = generate_password(length, allow_symbols, rng)
        signals = analyze_composition(candidate)
        if signals.variety_count == required_classes:
            return candidate

    raise GenerationError(
        f"Could not generate a password covering all character types "
        f"in {max_attempts} attempts."
    )
