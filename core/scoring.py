"""Heuristic strength scoring and classification.

Scores combine a length contribution, a character-variety contribution and
stacked penalties, clamped to 0-100. Labels come from fixed thresholds.
"""

from core.composition import CompositionSignals, analyze_composition
from core.config import (
    LENGTH_POINTS_PER_CHAR,
    MAX_LENGTH_POINTS,
    VARIETY_POINTS_PER_CLASS,
    SINGLE_CLASS_PENALTY,
    REPEATED_PATTERN_PENALTY,
    COMMON_PASSWORD_PENALTY,
    MIN_SCORE,
    MAX_SCORE,
    STRENGTH_THRESHOLDS,
)


STRENGTH_LABELS = tuple(label for _, label in STRENGTH_THRESHOLDS)


def calculate_score(password: str, is_common: bool = False) -> int:
    """Calculate a strength score between 0 and 100.

    Args:
        password: Password to score
        is_common: Whether the password appears in the common password list

    Returns:
        Integer score, 0 for an empty password
    """
    if not password:
        return MIN_SCORE
    return score_signals(analyze_composition(password, is_common))


def score_signals(signals: CompositionSignals) -> int:
    """Score precomputed composition signals (0 for an empty password)."""
    if signals.length == 0:
        return MIN_SCORE

    score = min(MAX_LENGTH_POINTS, signals.length * LENGTH_POINTS_PER_CHAR)
    score += signals.variety_count * VARIETY_POINTS_PER_CLASS

    # Penalties stack
    if signals.variety_count <= 1:
        score -= SINGLE_CLASS_PENALTY
    if signals.has_repeated_pattern:
        score -= REPEATED_PATTERN_PENALTY
    if signals.is_common:
        score -= COMMON_PASSWORD_PENALTY

    return max(MIN_SCORE, min(MAX_SCORE, score))


def classify_score(score: int) -> str:
    """Map a score to its strength label.

    Thresholds are half-open with inclusive lower bounds. Scores outside
    0-100 fall into the nearest end label.
    """
    label = STRENGTH_LABELS[0]
    for lower_bound, candidate in STRENGTH_THRESHOLDS:
        if score >= lower_bound:
            label = candidate
    return label
