"""Password strength evaluation entry points.

PasswordAnalyzer ties the core components to one preloaded common password
set and exposes the scoring, classification, feedback and generation API.
"""

from dataclasses import dataclass
from functools import lru_cache
from random import Random
from typing import Optional

from core.composition import CompositionSignals, analyze_composition
from core.config import DICTIONARY_FILE
from core.dictionary import CommonPasswordSet, is_common_password, load_common_passwords
from core.feedback import build_feedback, feedback_from_signals, render_feedback
from core.generator import generate_password
from core.scoring import calculate_score, classify_score, score_signals


@dataclass(frozen=True)
class PasswordReport:
    """Result of a single password analysis."""
    score: int
    label: str
    feedback: tuple[str, ...]
    is_common: bool
    signals: CompositionSignals


class PasswordAnalyzer:
    """Scores, classifies and advises on passwords.

    The common password set is fixed at construction and never modified,
    so one analyzer can be shared across threads.
    """

    def __init__(self, common_passwords: Optional[CommonPasswordSet] = None):
        self._common_passwords = common_passwords or CommonPasswordSet()

    @classmethod
    def from_file(cls, dictionary_file: str = DICTIONARY_FILE) -> "PasswordAnalyzer":
        """Create an analyzer from a dictionary file (missing file is non-fatal)."""
        return cls(load_common_passwords(dictionary_file))

    @property
    def dictionary_size(self) -> int:
        return len(self._common_passwords)

    def is_dictionary_loaded(self) -> bool:
        return self._common_passwords.is_loaded

    def is_common_password(self, password: str) -> bool:
        return is_common_password(password, self._common_passwords)

    def calculate_score(self, password: str) -> int:
        if not password:
            return 0
        return calculate_score(password, self.is_common_password(password))

    def classify_score(self, score: int) -> str:
        return classify_score(score)

    def get_feedback_lines(self, password: str) -> list[str]:
        if not password:
            return build_feedback(password)
        return build_feedback(password, self.is_common_password(password))

    def get_feedback(self, password: str) -> str:
        """Return multi-line improvement advice for a password."""
        return render_feedback(self.get_feedback_lines(password))

    def generate_password(
        self,
        length: int,
        allow_symbols: bool = True,
        rng: Optional[Random] = None
    ) -> str:
        """Generate a random password.

        Raises:
            InvalidLengthError: If length is not a positive integer
        """
        return generate_password(length, allow_symbols, rng)

    def analyze(self, password: str) -> PasswordReport:
        """Run every check once and bundle the results."""
        common = bool(password) and self.is_common_password(password)
        signals = analyze_composition(password, common)
        score = score_signals(signals)
        return PasswordReport(
            score=score,
            label=classify_score(score),
            feedback=tuple(feedback_from_signals(signals)),
            is_common=common,
            signals=signals,
        )


@lru_cache(maxsize=1)
def get_default_analyzer() -> PasswordAnalyzer:
    """Return the process-wide analyzer built from DICTIONARY_FILE."""
    return PasswordAnalyzer.from_file(DICTIONARY_FILE)


def check_password_strength(password: str) -> tuple[str, list[str]]:
    """Check password strength with the default analyzer.

    Returns:
        Tuple of (strength label, feedback list)
    """
    report = get_default_analyzer().analyze(password)
    return report.label, list(report.feedback)
