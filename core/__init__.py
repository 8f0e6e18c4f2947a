"""Password Analyzer Core Package.

Provides modular components for password strength evaluation:
- config: Centralized configuration constants
- storage: File I/O operations
- composition: Character class and repeated pattern detection
- scoring: Score calculation and strength classification
- feedback: Improvement advice
- dictionary: Common password set and loader
- generator: Random password generation
- audit: Logging setup and analysis event log
"""

# Configuration constants
from core.config import (
    DICTIONARY_FILE,
    LOG_DIR,
    AUDIT_LOG_FILE,
    RECOMMENDED_PASSWORD_LENGTH,
    GENERATION_SYMBOLS,
    DEFAULT_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
)

# Composition analysis
from core.composition import (
    CompositionSignals,
    analyze_composition,
    has_lower,
    has_upper,
    has_digit,
    has_symbol,
    has_repeated_sequences,
)

# Scoring and classification
from core.scoring import (
    STRENGTH_LABELS,
    calculate_score,
    classify_score,
)

# Feedback
from core.feedback import (
    EMPTY_PASSWORD_MESSAGE,
    BEST_PRACTICES_MESSAGE,
    build_feedback,
    render_feedback,
)

# Common password dictionary
from core.dictionary import (
    CommonPasswordSet,
    is_common_password,
    load_common_passwords,
)

# Generation
from core.generator import (
    InvalidLengthError,
    GenerationError,
    build_charset,
    generate_password,
    generate_password_with_coverage,
)

# Logging
from core.audit import (
    configure_logging,
    log_event,
    get_events,
    count_events_by_type,
)

# Storage utilities
from core.storage import StorageError, ensure_directories

__all__ = [
    # Config
    "DICTIONARY_FILE",
    "LOG_DIR",
    "AUDIT_LOG_FILE",
    "RECOMMENDED_PASSWORD_LENGTH",
    "GENERATION_SYMBOLS",
    "DEFAULT_PASSWORD_LENGTH",
    "MAX_PASSWORD_LENGTH",
    # Composition
    "CompositionSignals",
    "analyze_composition",
    "has_lower",
    "has_upper",
    "has_digit",
    "has_symbol",
    "has_repeated_sequences",
    # Scoring
    "STRENGTH_LABELS",
    "calculate_score",
    "classify_score",
    # Feedback
    "EMPTY_PASSWORD_MESSAGE",
    "BEST_PRACTICES_MESSAGE",
    "build_feedback",
    "render_feedback",
    # Dictionary
    "CommonPasswordSet",
    "is_common_password",
    "load_common_passwords",
    # Generation
    "InvalidLengthError",
    "GenerationError",
    "build_charset",
    "generate_password",
    "generate_password_with_coverage",
    # Logging
    "configure_logging",
    "log_event",
    "get_events",
    "count_events_by_type",
    # Storage
    "StorageError",
    "ensure_directories",
]
