"""Centralized configuration constants.

All configurable values in one place for easy maintenance.
Deployment-sensitive settings can be overridden via environment variables.
"""

import os

# Base directories
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = os.path.join(BASE_DIR, "data")

# Common password dictionary (newline-delimited, one password per line)
DICTIONARY_FILE = os.environ.get(
    "PASSWORD_DICTIONARY_FILE",
    os.path.join(DATA_DIR, "common_passwords.txt"),
)

# Logging
LOG_DIR = os.environ.get("LOG_DIR", "logs")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
APP_LOG_FILE = os.path.join(LOG_DIR, "analyzer.log")
AUDIT_LOG_FILE = os.path.join(LOG_DIR, "analysis_events.jsonl")
AUDIT_LOG_ENABLED = os.environ.get("AUDIT_LOG_ENABLED", "true").lower() == "true"
AUDIT_LOG_MAX_BYTES = int(os.environ.get("AUDIT_LOG_MAX_BYTES", 5 * 1024 * 1024))  # 5MB default
AUDIT_LOG_BACKUP_COUNT = int(os.environ.get("AUDIT_LOG_BACKUP_COUNT", 5))
AUDIT_LOG_COMPRESS = os.environ.get("AUDIT_LOG_COMPRESS", "true").lower() == "true"

# Scoring weights
LENGTH_POINTS_PER_CHAR = 4
MAX_LENGTH_POINTS = 40          # saturates at 10 characters
VARIETY_POINTS_PER_CLASS = 10   # lower, upper, digit, symbol -> max 40
SINGLE_CLASS_PENALTY = 15
REPEATED_PATTERN_PENALTY = 10
COMMON_PASSWORD_PENALTY = 40
MIN_SCORE = 0
MAX_SCORE = 100

# Classification thresholds: (lower bound inclusive, label), ascending
STRENGTH_THRESHOLDS = (
    (0, "Very weak"),
    (25, "Weak"),
    (50, "Moderate"),
    (70, "Strong"),
    (85, "Very strong"),
)

# Feedback
RECOMMENDED_PASSWORD_LENGTH = 12

# Password generation
GENERATION_SYMBOLS = "!@#$%^&*()-_=+[]{};:,.<>?/"
DEFAULT_PASSWORD_LENGTH = 16
MAX_PASSWORD_LENGTH = 128
MAX_COVERAGE_ATTEMPTS = 100

# REST API
# Set REQUIRE_HTTPS=true in production to reject non-HTTPS requests
REQUIRE_HTTPS = os.environ.get("REQUIRE_HTTPS", "false").lower() == "true"
API_RATE_LIMIT = os.environ.get("API_RATE_LIMIT", "100/minute")
MAX_ANALYZE_LENGTH = 1024
_cors_origins_env = os.environ.get("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
CORS_ORIGINS: list[str] = [
    origin.strip() for origin in _cors_origins_env.split(",") if origin.strip()
]
