"""Common password dictionary.

Holds the read-only set of known common passwords and answers
case-insensitive membership queries. Loading is non-fatal: a missing or
unreadable file leaves the analyzer running with an empty set.
"""

import logging
from typing import Iterable, Optional

from core.storage import StorageError, read_lines


logger = logging.getLogger(__name__)


class CommonPasswordSet:
    """Immutable set of lowercased common passwords."""

    def __init__(self, passwords: Iterable[str] = ()):
        self._passwords = frozenset(p.lower() for p in passwords if p)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "CommonPasswordSet":
        """Build a set from raw dictionary lines, skipping empty ones."""
        return cls(line.rstrip("\r\n") for line in lines)

    @property
    def is_loaded(self) -> bool:
        """True when at least one entry is present."""
        return bool(self._passwords)

    def contains(self, password: str) -> bool:
        """Case-insensitive membership test; always False when empty."""
        if not self._passwords:
            return False
        return password.lower() in self._passwords

    def __contains__(self, password: object) -> bool:
        return isinstance(password, str) and self.contains(password)

    def __len__(self) -> int:
        return len(self._passwords)

    def __repr__(self) -> str:
        return f"CommonPasswordSet(size={len(self._passwords)})"


def is_common_password(password: str, common_passwords: Optional[CommonPasswordSet]) -> bool:
    """Check whether a password appears in the common password set.

    Args:
        password: Password to look up (lowercased for comparison only)
        common_passwords: Preloaded set, or None when no dictionary exists

    Returns:
        True if found, False otherwise or when the set is empty
    """
    if common_passwords is None:
        return False
    return common_passwords.contains(password)


def load_common_passwords(filepath: str) -> CommonPasswordSet:
    """Load a newline-delimited common password file.

    Each non-empty line is lowercased and stored. Failures are logged and
    produce an empty set so the analyzer stays usable.

    Args:
        filepath: Path to the dictionary file

    Returns:
        CommonPasswordSet (possibly empty)
    """
    try:
        lines = read_lines(filepath)
    except StorageError as e:
        logger.warning("Could not read dictionary file %s: %s", filepath, e)
        return CommonPasswordSet()

    if lines is None:
        logger.warning("Could not open dictionary file: %s", filepath)
        return CommonPasswordSet()

    common_passwords = CommonPasswordSet.from_lines(lines)
    if common_passwords.is_loaded:
        logger.info("Loaded %d common passwords from %s", len(common_passwords), filepath)
    else:
        logger.warning("Dictionary file %s contains no entries", filepath)
    return common_passwords
