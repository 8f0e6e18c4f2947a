"""Centralized file I/O operations.

Provides consistent text file handling with proper error management.
Log directories are created with owner-only permissions on Unix systems.
"""

import os
import sys
from typing import Optional


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


def ensure_directories(*directories: str) -> None:
    """Create directories if they don't exist.

    On Unix systems, directories are created with mode 0700 (owner only).
    """
    for directory in directories:
        if not directory:
            continue
        if sys.platform != "win32":
            os.makedirs(directory, mode=0o700, exist_ok=True)
        else:
            os.makedirs(directory, exist_ok=True)


def read_lines(filepath: str) -> Optional[list[str]]:
    """Read a UTF-8 text file as a list of lines without terminators.

    Args:
        filepath: Path to text file

    Returns:
        List of lines, or None if file doesn't exist

    Raises:
        StorageError: If file exists but cannot be read or decoded
    """
    if not os.path.exists(filepath):
        return None

    try:
        with open(filepath, "r", encoding="utf-8", newline="") as f:
            return [line.rstrip("\r\n") for line in f]
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(f"Failed to read {filepath}: {e}")


def append_line(filepath: str, line: str) -> None:
    """Append a line to a text file, creating its directory if needed.

    Args:
        filepath: Path to text file
        line: Line to append (newline added automatically)

    Raises:
        StorageError: If write operation fails
    """
    try:
        ensure_directories(os.path.dirname(filepath))
        with open(filepath, "a", encoding="utf-8") as f:
            f.write(line + "\n")
    except OSError as e:
        raise StorageError(f"Failed to append to {filepath}: {e}")


def file_exists(filepath: str) -> bool:
    """Check if file exists."""
    return os.path.exists(filepath)
