"""Application logging and analysis event log.

Configures rotating file logging for the application and records
structured JSON-lines events for analyses and generations. Events carry
only derived facts (length, score, label, options), never password text.

The event log is rotated by size, with numbered backups that are
optionally gzip-compressed.
"""

import gzip
import json
import logging
import os
import shutil
from datetime import datetime
from logging.handlers import RotatingFileHandler
from threading import Lock
from typing import Optional

from core.config import (
    APP_LOG_FILE,
    AUDIT_LOG_FILE,
    AUDIT_LOG_ENABLED,
    AUDIT_LOG_MAX_BYTES,
    AUDIT_LOG_BACKUP_COUNT,
    AUDIT_LOG_COMPRESS,
    LOG_LEVEL,
)
from core.storage import StorageError, append_line, ensure_directories, file_exists


logger = logging.getLogger(__name__)

# Module-level state
_logging_configured = False
_rotation_lock = Lock()


def _compress_log_file(filepath: str) -> None:
    """Compress a log file using gzip and remove the original."""
    try:
        with open(filepath, 'rb') as f_in:
            with gzip.open(f"{filepath}.gz", 'wb') as f_out:
                shutil.copyfileobj(f_in, f_out)
        os.remove(filepath)
    except OSError as e:
        logger.warning("Could not compress log file %s: %s", filepath, e)


def _backup_path(index: int) -> Optional[str]:
    """Return the existing backup file for an index, compressed or not."""
    path = f"{AUDIT_LOG_FILE}.{index}"
    for candidate in (f"{path}.gz", path):
        if os.path.exists(candidate):
            return candidate
    return None


def _rotate_event_log() -> None:
    """Rotate the event log if it exceeds AUDIT_LOG_MAX_BYTES.

    Backups shift up one index (log.1 -> log.2, ...), the oldest beyond
    AUDIT_LOG_BACKUP_COUNT is deleted, and the current log becomes log.1.
    With a backup count of 0 the current log is discarded instead.
    """
    with _rotation_lock:
        if not file_exists(AUDIT_LOG_FILE):
            return

        try:
            if os.path.getsize(AUDIT_LOG_FILE) < AUDIT_LOG_MAX_BYTES:
                return
        except OSError:
            return

        # No backups kept: start a fresh log
        if AUDIT_LOG_BACKUP_COUNT < 1:
            try:
                os.remove(AUDIT_LOG_FILE)
            except OSError as e:
                logger.warning("Event log rotation failed: %s", e)
            return

        try:
            oldest = _backup_path(AUDIT_LOG_BACKUP_COUNT)
            if oldest:
                os.remove(oldest)

            for i in range(AUDIT_LOG_BACKUP_COUNT - 1, 0, -1):
                src = _backup_path(i)
                if src:
                    suffix = ".gz" if src.endswith(".gz") else ""
                    shutil.move(src, f"{AUDIT_LOG_FILE}.{i + 1}{suffix}")

            backup = f"{AUDIT_LOG_FILE}.1"
            shutil.move(AUDIT_LOG_FILE, backup)
        except OSError as e:
            logger.warning("Event log rotation failed: %s", e)
            return

        if AUDIT_LOG_COMPRESS:
            _compress_log_file(backup)


def configure_logging(level: str = LOG_LEVEL, log_file: str = APP_LOG_FILE) -> None:
    """Configure root logging with a rotating file handler on first use."""
    global _logging_configured
    if _logging_configured:
        return

    ensure_directories(os.path.dirname(log_file))

    handler = RotatingFileHandler(
        log_file,
        maxBytes=AUDIT_LOG_MAX_BYTES,
        backupCount=AUDIT_LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    )

    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))
    root.addHandler(handler)

    _logging_configured = True


def log_event(
    event_type: str,
    status: str = "SUCCESS",
    source: str = "cli",
    details: Optional[dict] = None
) -> bool:
    """Append one JSON event to the analysis event log.

    Write failures are logged and reported through the return value so that
    analysis never fails because of the event log.

    Args:
        event_type: Kind of event (e.g., 'password_analyzed', 'password_generated')
        status: Event status (e.g., 'SUCCESS', 'FAILURE')
        source: Surface that produced the event ('cli' or 'api')
        details: Optional derived facts; must not include the password

    Returns:
        True if the event was written, False if disabled or failed
    """
    if not AUDIT_LOG_ENABLED:
        return False

    _rotate_event_log()

    event = {
        "timestamp": datetime.now().isoformat(),
        "event_type": event_type,
        "status": status,
        "source": source,
    }
    if details:
        event["details"] = details

    try:
        append_line(AUDIT_LOG_FILE, json.dumps(event))
    except StorageError as e:
        logger.error("Could not record %s event: %s", event_type, e)
        return False
    return True


def get_events(limit: int = 100) -> list[dict]:
    """Read the most recent events from the current event log.

    Args:
        limit: Maximum number of events to return

    Returns:
        List of parsed event dictionaries, oldest first
    """
    if not file_exists(AUDIT_LOG_FILE):
        return []

    events = []
    with open(AUDIT_LOG_FILE, "r", encoding="utf-8") as f:
        for line in f:
            try:
                events.append(json.loads(line))
            except json.JSONDecodeError:
                continue

    return events[-limit:]


def count_events_by_type(status: Optional[str] = None) -> dict[str, int]:
    """Count events grouped by type.

    Args:
        status: Optional filter by event status

    Returns:
        Dictionary mapping event type to count
    """
    counts = {}
    for event in get_events(limit=10000):
        if status and event.get("status") != status:
            continue
        event_type = event.get("event_type", "unknown")
        counts[event_type] = counts.get(event_type, 0) + 1
    return counts
