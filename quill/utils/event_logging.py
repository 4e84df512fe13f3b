"""
Resume event logging utilities for QUILL.

Appends one JSON object per line to the resume event log so that mutations and
exports can be audited or replayed. This sits alongside the detailed loguru
session logs from quill.utils.logger.

The log location comes from RESUME_EVENTS_FILE (environment or .env). When it
is unset, event logging is disabled and every call is a no-op.

Usage:
    from quill.utils.event_logging import log_resume_event

    log_resume_event(
        event_type="resume_updated",
        resume_id="3f1c...",
        source="api",
        user_id=7,
        fields=["personalInfo"],
    )
"""

import json
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from quill.utils.timestamp import now_exact

load_dotenv()

# Event types that change stored resume state
MUTATIVE_EVENTS = {"resume_created", "resume_updated", "resume_deleted", "section_added"}


def _events_file() -> Optional[Path]:
    """Resolve the event log path at call time so tests can redirect it."""
    configured = os.getenv("RESUME_EVENTS_FILE")
    return Path(configured) if configured else None


def log_resume_event(event_type: str, resume_id: str, source: str, **extra_fields) -> None:
    """
    Log an event to the resume event log.

    Args:
        event_type: Type of event (e.g., "resume_created", "resume_exported")
        resume_id: Resume identifier
        source: Event source (e.g., "api", "cli")
        **extra_fields: Additional event-specific fields (must be JSON serializable)
    """
    events_file = _events_file()
    if events_file is None:
        return

    events_file.parent.mkdir(parents=True, exist_ok=True)

    event = {
        "timestamp": now_exact(),
        "event_type": event_type,
        "resume_id": resume_id,
        "source": source,
        **extra_fields,
    }

    with open(events_file, "a", encoding="utf-8") as f:
        f.write(json.dumps(event) + "\n")


def get_recent_events(
    n: int = 10, resume_id: Optional[str] = None, event_type: Optional[str] = None
) -> List[dict]:
    """
    Get the last n events from the event log, optionally filtered.

    Args:
        n: Number of recent events to return (default: 10)
        resume_id: Filter to only events for this resume (optional)
        event_type: Filter to only events of this type (optional)

    Returns:
        List of event dicts (most recent last)
    """
    events_file = _events_file()
    if events_file is None or not events_file.exists():
        return []

    events = []
    with open(events_file, "r", encoding="utf-8") as f:
        for line in f:
            try:
                events.append(json.loads(line.strip()))
            except json.JSONDecodeError:
                # Skip malformed lines
                continue

    if resume_id:
        events = [e for e in events if e.get("resume_id") == resume_id]

    if event_type:
        events = [e for e in events if e.get("event_type") == event_type]

    return events[-n:] if len(events) > n else events
