"""
Shared utilities for QUILL.

Common functionality used across contexts:
- Logger setup
- Timestamps
- Configuration loading
- Resume event log
- Base error type
"""

from quill.utils.config import load_settings
from quill.utils.errors import QuillError
from quill.utils.timestamp import now, now_exact, today

__all__ = ["load_settings", "QuillError", "now", "now_exact", "today"]
