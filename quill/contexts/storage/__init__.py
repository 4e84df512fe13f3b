"""
Storage Context

Responsibilities:
- Defines the resume store port (get, list, create, update, delete)
- Provides in-memory and SQLite backends
- Assigns identity fields (id, owner, timestamps) on create and refreshes updatedAt

Owns: Persistence of whole Resume records
Never: Checks ownership or authentication (the api context does)
"""

from pathlib import Path
from typing import Any, Dict

from quill.contexts.storage.base import ResumeStore
from quill.contexts.storage.exceptions import StorageError
from quill.contexts.storage.memory import InMemoryResumeStore
from quill.contexts.storage.sqlite_store import SQLiteResumeStore


def build_store(settings: Dict[str, Any]) -> ResumeStore:
    """
    Create the store selected by settings["store"]["backend"].

    Args:
        settings: Settings dict from quill.utils.load_settings()

    Returns:
        Configured ResumeStore

    Raises:
        ValueError: If the backend is unknown
    """
    store_settings = settings["store"]
    backend = store_settings["backend"]

    if backend == "memory":
        return InMemoryResumeStore()
    if backend == "sqlite":
        return SQLiteResumeStore(Path(store_settings["db_path"]))

    raise ValueError(f"Invalid store backend: {backend}")


__all__ = [
    "ResumeStore",
    "InMemoryResumeStore",
    "SQLiteResumeStore",
    "StorageError",
    "build_store",
]
