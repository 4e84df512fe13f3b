"""
Storage context logger.

Provides logging interface for storage context with automatic [store] prefix.
All storage modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[store]"


def _log_info(message: str) -> None:
    """Log info message with [store] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [store] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [store] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [store] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [store] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")



def log_store_write(operation: str, resume_id: str, backend: str) -> None:
    """Log a committed write (create, update, delete)."""
    _log_debug(f"{backend}: {operation} {resume_id}")


def log_store_failure(operation: str, resume_id: str, error: Exception) -> None:
    """Log a failed store operation before it is raised as StorageError."""
    _log_error(f"Failed to {operation} {resume_id}")
    _log_error(f"  Error: {error}")
