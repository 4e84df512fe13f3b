"""
API context logger.

Provides logging interface for api context with automatic [api] prefix.
All api modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[api]"


def _log_info(message: str) -> None:
    """Log info message with [api] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [api] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [api] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [api] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [api] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_request(method: str, path: str, user_id, status: int) -> None:
    """Log a dispatched request and its status."""
    _log_debug(f"{method} {path} user={user_id} -> {status}")
