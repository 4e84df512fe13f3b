"""
Export context logger.

Provides logging interface for export context with automatic [export] prefix.
All export modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[export]"


def _log_info(message: str) -> None:
    """Log info message with [export] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [export] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [export] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [export] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [export] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_export_start(resume_id: str, export_format: str) -> None:
    """Log start of an export."""
    _log_debug(f"Rendering {resume_id} as {export_format}")


def log_export_result(resume_id: str, result, elapsed_time: float) -> None:
    """
    Log a finished export.

    Args:
        resume_id: Resume identifier
        result: ExportResult from export_resume()
        elapsed_time: Time taken
    """
    _log_success(f"{resume_id}: exported {result.filename} ({len(result.payload)} bytes, {elapsed_time:.2f}s)")
    if result.page_count is not None:
        _log_info(f"  Pages: {result.page_count}")


def log_export_failure(resume_id: str, export_format: str, error: Exception) -> None:
    """Log a failed export."""
    _log_error(f"Failed to export {resume_id} as {export_format}")
    _log_error(f"  Error: {error}")
