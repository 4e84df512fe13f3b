"""Exceptions for the storage context."""

from typing import Optional

from quill.utils.errors import QuillError


class StorageError(QuillError):
    """
    Exception raised when the persistence backend fails.

    Prior stored state is left untouched. Callers surface this as a generic
    server error; the detailed cause is only logged.

    Attributes:
        message: Error description
        operation: Store operation that failed (e.g., 'update')
        original_error: The underlying backend error, if any
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.operation = operation
        self.original_error = original_error

        parts = [message]
        if operation:
            parts.append(f"Operation: {operation}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__(message)
        self.args = ("\n".join(parts),)
