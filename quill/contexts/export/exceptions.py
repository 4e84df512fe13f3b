"""Exceptions for the export context."""

from typing import Optional

from quill.utils.errors import QuillError


class ExportError(QuillError):
    """
    Exception raised when a resume cannot be exported.

    The source resume is never modified, so the caller can always retry or
    pick another format.

    Attributes:
        message: Error description
        export_format: Requested format (e.g., 'pdf')
        original_error: The underlying renderer error, if any
    """

    def __init__(
        self,
        message: str,
        export_format: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.export_format = export_format
        self.original_error = original_error

        parts = [message]
        if export_format:
            parts.append(f"Format: {export_format}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__(message)
        self.args = ("\n".join(parts),)


class UnsupportedFormatError(ExportError):
    """Requested export format is not one QUILL can produce."""

    status_code = 400
