"""Validation exceptions for the document context with offending field paths."""

from dataclasses import dataclass
from typing import List, Optional

from quill.utils.errors import QuillError


@dataclass
class FieldError:
    """
    One offending field in a rejected payload.

    Attributes:
        path: Dotted path using wire names (e.g., "personalInfo.email", "workExperience.0.endDate")
        message: What is wrong with the value
    """

    path: str
    message: str

    def to_dict(self) -> dict:
        return {"path": self.path, "message": self.message}


class ResumeValidationError(QuillError, ValueError):
    """
    Raised when a payload fails schema checks.

    Surfaced as a 400-equivalent. Never fatal: the caller corrects the input and retries.

    Attributes:
        message: Summary message
        errors: Every offending field, in the order they were detected
    """

    status_code = 400

    def __init__(self, message: str, errors: Optional[List[FieldError]] = None):
        self.errors = list(errors or [])

        parts = [message]
        for error in self.errors:
            parts.append(f"  - {error.path}: {error.message}")

        super().__init__(message)
        # Full detail for logs and tracebacks, short message for the user
        self.args = ("\n".join(parts),)

    @property
    def paths(self) -> List[str]:
        """Dotted paths of all offending fields."""
        return [error.path for error in self.errors]

    def to_dict(self) -> dict:
        return {"message": self.message, "errors": [error.to_dict() for error in self.errors]}


class SectionIndexError(ResumeValidationError):
    """Raised when a reorder index falls outside the section list."""

    pass
