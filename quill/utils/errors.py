"""Base exception shared by every QUILL context."""


class QuillError(Exception):
    """
    Root of the QUILL error taxonomy.

    Every user-facing failure derives from this class so callers can tell
    error kinds apart (form correction vs. retry) by type alone.

    Attributes:
        message: Human-readable description, safe to show to the user
        status_code: HTTP-equivalent status used by the request dispatcher
    """

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
