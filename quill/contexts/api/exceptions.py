"""Exceptions for the api context: authentication and ownership failures."""

from quill.utils.errors import QuillError


class AuthenticationRequiredError(QuillError):
    """No authenticated user on the request."""

    status_code = 401

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class ResumeNotFoundError(QuillError, LookupError):
    """Referenced resume id does not exist."""

    status_code = 404

    def __init__(self, resume_id: str):
        self.resume_id = resume_id
        super().__init__("Resume not found")


class AccessDeniedError(QuillError, PermissionError):
    """
    Resume exists but belongs to another user.

    Kept distinct from ResumeNotFoundError so clients and tests can tell the
    two apart, at the cost of revealing that the id exists.
    """

    status_code = 403

    def __init__(self, resume_id: str):
        self.resume_id = resume_id
        super().__init__("Access denied")
