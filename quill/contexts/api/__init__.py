"""
API Context

Responsibilities:
- Enforces authentication and resume ownership
- Runs create/read/update/delete, custom-section, export and completion operations
- Dispatches REST-style requests to status codes and JSON bodies
- Records mutations and exports in the resume event log

Owns: Access rules, error-to-status mapping
Never: Talks to a concrete storage backend (receives a ResumeStore)
"""

from quill.contexts.api.dispatcher import ApiResponse, ResumeAPI
from quill.contexts.api.exceptions import AccessDeniedError, AuthenticationRequiredError, ResumeNotFoundError
from quill.contexts.api.service import ResumeService

__all__ = [
    "ResumeService",
    "ResumeAPI",
    "ApiResponse",
    "AuthenticationRequiredError",
    "ResumeNotFoundError",
    "AccessDeniedError",
]
