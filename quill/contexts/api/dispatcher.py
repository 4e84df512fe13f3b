"""
Request Dispatcher

Transport-agnostic REST surface: maps (method, path, user, body) to an
ApiResponse with a status code, JSON-ready body and headers. Any web framework
can sit in front of ResumeAPI.dispatch by passing through the authenticated
user id (or None) and the decoded JSON body.

Routes:
    GET    /api/resumes                          -> 200 list of resumes
    POST   /api/resumes                          -> 201 created resume
    GET    /api/resumes/:id                      -> 200 resume
    PUT    /api/resumes/:id                      -> 200 updated resume
    DELETE /api/resumes/:id                      -> 204 empty
    POST   /api/resumes/:id/sections             -> 201 updated resume
    GET    /api/resumes/:id/export/:format       -> 200 payload bytes
    GET    /api/resumes/:id/completion           -> 200 {"completion": int}
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from quill.contexts.api.logger import _log_error, log_request
from quill.contexts.api.service import ResumeService
from quill.contexts.document import ResumeValidationError
from quill.utils.errors import QuillError

GENERIC_ERROR_MESSAGE = "Internal server error"

_RESUME = r"/api/resumes/(?P<resume_id>[^/]+)"

# (method, pattern, handler name), matched in order
ROUTES = [
    ("GET", re.compile(r"^/api/resumes/?$"), "_list"),
    ("POST", re.compile(r"^/api/resumes/?$"), "_create"),
    ("GET", re.compile(rf"^{_RESUME}/?$"), "_get"),
    ("PUT", re.compile(rf"^{_RESUME}/?$"), "_update"),
    ("DELETE", re.compile(rf"^{_RESUME}/?$"), "_delete"),
    ("POST", re.compile(rf"^{_RESUME}/sections/?$"), "_add_section"),
    ("GET", re.compile(rf"^{_RESUME}/export/(?P<export_format>[^/]+)/?$"), "_export"),
    ("GET", re.compile(rf"^{_RESUME}/completion/?$"), "_completion"),
]


@dataclass
class ApiResponse:
    status: int
    body: Any = None
    headers: Dict[str, str] = field(default_factory=dict)


def _error_response(error: QuillError) -> ApiResponse:
    if isinstance(error, ResumeValidationError):
        return ApiResponse(error.status_code, error.to_dict())
    if error.status_code >= 500:
        # Details stay in the server log
        _log_error(f"{type(error).__name__}: {error}")
        return ApiResponse(error.status_code, {"message": GENERIC_ERROR_MESSAGE})
    return ApiResponse(error.status_code, {"message": error.message})


class ResumeAPI:
    """
    Route table over a ResumeService.

    Examples:
        >>> api = ResumeAPI(ResumeService(InMemoryResumeStore()))
        >>> api.dispatch("GET", "/api/resumes", user_id=None).status
        401
    """

    def __init__(self, service: ResumeService):
        self.service = service

    def dispatch(self, method: str, path: str, user_id: Optional[int] = None, body: Any = None) -> ApiResponse:
        """
        Handle one request.

        Args:
            method: HTTP method (case-insensitive)
            path: Request path; a query string is ignored
            user_id: Authenticated user, or None
            body: Decoded JSON body, if any

        Returns:
            ApiResponse; never raises
        """
        method = method.upper()
        path = path.split("?", 1)[0]

        response = self._route(method, path, user_id, body)
        log_request(method, path, user_id, response.status)
        return response

    def _route(self, method: str, path: str, user_id: Optional[int], body: Any) -> ApiResponse:
        path_matched = False
        for route_method, pattern, handler_name in ROUTES:
            match = pattern.match(path)
            if match is None:
                continue
            path_matched = True
            if route_method != method:
                continue

            handler = getattr(self, handler_name)
            try:
                return handler(user_id, body, **match.groupdict())
            except QuillError as e:
                return _error_response(e)
            except Exception as e:
                _log_error(f"Unhandled error on {method} {path}: {type(e).__name__}: {e}")
                return ApiResponse(500, {"message": GENERIC_ERROR_MESSAGE})

        if path_matched:
            return ApiResponse(405, {"message": "Method not allowed"})
        return ApiResponse(404, {"message": "Not found"})

    def _list(self, user_id, body) -> ApiResponse:
        return ApiResponse(200, [resume.to_json() for resume in self.service.list_resumes(user_id)])

    def _create(self, user_id, body) -> ApiResponse:
        return ApiResponse(201, self.service.create_resume(user_id, body).to_json())

    def _get(self, user_id, body, resume_id: str) -> ApiResponse:
        return ApiResponse(200, self.service.get_resume(user_id, resume_id).to_json())

    def _update(self, user_id, body, resume_id: str) -> ApiResponse:
        return ApiResponse(200, self.service.update_resume(user_id, resume_id, body).to_json())

    def _delete(self, user_id, body, resume_id: str) -> ApiResponse:
        self.service.delete_resume(user_id, resume_id)
        return ApiResponse(204, None)

    def _add_section(self, user_id, body, resume_id: str) -> ApiResponse:
        return ApiResponse(201, self.service.add_custom_section(user_id, resume_id, body).to_json())

    def _export(self, user_id, body, resume_id: str, export_format: str) -> ApiResponse:
        result = self.service.export(user_id, resume_id, export_format)
        headers = {
            "Content-Type": result.media_type,
            "Content-Disposition": result.content_disposition,
        }
        return ApiResponse(200, result.payload, headers)

    def _completion(self, user_id, body, resume_id: str) -> ApiResponse:
        return ApiResponse(200, {"completion": self.service.completion(user_id, resume_id)})
