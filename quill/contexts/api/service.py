"""
Resume Service

Authenticated, ownership-enforcing operations over a ResumeStore. Every
operation takes the caller's user id first; `None` means no authenticated
session.

Check order for single-resume operations: authentication (401), existence
(404), ownership (403). Validation happens before the store is written.
"""

from typing import Any, Dict, List, Mapping, Optional

from quill.contexts.api.exceptions import AccessDeniedError, AuthenticationRequiredError, ResumeNotFoundError
from quill.contexts.api.logger import _log_info
from quill.contexts.document import Resume, validate_draft
from quill.contexts.document.validation import changed_fields
from quill.contexts.export import ExportResult, export_resume
from quill.contexts.scoring import score
from quill.contexts.sections import append_custom_section
from quill.contexts.storage import ResumeStore
from quill.utils.event_logging import log_resume_event


class ResumeService:
    """
    Application service behind the REST surface.

    Args:
        store: Injected persistence backend
        export_settings: Optional `export` settings block passed to the renderers
        source: Event source recorded in the resume event log
    """

    def __init__(
        self,
        store: ResumeStore,
        export_settings: Optional[Dict[str, Any]] = None,
        source: str = "api",
    ):
        self.store = store
        self.export_settings = export_settings or {}
        self.source = source

    @staticmethod
    def _require_user(user_id: Optional[int]) -> int:
        if user_id is None:
            raise AuthenticationRequiredError()
        return user_id

    def _owned(self, user_id: Optional[int], resume_id: str) -> Resume:
        """Fetch a resume the caller owns."""
        user_id = self._require_user(user_id)

        resume = self.store.get(resume_id)
        if resume is None:
            raise ResumeNotFoundError(resume_id)
        if resume.user_id != user_id:
            raise AccessDeniedError(resume_id)

        return resume

    def list_resumes(self, user_id: Optional[int]) -> List[Resume]:
        return self.store.list_for_user(self._require_user(user_id))

    def get_resume(self, user_id: Optional[int], resume_id: str) -> Resume:
        return self._owned(user_id, resume_id)

    def create_resume(self, user_id: Optional[int], payload: Mapping[str, Any]) -> Resume:
        """
        Validate and store a new resume.

        Client-supplied id, userId, createdAt and updatedAt are discarded.

        Raises:
            AuthenticationRequiredError: No user
            ResumeValidationError: Invalid payload (nothing stored)
        """
        user_id = self._require_user(user_id)
        draft = validate_draft(payload)

        resume = self.store.create(user_id, draft)
        _log_info(f"Created resume {resume.id} for user {user_id}")
        log_resume_event("resume_created", resume.id, self.source, user_id=user_id, title=resume.title)

        return resume

    def update_resume(self, user_id: Optional[int], resume_id: str, payload: Mapping[str, Any]) -> Resume:
        """
        Shallow-merge an update payload over the stored resume.

        Top-level fields in the payload replace stored values wholesale.

        Raises:
            AuthenticationRequiredError, ResumeNotFoundError, AccessDeniedError
            ResumeValidationError: Merged record is invalid (nothing stored)
        """
        self._owned(user_id, resume_id)

        resume = self.store.update(resume_id, payload)
        if resume is None:
            raise ResumeNotFoundError(resume_id)

        fields = changed_fields(payload)
        _log_info(f"Updated resume {resume_id}: {', '.join(fields) or 'no client fields'}")
        log_resume_event("resume_updated", resume_id, self.source, user_id=user_id, fields=fields)

        return resume

    def delete_resume(self, user_id: Optional[int], resume_id: str) -> None:
        self._owned(user_id, resume_id)

        if not self.store.delete(resume_id):
            raise ResumeNotFoundError(resume_id)

        _log_info(f"Deleted resume {resume_id}")
        log_resume_event("resume_deleted", resume_id, self.source, user_id=user_id)

    def add_custom_section(self, user_id: Optional[int], resume_id: str, payload: Any) -> Resume:
        """
        Append a custom section titled payload["title"].

        Raises:
            ResumeValidationError: "Section title is required" for a blank or missing title
        """
        resume = self._owned(user_id, resume_id)

        title = payload.get("title") if isinstance(payload, Mapping) else None
        sections = append_custom_section(resume.sections, title)

        updated = self.store.update(
            resume_id, {"sections": [section.model_dump(by_alias=True) for section in sections]}
        )
        if updated is None:
            raise ResumeNotFoundError(resume_id)

        new_section = sections[-1]
        log_resume_event(
            "section_added", resume_id, self.source, user_id=user_id, section_id=new_section.id, title=title
        )

        return updated

    def export(self, user_id: Optional[int], resume_id: str, export_format: str) -> ExportResult:
        resume = self._owned(user_id, resume_id)

        result = export_resume(resume, export_format, self.export_settings)
        log_resume_event(
            "resume_exported", resume_id, self.source, user_id=user_id, format=export_format, filename=result.filename
        )

        return result

    def completion(self, user_id: Optional[int], resume_id: str) -> int:
        return score(self._owned(user_id, resume_id))
