"""
Resume store port.

The service layer depends only on this interface, never on a concrete
backend. Backends hold whole Resume records keyed by id; ownership checks
belong to the caller.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional

from quill.contexts.document import Resume, ResumeDraft, merge_update, new_token, validate
from quill.utils.timestamp import now_exact


class ResumeStore(ABC):
    """
    CRUD persistence for Resume records.

    Writes are last-write-wins and atomic per record. There is no cross-record
    transaction and no optimistic concurrency token.
    """

    backend_name = "abstract"

    @abstractmethod
    def get(self, resume_id: str) -> Optional[Resume]:
        """Get a resume by id, or None if it does not exist."""

    @abstractmethod
    def list_for_user(self, user_id: int) -> List[Resume]:
        """All resumes owned by a user, oldest first."""

    @abstractmethod
    def create(self, user_id: int, draft: ResumeDraft) -> Resume:
        """
        Store a new resume.

        Args:
            user_id: Owning user
            draft: Validated client content (no identity fields)

        Returns:
            Stored Resume with server-assigned id, userId, createdAt and updatedAt
        """

    @abstractmethod
    def update(self, resume_id: str, patch: Mapping[str, Any]) -> Optional[Resume]:
        """
        Shallow-merge an update payload over a stored resume.

        Returns:
            Updated Resume, or None if the id does not exist

        Raises:
            ResumeValidationError: If the merged record is invalid (nothing is written)
        """

    @abstractmethod
    def delete(self, resume_id: str) -> bool:
        """Delete a resume. Returns False if the id does not exist."""

    @staticmethod
    def new_record(user_id: int, draft: ResumeDraft) -> Resume:
        """Attach server-assigned identity fields to validated draft content."""
        timestamp = now_exact()
        return validate(
            {
                **draft.model_dump(by_alias=True),
                "id": new_token(),
                "userId": user_id,
                "createdAt": timestamp,
                "updatedAt": timestamp,
            }
        )

    @staticmethod
    def merged_record(stored: Resume, patch: Mapping[str, Any]) -> Resume:
        """Apply an update payload with a fresh updatedAt."""
        return merge_update(stored, patch, updated_at=now_exact())
