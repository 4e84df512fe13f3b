"""In-memory resume store for tests and single-process use."""

from typing import Any, Dict, List, Mapping, Optional

from quill.contexts.document import Resume, ResumeDraft
from quill.contexts.storage.base import ResumeStore
from quill.contexts.storage.logger import log_store_write


class InMemoryResumeStore(ResumeStore):
    """
    Dict-backed store.

    Records are deep-copied on the way in and out, so callers can never
    mutate stored state through a returned object.
    """

    backend_name = "memory"

    def __init__(self):
        self._records: Dict[str, Resume] = {}

    def __len__(self) -> int:
        return len(self._records)

    def get(self, resume_id: str) -> Optional[Resume]:
        record = self._records.get(resume_id)
        return record.model_copy(deep=True) if record is not None else None

    def list_for_user(self, user_id: int) -> List[Resume]:
        return [
            record.model_copy(deep=True)
            for record in self._records.values()
            if record.user_id == user_id
        ]

    def create(self, user_id: int, draft: ResumeDraft) -> Resume:
        record = self.new_record(user_id, draft)
        self._records[record.id] = record.model_copy(deep=True)
        log_store_write("create", record.id, self.backend_name)
        return record

    def update(self, resume_id: str, patch: Mapping[str, Any]) -> Optional[Resume]:
        stored = self._records.get(resume_id)
        if stored is None:
            return None

        record = self.merged_record(stored, patch)
        self._records[resume_id] = record.model_copy(deep=True)
        log_store_write("update", resume_id, self.backend_name)
        return record

    def delete(self, resume_id: str) -> bool:
        if self._records.pop(resume_id, None) is None:
            return False
        log_store_write("delete", resume_id, self.backend_name)
        return True
