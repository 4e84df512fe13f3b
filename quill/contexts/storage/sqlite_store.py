"""
Persistent SQLite resume store.

Each resume is stored whole as a JSON document in the `data` column, with
id, owner, title, job URL and timestamps duplicated into their own columns
for indexing and listing.
"""

import json
import sqlite3
from pathlib import Path
from typing import Any, List, Mapping, Optional

from quill.contexts.document import Resume, ResumeDraft, validate
from quill.contexts.storage.base import ResumeStore
from quill.contexts.storage.exceptions import StorageError
from quill.contexts.storage.logger import _log_info, log_store_failure, log_store_write

SCHEMA = """
    CREATE TABLE IF NOT EXISTS resumes (
        id TEXT PRIMARY KEY,
        user_id INTEGER NOT NULL,

        title TEXT NOT NULL,
        job_url TEXT,

        data TEXT NOT NULL,

        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
"""


class SQLiteResumeStore(ResumeStore):
    """
    SQLite-backed store.

    One connection per store, shared across threads. Every write is committed
    on its own; a failed write is rolled back and raised as StorageError.
    """

    backend_name = "sqlite"

    def __init__(self, db_path: Path):
        """
        Open (or create) the database.

        Args:
            db_path: SQLite file path; parent directories are created as needed

        Raises:
            StorageError: If the database cannot be opened or initialized
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self.conn = sqlite3.connect(str(self.db_path), check_same_thread=False)
            self.conn.row_factory = sqlite3.Row  # Enable column access by name
            self.conn.execute(SCHEMA)
            self.conn.execute("CREATE INDEX IF NOT EXISTS idx_user_id ON resumes(user_id)")
            self.conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Could not open resume database: {self.db_path}", "open", e) from e

        _log_info(f"Opened resume database: {self.db_path}")

    def close(self) -> None:
        self.conn.close()

    def _query(self, sql: str, params: tuple = ()) -> List[sqlite3.Row]:
        try:
            return self.conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise StorageError("Resume query failed", "query", e) from e

    def _write(self, operation: str, resume_id: str, sql: str, params: tuple) -> int:
        """Run one write statement in its own transaction. Returns affected row count."""
        try:
            with self.conn:
                cursor = self.conn.execute(sql, params)
        except sqlite3.Error as e:
            log_store_failure(operation, resume_id, e)
            raise StorageError(f"Failed to {operation} resume {resume_id}", operation, e) from e

        log_store_write(operation, resume_id, self.backend_name)
        return cursor.rowcount

    @staticmethod
    def _row_to_resume(row: sqlite3.Row, operation: str) -> Resume:
        """Decode a stored row. A row that no longer decodes or validates is a server-side fault."""
        try:
            return validate(json.loads(row["data"]))
        except (ValueError, TypeError) as e:
            log_store_failure(operation, row["id"], e)
            raise StorageError("Stored resume is unreadable", operation, e) from e

    def get(self, resume_id: str) -> Optional[Resume]:
        rows = self._query("SELECT id, data FROM resumes WHERE id = ?", (resume_id,))
        return self._row_to_resume(rows[0], "get") if rows else None

    def list_for_user(self, user_id: int) -> List[Resume]:
        rows = self._query(
            "SELECT id, data FROM resumes WHERE user_id = ? ORDER BY created_at, rowid", (user_id,)
        )
        return [self._row_to_resume(row, "list") for row in rows]

    def create(self, user_id: int, draft: ResumeDraft) -> Resume:
        record = self.new_record(user_id, draft)
        self._write(
            "create",
            record.id,
            "INSERT INTO resumes (id, user_id, title, job_url, data, created_at, updated_at) "
            "VALUES (?, ?, ?, ?, ?, ?, ?)",
            (
                record.id,
                record.user_id,
                record.title,
                record.job_url,
                json.dumps(record.to_json()),
                record.created_at,
                record.updated_at,
            ),
        )
        return record

    def update(self, resume_id: str, patch: Mapping[str, Any]) -> Optional[Resume]:
        stored = self.get(resume_id)
        if stored is None:
            return None

        record = self.merged_record(stored, patch)
        self._write(
            "update",
            resume_id,
            "UPDATE resumes SET title = ?, job_url = ?, data = ?, updated_at = ? WHERE id = ?",
            (record.title, record.job_url, json.dumps(record.to_json()), record.updated_at, resume_id),
        )
        return record

    def delete(self, resume_id: str) -> bool:
        return self._write("delete", resume_id, "DELETE FROM resumes WHERE id = ?", (resume_id,)) > 0
