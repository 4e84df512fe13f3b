"""Tests for the resume store backends (in-memory and SQLite share one contract)."""

import sqlite3

import pytest

from quill.contexts.document import ResumeValidationError, validate_draft
from quill.contexts.storage import InMemoryResumeStore, SQLiteResumeStore, StorageError, build_store


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    if request.param == "memory":
        yield InMemoryResumeStore()
    else:
        sqlite_store = SQLiteResumeStore(tmp_path / "db" / "quill.db")
        yield sqlite_store
        sqlite_store.close()


@pytest.fixture
def draft(ada_payload):
    return validate_draft(ada_payload)


class TestStoreContract:
    """Behavior every backend provides."""

    @pytest.mark.integration
    def test_create_assigns_identity(self, store, draft):
        resume = store.create(7, draft)

        assert resume.id
        assert resume.user_id == 7
        assert resume.created_at == resume.updated_at
        assert resume.title == "Software Engineer"

    @pytest.mark.integration
    def test_ids_are_unique(self, store, draft):
        ids = {store.create(7, draft).id for _ in range(5)}
        assert len(ids) == 5

    @pytest.mark.integration
    def test_get_round_trips_whole_record(self, store, draft):
        created = store.create(7, draft)
        assert store.get(created.id) == created

    @pytest.mark.integration
    def test_get_unknown_returns_none(self, store):
        assert store.get("missing") is None

    @pytest.mark.integration
    def test_list_scoped_to_user(self, store, draft):
        first = store.create(7, draft)
        store.create(8, draft)
        second = store.create(7, draft)

        assert [resume.id for resume in store.list_for_user(7)] == [first.id, second.id]
        assert store.list_for_user(99) == []

    @pytest.mark.integration
    def test_update_merges_and_refreshes_updated_at(self, store, draft):
        created = store.create(7, draft)
        updated = store.update(created.id, {"title": "Staff Engineer", "id": "ignored"})

        assert updated.title == "Staff Engineer"
        assert updated.id == created.id
        assert updated.created_at == created.created_at
        assert updated.updated_at >= created.updated_at
        assert store.get(created.id).title == "Staff Engineer"

    @pytest.mark.integration
    def test_update_unknown_returns_none(self, store):
        assert store.update("missing", {"title": "x"}) is None

    @pytest.mark.integration
    def test_invalid_update_leaves_record_untouched(self, store, draft):
        created = store.create(7, draft)

        with pytest.raises(ResumeValidationError):
            store.update(created.id, {"personalInfo": {"firstName": "Only"}})

        assert store.get(created.id) == created

    @pytest.mark.integration
    def test_delete(self, store, draft):
        created = store.create(7, draft)
        assert store.delete(created.id) is True
        assert store.get(created.id) is None
        assert store.delete(created.id) is False

    @pytest.mark.integration
    def test_returned_records_are_copies(self, store, draft):
        created = store.create(7, draft)
        fetched = store.get(created.id)
        fetched.skills.technical.append("COBOL")

        assert store.get(created.id).skills.technical == ["C++", "Python"]


class TestSQLiteStore:
    """SQLite-specific persistence details."""

    @pytest.mark.integration
    def test_records_survive_reopen(self, tmp_path, draft):
        db_path = tmp_path / "quill.db"
        first = SQLiteResumeStore(db_path)
        created = first.create(3, draft)
        first.close()

        second = SQLiteResumeStore(db_path)
        assert second.get(created.id) == created
        second.close()

    @pytest.mark.integration
    def test_indexed_columns_mirror_document(self, tmp_path, draft):
        db_path = tmp_path / "quill.db"
        store = SQLiteResumeStore(db_path)
        created = store.create(3, draft)
        store.update(created.id, {"title": "Renamed"})
        store.close()

        conn = sqlite3.connect(str(db_path))
        row = conn.execute("SELECT user_id, title, job_url FROM resumes WHERE id = ?", (created.id,)).fetchone()
        conn.close()
        assert row == (3, "Renamed", "https://example.com/jobs/42")

    @pytest.mark.integration
    def test_backend_failure_raises_storage_error(self, tmp_path, draft):
        store = SQLiteResumeStore(tmp_path / "quill.db")
        store.conn.execute("DROP TABLE resumes")

        with pytest.raises(StorageError) as exc_info:
            store.create(3, draft)
        assert exc_info.value.status_code == 500
        assert exc_info.value.operation == "create"
        store.close()

    @pytest.mark.integration
    @pytest.mark.parametrize("stored_data", ["{not json", '{"title": "Missing everything else"}'])
    def test_unreadable_row_raises_storage_error(self, tmp_path, draft, stored_data):
        store = SQLiteResumeStore(tmp_path / "quill.db")
        created = store.create(3, draft)
        with store.conn:
            store.conn.execute("UPDATE resumes SET data = ? WHERE id = ?", (stored_data, created.id))

        with pytest.raises(StorageError) as exc_info:
            store.get(created.id)
        assert exc_info.value.operation == "get"
        assert exc_info.value.status_code == 500

        with pytest.raises(StorageError):
            store.list_for_user(3)
        store.close()


class TestBuildStore:
    """Backend selection from settings."""

    @pytest.mark.integration
    def test_memory_backend(self):
        assert isinstance(build_store({"store": {"backend": "memory"}}), InMemoryResumeStore)

    @pytest.mark.integration
    def test_sqlite_backend(self, tmp_path):
        store = build_store({"store": {"backend": "sqlite", "db_path": str(tmp_path / "x" / "quill.db")}})
        assert isinstance(store, SQLiteResumeStore)
        assert (tmp_path / "x" / "quill.db").exists()
        store.close()

    @pytest.mark.integration
    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            build_store({"store": {"backend": "postgres"}})
