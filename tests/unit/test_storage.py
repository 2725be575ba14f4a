"""Unit tests for the SQLAlchemy draft repository."""

import uuid

import pytest

from contract_wizard.storage import DatabaseManager, DraftRepository, get_database_url


@pytest.fixture
def db_manager():
    manager = DatabaseManager("sqlite://")
    manager.init_database()
    yield manager
    manager.close()


@pytest.fixture
def repository(db_manager):
    return DraftRepository(db_manager)


class TestDatabaseManager:
    def test_health_check(self, db_manager):
        assert db_manager.health_check()

    def test_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("CONTRACT_WIZARD_DATABASE_URL", "sqlite:///env.db")

        assert get_database_url() == "sqlite:///env.db"
        assert get_database_url("sqlite://") == "sqlite://"


class TestDraftRepository:
    """Tests for draft persistence."""

    def test_create_draft(self, repository):
        draft = repository.save({
            "title": "Design",
            "content": "Body",
            "fieldValues": {"clientName": "Acme"},
            "depositAmount": 200,
            "metadata": {"step": 3},
        })

        assert uuid.UUID(draft["id"])
        assert draft["title"] == "Design"
        assert draft["fieldValues"] == {"clientName": "Acme"}
        assert draft["depositAmount"] == "200"
        assert draft["customFields"] == []
        assert draft["metadata"] == {"step": 3}

    def test_update_existing_draft(self, repository):
        created = repository.save({"title": "First"})

        updated = repository.save({"id": created["id"], "title": "Second", "content": "New"})

        assert updated["id"] == created["id"]
        assert repository.get(created["id"])["title"] == "Second"
        assert len(repository.list()) == 1

    def test_last_writer_wins(self, repository):
        created = repository.save({"title": "Base", "content": "v0"})

        repository.save({"id": created["id"], "content": "from tab A"})
        repository.save({"id": created["id"], "content": "from tab B"})

        assert repository.get(created["id"])["content"] == "from tab B"

    def test_unknown_uuid_is_not_created(self, repository):
        assert repository.save({"id": str(uuid.uuid4()), "title": "Ghost"}) is None
        assert repository.list() == []

    def test_non_uuid_id_creates_new_draft(self, repository):
        draft = repository.save({"id": "local-1", "title": "Fresh"})

        assert draft["id"] != "local-1"

    def test_get_missing(self, repository):
        assert repository.get(str(uuid.uuid4())) is None
        assert repository.get("not-a-uuid") is None

    def test_delete(self, repository):
        draft = repository.save({"title": "Bye"})

        assert repository.delete(draft["id"])
        assert not repository.delete(draft["id"])
        assert repository.get(draft["id"]) is None

    def test_delete_all(self, repository):
        repository.save({"title": "A"})
        repository.save({"title": "B"})

        assert repository.delete_all() == 2
        assert repository.list() == []
