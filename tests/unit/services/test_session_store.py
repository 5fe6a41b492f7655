"""Unit tests for the file-backed session store."""

import json

import pytest

from tradiestop.services.session_store import SessionStore


@pytest.fixture
def store(tmp_path):
    return SessionStore(tmp_path / "nested" / "session.json")


class TestSessionStore:
    """Test cases for SessionStore."""

    def test_missing_file_means_logged_out(self, store):
        assert store.load() is None
        assert store.token() is None

    def test_save_and_load(self, store, client_session):
        store.save(client_session)

        loaded = store.load()

        assert loaded == client_session
        assert store.token() == "client-token"

    def test_saved_file_uses_api_field_names(self, store, client_session):
        store.save(client_session)

        data = json.loads(store.path.read_text(encoding="utf-8"))

        assert data["imageUrl"] == "https://img.test/alice.png"
        assert data["token"] == "client-token"
        assert "password" not in data

    def test_password_is_never_written(self, store, client_session):
        store.save(client_session.model_copy(update={"password": "secret"}))
        assert "secret" not in store.path.read_text(encoding="utf-8")

    def test_corrupt_file_is_removed(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json", encoding="utf-8")

        assert store.load() is None
        assert not store.path.exists()

    def test_invalid_session_is_removed(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text(json.dumps({"id": "x", "role": "Client"}), encoding="utf-8")

        assert store.load() is None
        assert not store.path.exists()

    def test_clear(self, store, client_session):
        store.save(client_session)
        store.clear()
        store.clear()

        assert store.load() is None
