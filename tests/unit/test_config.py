"""Unit tests for settings."""

import pytest

from restate.config import Settings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path) -> None:
    """Ignore any .env or APPWRITE_* variables of the host."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "APPWRITE_PROJECT_ID",
        "EXPO_PUBLIC_APPWRITE_PROJECT_ID",
        "APPWRITE_DATABASE_ID",
        "EXPO_PUBLIC_APPWRITE_DATABASE_ID",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = Settings()
    assert settings.appwrite_platform == "com.amer.restate"
    assert settings.oauth_provider == "google"
    assert settings.store_configured is False
    assert settings.session_cookie_secure is True


def test_reads_plain_env_names(monkeypatch) -> None:
    monkeypatch.setenv("APPWRITE_PROJECT_ID", "proj-1")
    assert Settings().appwrite_project_id == "proj-1"


def test_reads_expo_public_env_names(monkeypatch) -> None:
    monkeypatch.setenv("EXPO_PUBLIC_APPWRITE_DATABASE_ID", "db-9")
    assert Settings().appwrite_database_id == "db-9"


def test_store_configured_needs_every_id() -> None:
    settings = Settings(
        appwrite_project_id="p",
        appwrite_database_id="d",
        appwrite_properties_collection_id="props",
        appwrite_agents_collection_id="agents",
        appwrite_reviews_collection_id="reviews",
        appwrite_galleries_collection_id="galleries",
    )
    assert settings.store_configured is True
