"""
Tests for settings resolution.
"""

from app.core.config import DEFAULT_DATABASE_NAME, Settings


class TestDatabaseName:
    def test_explicit_name_wins(self) -> None:
        settings = Settings(
            mongodb_uri="mongodb://db:27017/from_uri", mongodb_database="explicit"
        )
        assert settings.get_database_name() == "explicit"

    def test_name_from_uri(self) -> None:
        settings = Settings(mongodb_uri="mongodb://db:27017/from_uri?retryWrites=true")
        assert settings.get_database_name() == "from_uri"

    def test_default_name(self) -> None:
        settings = Settings(mongodb_uri="mongodb://db:27017")
        assert settings.get_database_name() == DEFAULT_DATABASE_NAME


class TestEnvironment:
    def test_reads_uri_and_port_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("MONGODB_URI", "mongodb://mongo:27017/tasks")
        monkeypatch.setenv("PORT", "9000")
        settings = Settings()
        assert settings.mongodb_uri == "mongodb://mongo:27017/tasks"
        assert settings.port == 9000
