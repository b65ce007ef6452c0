"""
Database Configuration Tests
Connection string handling for the supported providers
"""

import pytest

from satlogix.config.database import (
    UnsupportedDatabaseError,
    create_db_engine,
    get_database_provider,
    normalize_database_url,
)


class TestConnectionStrings:

    @pytest.mark.parametrize("url, provider", [
        ("postgresql://user:pw@localhost:5432/satlogix", "postgresql"),
        ("postgres://user:pw@db.internal/satlogix", "postgresql"),
        ("postgresql+psycopg2://user:pw@localhost/satlogix", "postgresql"),
        ("mysql://user:pw@localhost:3306/satlogix", "mysql"),
        ("mysql+pymysql://user:pw@localhost/satlogix", "mysql"),
        ("sqlite:///./dev.db", "sqlite"),
        ("sqlite://", "sqlite"),
        ("file:./dev.db", "sqlite"),
    ])
    def test_provider_detection(self, url, provider):
        assert get_database_provider(url) == provider

    def test_postgres_scheme_rewritten(self):
        assert normalize_database_url("postgres://u:p@h/db") == "postgresql://u:p@h/db"

    def test_file_scheme_rewritten(self):
        assert normalize_database_url("file:./dev.db") == "sqlite:///./dev.db"

    def test_other_urls_unchanged(self):
        url = "mysql://u:p@localhost:3306/satlogix"
        assert normalize_database_url(url) == url

    @pytest.mark.parametrize("url", ["", "mongodb://localhost/satlogix", "satlogix.db"])
    def test_unsupported_urls(self, url):
        with pytest.raises(UnsupportedDatabaseError):
            normalize_database_url(url)


class TestSqliteEngine:

    def test_foreign_keys_enabled(self):
        engine = create_db_engine("sqlite://")
        try:
            with engine.connect() as conn:
                assert conn.exec_driver_sql("PRAGMA foreign_keys").scalar() == 1
        finally:
            engine.dispose()
