"""
Unit tests for application configuration.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from invoiceflow.config import Settings
from invoiceflow.infrastructure.dependencies import build_container, create_key_value_store
from invoiceflow.infrastructure.storage.memory_store import InMemoryKeyValueStore
from invoiceflow.infrastructure.storage.sql_store import SQLAlchemyKeyValueStore


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self):
        """Test the built-in configuration."""
        settings = Settings(_env_file=None)

        assert settings.storage_backend == "sql"
        assert settings.database_url == "sqlite:///invoiceflow.db"
        assert settings.storage_key_prefix == "invoiceflow_"
        assert settings.default_payment_terms_days == 30
        assert settings.duplicate_suffix == "-COPY"

    def test_backend_is_normalised(self):
        """Test the backend name is trimmed and lower-cased."""
        assert Settings(_env_file=None, storage_backend=" Memory ").storage_backend == "memory"

    def test_unknown_backend_rejected(self):
        """Test unknown backends fail validation."""
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, storage_backend="redis")

    def test_environment_variables(self, monkeypatch):
        """Test values are read from the environment."""
        monkeypatch.setenv("STORAGE_BACKEND", "memory")
        monkeypatch.setenv("STORAGE_KEY_PREFIX", "app_")

        settings = Settings(_env_file=None)

        assert settings.storage_backend == "memory"
        assert settings.storage_key_prefix == "app_"

    def test_effective_log_level(self):
        """Test debug mode forces DEBUG logging."""
        assert Settings(_env_file=None, log_level="warning").effective_log_level == "WARNING"
        assert Settings(_env_file=None, log_level="warning", debug=True).effective_log_level == "DEBUG"


class TestServiceWiring:
    """Test cases for build_container."""

    def test_memory_backend(self):
        """Test the memory backend is built with the configured quota."""
        store = create_key_value_store(Settings(_env_file=None, storage_backend="memory", storage_quota_bytes=100))

        assert isinstance(store, InMemoryKeyValueStore)
        assert store.quota_bytes == 100

    def test_sql_backend(self, tmp_path):
        """Test the sql backend uses the configured database."""
        config = Settings(_env_file=None, database_url=f"sqlite:///{tmp_path / 'data.db'}")
        assert isinstance(create_key_value_store(config), SQLAlchemyKeyValueStore)

    def test_container_shares_storage(self):
        """Test every service works on the same storage and prefix."""
        store = InMemoryKeyValueStore()
        container = build_container(
            Settings(_env_file=None, storage_backend="memory", storage_key_prefix="t_"), store=store
        )

        container.numbering.next_invoice_number()

        assert container.sequence.get_last_number() == 1
        assert store.keys() == ["t_lastInvoiceNumber"]
        assert container.storage is container.backup.storage
