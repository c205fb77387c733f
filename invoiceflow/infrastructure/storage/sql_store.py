"""
SQLAlchemy-backed key-value store.
Persists every key as one row of the kv_entries table.
"""

import logging
from typing import List, Optional

from sqlalchemy import Column, String, Text, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import NullPool

from invoiceflow.domain.models.base import StorageBackendError
from invoiceflow.domain.repositories.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)

Base = declarative_base()


class KeyValueEntryModel(Base):
    """One stored key and its serialized value."""

    __tablename__ = "kv_entries"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)


def create_store_engine(database_url: str, echo: bool = False) -> Engine:
    """Create the engine used by the key-value store."""
    return create_engine(
        database_url,
        poolclass=NullPool,
        echo=echo,
    )


class SQLAlchemyKeyValueStore(KeyValueStore):
    """Key-value store on top of a relational database."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=engine,
        )
        try:
            Base.metadata.create_all(bind=engine)
        except SQLAlchemyError as e:
            raise StorageBackendError(f"Could not initialize key-value table: {e}") from e

    @classmethod
    def from_url(cls, database_url: str, echo: bool = False) -> "SQLAlchemyKeyValueStore":
        return cls(create_store_engine(database_url, echo=echo))

    def get_item(self, key: str) -> Optional[str]:
        try:
            with self.session_factory() as session:
                entry = session.get(KeyValueEntryModel, key)
                return entry.value if entry else None
        except SQLAlchemyError as e:
            raise StorageBackendError(f"Failed to read '{key}': {e}") from e

    def set_item(self, key: str, value: str) -> None:
        try:
            with self.session_factory() as session:
                session.merge(KeyValueEntryModel(key=key, value=value))
                session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to write '{key}': {str(e)}")
            raise StorageBackendError(f"Failed to write '{key}': {e}") from e

    def remove_item(self, key: str) -> None:
        try:
            with self.session_factory() as session:
                entry = session.get(KeyValueEntryModel, key)
                if entry is not None:
                    session.delete(entry)
                    session.commit()
        except SQLAlchemyError as e:
            raise StorageBackendError(f"Failed to remove '{key}': {e}") from e

    def keys(self) -> List[str]:
        try:
            with self.session_factory() as session:
                return [row[0] for row in session.query(KeyValueEntryModel.key).all()]
        except SQLAlchemyError as e:
            raise StorageBackendError(f"Failed to list keys: {e}") from e
