"""SQLite-backed key-value storage."""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path

from sqlalchemy import DateTime, String, Text, create_engine, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class PersistedValue(Base):
    """One JSON document stored under a key."""

    __tablename__ = "persisted_values"

    key: Mapped[str] = mapped_column(String(200), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=lambda: datetime.now(UTC), nullable=False
    )


class KeyValueStore:
    """Stores raw JSON strings by key in a SQLite database."""

    def __init__(self, db_path: str | Path | None = None) -> None:
        """Initialize key-value store.

        Args:
            db_path: Path to the SQLite database file, in-memory when None
        """
        if db_path is None:
            self.db_path: Path | None = None
            url = "sqlite://"
        else:
            self.db_path = Path(db_path)
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            url = f"sqlite:///{self.db_path}"

        self.engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False,
        )
        self.SessionLocal = sessionmaker(bind=self.engine, expire_on_commit=False)
        Base.metadata.create_all(bind=self.engine)
        logger.info(f"Key-value store initialized at {self.db_path or ':memory:'}")

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """Get a database session context manager.

        Yields:
            Database session.
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get_raw(self, key: str) -> str | None:
        """Return the stored string for ``key`` or None."""
        with self.get_session() as session:
            row = session.get(PersistedValue, key)
            return row.value if row else None

    def set_raw(self, key: str, value: str) -> None:
        with self.get_session() as session:
            row = session.get(PersistedValue, key)
            if row is None:
                session.add(PersistedValue(key=key, value=value))
            else:
                row.value = value
                row.updated_at = datetime.now(UTC)

    def remove(self, key: str) -> None:
        with self.get_session() as session:
            row = session.get(PersistedValue, key)
            if row is not None:
                session.delete(row)

    def clear(self) -> None:
        with self.get_session() as session:
            session.query(PersistedValue).delete()

    def keys(self) -> list[str]:
        with self.get_session() as session:
            query = select(PersistedValue.key).order_by(PersistedValue.key)
            return list(session.scalars(query))

    def size(self) -> int:
        """Total characters stored, keys included."""
        with self.get_session() as session:
            length = func.length(PersistedValue.key) + func.length(PersistedValue.value)
            total = session.scalar(select(func.coalesce(func.sum(length), 0)))
            return int(total or 0)

    def is_available(self) -> bool:
        """Check that the database accepts writes."""
        probe = "__storage_test__"
        try:
            self.set_raw(probe, probe)
            self.remove(probe)
            return True
        except SQLAlchemyError as e:
            logger.warning(f"Storage not available: {e}")
            return False
