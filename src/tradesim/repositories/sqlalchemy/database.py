"""Database connection and session management."""

from typing import Optional

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base

Base = declarative_base()


class Database:
    """
    Explicitly constructed database handle.

    Owns one engine and its session factory. The process entry point
    creates it, hands it to the store and disposes it on shutdown.
    """

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 5.0,
        echo: bool = False,
        engine: Optional[Engine] = None,
    ):
        if engine is None:
            connect_args = {}
            if url.startswith("sqlite"):
                # SQLite-specific: sessions may be used from worker threads,
                # and writers wait at most timeout_seconds for the file lock
                connect_args = {"check_same_thread": False, "timeout": timeout_seconds}
            engine = create_engine(url, connect_args=connect_args, echo=echo)
        self._engine = engine
        self._session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self._engine,
        )

    @classmethod
    def from_engine(cls, engine: Engine) -> "Database":
        """Wrap an already configured engine."""
        return cls(url=str(engine.url), engine=engine)

    @property
    def engine(self) -> Engine:
        return self._engine

    def create_all(self) -> None:
        """Create database tables."""
        from tradesim.repositories.sqlalchemy import orm_models  # noqa: F401

        Base.metadata.create_all(bind=self._engine)

    def session(self) -> Session:
        """Get a new database session."""
        return self._session_factory()

    def dispose(self) -> None:
        """Release pooled connections."""
        self._engine.dispose()
