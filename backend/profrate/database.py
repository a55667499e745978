"""Store handle – owns the engine and session factory for one application."""

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from profrate.errors import StoreFailure
from profrate.models import Base

logger = logging.getLogger(__name__)


class Store:
    """Explicitly constructed database handle, created by the application root."""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.engine = create_engine(database_url, echo=echo, **_engine_options(database_url))
        self.session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    def init_db(self):
        """Create all tables if they don't exist."""
        Base.metadata.create_all(bind=self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a transactional session and commit/rollback automatically."""
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            logger.exception("Store operation failed")
            raise StoreFailure(str(exc)) from exc
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self):
        self.engine.dispose()


def _engine_options(database_url: str) -> dict:
    if database_url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        # In-memory databases live on a single connection.
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options
    return {"pool_size": 10, "max_overflow": 20, "pool_pre_ping": True}


def get_db(request: Request):
    """FastAPI dependency that yields a session from the app's store."""
    store: Store = request.app.state.store
    session = store.session_factory()
    try:
        yield session
    finally:
        session.close()
