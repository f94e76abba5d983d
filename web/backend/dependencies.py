#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from functools import lru_cache
from typing import Generator, Optional

from fastapi import Header, HTTPException
from sqlalchemy.orm import Session

from core.scorer import MatchScorer
from database.database import build_engine, build_session_factory, init_db
from .config import get_config


class DatabaseManager:
    """Manages database connections and sessions."""

    def __init__(self, url: str, create_tables: bool = True):
        self.engine = build_engine(url)
        self.SessionLocal = build_session_factory(self.engine)
        if create_tables:
            init_db(self.engine)

    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session.

        Yields:
            Session: SQLAlchemy database session.
        """
        session = self.SessionLocal()
        try:
            yield session
        finally:
            session.close()


@lru_cache()
def get_db_manager() -> DatabaseManager:
    """Build the database manager on first use."""
    config = get_config()
    return DatabaseManager(config.database.url, create_tables=config.database.create_tables)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...

    Yields:
        Session: Database session that will be automatically closed.
    """
    yield from get_db_manager().get_session()


def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """
    Resolve the calling user.

    Authentication happens upstream; the gateway forwards the authenticated
    user's id in the X-User-Id header.
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Unauthorized: no user id provided")
    return x_user_id.strip()


def get_match_scorer() -> MatchScorer:
    """Scorer configured with the current clamping policy."""
    return MatchScorer(clamp_upper_bound=get_config().recommendation.clamp_upper_bound)
