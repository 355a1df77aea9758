"""
Database session management.

Provides SQLModel engine and session creation.
"""

from contextlib import contextmanager
from typing import Any, Generator, Iterator

from sqlmodel import Session, create_engine

from gymapi.core.config import settings

DATABASE_URL: str = settings.database_url


def _engine_kwargs(url: str) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"echo": settings.SQL_ECHO, "pool_pre_ping": True}
    if url.startswith("sqlite"):
        # One connection may be used from FastAPI's threadpool workers
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_size"] = 5
        kwargs["max_overflow"] = 10
    return kwargs


engine = create_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance

    Example:
        @router.get("/items")
        def get_items(db: Session = Depends(get_db)):
            return ItemService(db).list()
    """
    with Session(engine) as session:
        yield session


@contextmanager
def atomic(session: Session) -> Iterator[Session]:
    """
    Run a block of writes as one transaction.

    Commits when the block finishes, rolls back and re-raises on any error,
    so either every row of an aggregate is written or none is.
    """
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
