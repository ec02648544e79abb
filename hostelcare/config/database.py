"""
Database connection settings for the HostelCare API.
Provides the SQLAlchemy engine, session factory and slow query logging.
"""

import time
from contextlib import contextmanager
from typing import Any, Dict, Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from hostelcare.config.logging import get_logger
from hostelcare.config.settings import settings

logger = get_logger(__name__)


def build_engine(url: str, echo: bool = False) -> Engine:
    """
    Create an engine for the given URL.

    Pool sizing only applies to server databases; SQLite connections are
    opened per session and may be shared across threads.
    """
    kwargs: Dict[str, Any] = {
        "pool_pre_ping": True,  # Replace dead connections before use
        "echo": echo,
    }
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_POOL_OVERFLOW,
            pool_recycle=3600,
        )
    return create_engine(url, **kwargs)


def build_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=bind)


engine = build_engine(settings.get_database_url(), echo=settings.DB_ECHO)
SessionLocal = build_session_factory(engine)


@event.listens_for(Engine, "before_cursor_execute")
def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    """Log query execution time - start timer"""
    conn.info.setdefault('query_start_time', []).append(time.time())


@event.listens_for(Engine, "after_cursor_execute")
def after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    """Log query execution time - stop timer and log if slow query"""
    total_time = time.time() - conn.info['query_start_time'].pop()

    if total_time > settings.SLOW_QUERY_SECONDS:
        logger.warning(
            f"Slow query detected ({total_time:.4f}s): {statement[:100]}..."
        )


@contextmanager
def get_db_context(session_factory: sessionmaker = SessionLocal) -> Generator[Session, None, None]:
    """Context manager for database sessions outside of a request"""
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception as e:
        logger.error(f"Database context error: {str(e)}")
        session.rollback()
        raise
    finally:
        session.close()
