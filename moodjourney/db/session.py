"""
Database session management.

SQLite is the default store; a MySQL URL works once the mysql extra
(pymysql) is installed.
"""
from typing import Any, Dict
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from moodjourney.core.config import settings
from moodjourney.db.base import Base


def engine_options(database_url: str) -> Dict[str, Any]:
    """Keyword arguments for create_engine, by backend."""
    if database_url.startswith("sqlite"):
        # FastAPI may run sync dependencies in a worker thread
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True, "pool_recycle": 3600}


engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    **engine_options(settings.DATABASE_URL)
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Create the users and mood_entries tables if missing."""
    import moodjourney.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
