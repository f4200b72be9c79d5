"""Database engine and helpers.

This module configures the SQLModel/SQLAlchemy engine for the embedded
SQLite database and provides small helpers used by the application,
scripts and tests. The database location comes from
`settings.DATABASE_URL` and defaults to `daemons.db` in the backend
folder.
"""

from sqlmodel import SQLModel, create_engine, Session
from .config import settings

DB_URL = settings.DATABASE_URL
_connect_args = {"check_same_thread": False} if DB_URL.startswith("sqlite") else {}
engine = create_engine(DB_URL, echo=False, connect_args=_connect_args)


def create_db_and_tables():
    """Create database tables using SQLModel metadata.

    Table creation is idempotent; existing tables and rows are left as
    they are.
    """
    # models must be imported so their tables register on the metadata
    from . import models  # noqa: F401
    SQLModel.metadata.create_all(engine)


def drop_db_and_tables():
    """Drop every table known to the SQLModel metadata."""
    from . import models  # noqa: F401
    SQLModel.metadata.drop_all(engine)


def get_session():
    """Yield a database `Session` for FastAPI dependency injection.

    The generator yields a session and ensures it is closed when the
    request scope finishes.
    """
    with Session(engine) as session:
        yield session
