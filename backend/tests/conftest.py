from pathlib import Path
import os
import pytest

# Point the app at a throwaway database before `daemon_registry` is imported.
TEST_DB = Path(__file__).resolve().parents[1] / "test_daemons.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB}"
os.environ["ENV"] = "dev"
os.environ["SEED_DEFAULT_DAEMONS"] = "false"

from daemon_registry.database import create_db_and_tables, drop_db_and_tables  # noqa: E402


@pytest.fixture(autouse=True)
def reset_db():
    """Give every test empty daemon tables."""
    drop_db_and_tables()
    create_db_and_tables()
    yield


@pytest.fixture
def session():
    from sqlmodel import Session
    from daemon_registry.database import engine
    with Session(engine) as s:
        yield s
