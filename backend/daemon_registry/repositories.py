"""Repository classes encapsulating database operations.

Repositories return SQLModel objects and perform commits/refreshes
where appropriate. They contain no query logic beyond plain selects.
"""

from typing import List, Optional
from sqlmodel import Session, select
from sqlalchemy import func
from . import models


class DaemonRepository:
    """CRUD operations for `Daemon` objects."""
    def __init__(self, session: Session):
        self.session = session

    def list_all(self) -> List[models.Daemon]:
        """Return every stored daemon ordered by id."""
        stmt = select(models.Daemon).order_by(models.Daemon.id)
        return self.session.exec(stmt).all()

    def get(self, daemon_id: int) -> Optional[models.Daemon]:
        """Get a `Daemon` by primary key."""
        return self.session.get(models.Daemon, daemon_id)

    def exists(self, daemon_id: int) -> bool:
        """Return True if a daemon with `daemon_id` is stored."""
        stmt = select(models.Daemon.id).where(models.Daemon.id == daemon_id)
        return self.session.exec(stmt).first() is not None

    def count(self) -> int:
        stmt = select(func.count()).select_from(models.Daemon)
        return self.session.exec(stmt).one()

    def create(self, daemon: models.Daemon) -> models.Daemon:
        """Persist a new daemon and return the managed instance."""
        self.session.add(daemon)
        self.session.commit()
        self.session.refresh(daemon)
        return daemon

    def create_many(self, daemons: List[models.Daemon]) -> List[models.Daemon]:
        """Persist several daemons in a single commit."""
        self.session.add_all(daemons)
        self.session.commit()
        for d in daemons:
            self.session.refresh(d)
        return daemons
