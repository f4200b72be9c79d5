"""Business logic services used by HTTP controllers.

Services are intentionally thin: they validate input, forward to the
repository and return SQLModel objects. Errors are raised as
`ValueError` subclasses so controllers can map them to HTTP statuses.
"""

import logging
from typing import Iterable, List, Optional
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session
from . import models, repositories
from .schemas import MIN_PORT, MAX_PORT, MAX_ID

logger = logging.getLogger("daemon_registry.services")

# Rows inserted by `seed_defaults` when no explicit list is given.
DEFAULT_DAEMONS = [
    {"name": "sshd", "port": 22, "description": "OpenSSH server daemon"},
    {"name": "httpd", "port": 80, "description": "Apache HTTP server daemon"},
    {"name": "named", "port": 53, "description": "BIND domain name server daemon"},
    {"name": "ntpd", "port": 123, "description": "Network time protocol daemon"},
]


class DaemonExistsError(ValueError):
    """Raised when a manually supplied daemon id is already taken."""
    def __init__(self, daemon_id: int):
        super().__init__(f"daemon already exists: {daemon_id}")
        self.daemon_id = daemon_id


class DaemonService:
    """List, look up and register daemons."""
    def __init__(self, session: Session):
        self.session = session
        self.daemon_repo = repositories.DaemonRepository(session)

    def list_daemons(self) -> List[models.Daemon]:
        return self.daemon_repo.list_all()

    def get_daemon(self, daemon_id: int) -> Optional[models.Daemon]:
        return self.daemon_repo.get(daemon_id)

    def _build_daemon(self, name, port, description="", daemon_id=None) -> models.Daemon:
        """Validate raw fields and return an unsaved `Daemon`.

        Raises `ValueError` for any invalid field.
        """
        name = name.strip() if isinstance(name, str) else ""
        if not name:
            raise ValueError("name must not be empty")
        # bool is an int subclass; `true` in a JSON file is not a port
        if isinstance(port, bool) or not isinstance(port, int) or not MIN_PORT <= port <= MAX_PORT:
            raise ValueError(f"port must be between {MIN_PORT} and {MAX_PORT}")
        if daemon_id is not None:
            if isinstance(daemon_id, bool) or not isinstance(daemon_id, int) or not 1 <= daemon_id <= MAX_ID:
                raise ValueError(f"id must be between 1 and {MAX_ID}")
        if description is None:
            description = ""
        if not isinstance(description, str):
            raise ValueError("description must be a string")
        return models.Daemon(id=daemon_id, name=name, port=port, description=description)

    def create_daemon(self, name: str, port: int, description: str = "", daemon_id: Optional[int] = None) -> models.Daemon:
        """Validate and persist a new daemon.

        When `daemon_id` is given it is used as the primary key and must
        not already exist; otherwise the database assigns one. Raises
        `DaemonExistsError` on an id clash and `ValueError` for invalid
        fields.
        """
        d = self._build_daemon(name, port, description, daemon_id)
        if daemon_id is not None and self.daemon_repo.exists(daemon_id):
            raise DaemonExistsError(daemon_id)
        try:
            created = self.daemon_repo.create(d)
        except IntegrityError as exc:
            # another writer took the id between the check and the commit
            self.session.rollback()
            raise DaemonExistsError(daemon_id) from exc
        logger.info("daemon_created id=%s name=%s port=%s", created.id, created.name, created.port)
        return created

    def example_daemon(self) -> models.Daemon:
        """Return a hard-coded daemon for quick manual testing. It is not saved."""
        return models.Daemon(id=0, name="sshd", port=22, description="OpenSSH server daemon")

    def seed_defaults(self, daemons: Optional[Iterable[dict]] = None) -> int:
        """Insert `daemons` (or `DEFAULT_DAEMONS`) into an empty table.

        Every item is validated before anything is written and all rows
        are committed together, so a bad item leaves the table empty.
        Returns the number of daemons created; an already populated
        table is left untouched and 0 is returned.
        """
        if self.daemon_repo.count() > 0:
            return 0
        items = list(DEFAULT_DAEMONS if daemons is None else daemons)
        pending = []
        seen_ids = set()
        for idx, item in enumerate(items):
            if not isinstance(item, dict):
                raise ValueError(f"daemon #{idx} must be an object")
            try:
                d = self._build_daemon(item.get("name"), item.get("port"), item.get("description", ""), item.get("id"))
            except ValueError as e:
                raise ValueError(f"daemon #{idx}: {e}") from e
            if d.id is not None:
                if d.id in seen_ids:
                    raise DaemonExistsError(d.id)
                seen_ids.add(d.id)
            pending.append(d)
        try:
            self.daemon_repo.create_many(pending)
        except IntegrityError as exc:
            self.session.rollback()
            raise ValueError("seed rows clash with existing daemons") from exc
        logger.info("daemons_seeded count=%s", len(pending))
        return len(pending)
