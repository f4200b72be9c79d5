"""SQLModel data models.

The registry stores a single table: one row per network daemon.
"""

from typing import Optional
from sqlmodel import SQLModel, Field


class Daemon(SQLModel, table=True):
    """A network daemon known to the registry.

    Fields:
    - `id`: primary key, assigned by the database unless supplied
    - `name`: daemon process name, e.g. `sshd`
    - `port`: port the daemon listens on
    - `description`: free-form text, empty by default
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, nullable=False)
    port: int = Field(nullable=False)
    description: str = Field(default="")
