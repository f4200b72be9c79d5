"""Pydantic request/response schemas used by the API.

Schemas keep API input/output shapes stable and provide validation for
controller handlers and tests.
"""

from pydantic import BaseModel, Field
from typing import Optional

MIN_PORT = 1
MAX_PORT = 65535
# largest value SQLite can store in an INTEGER column
MAX_ID = 2**63 - 1


class DaemonIn(BaseModel):
    """Payload for creating a daemon.

    `id` is optional; when omitted the database assigns one.
    """
    id: Optional[int] = Field(default=None, ge=1, le=MAX_ID)
    name: str = Field(min_length=1, max_length=100)
    port: int = Field(ge=MIN_PORT, le=MAX_PORT)
    description: str = Field(default="", max_length=500)


class DaemonOut(BaseModel):
    """A daemon as returned by the API."""
    id: int
    name: str
    port: int
    description: str
