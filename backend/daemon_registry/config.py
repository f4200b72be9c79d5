"""Application settings and validation."""

import os
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent


class Settings:
    ENV: str
    DATABASE_URL: str
    LOG_LEVEL: str
    ALLOW_DEV_CORS: bool
    SEED_DEFAULT_DAEMONS: bool
    HOST: str
    PORT: int

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE / 'daemons.db'}").strip()
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self.SEED_DEFAULT_DAEMONS = os.getenv("SEED_DEFAULT_DAEMONS", "false").lower() == "true"
        self.HOST = os.getenv("HOST", "0.0.0.0")
        raw_port = os.getenv("PORT", "8080")
        try:
            self.PORT = int(raw_port)
        except ValueError as exc:
            raise RuntimeError(f"PORT must be an integer, got {raw_port!r}") from exc
        self._validate()

    def _validate(self):
        if not self.DATABASE_URL:
            raise RuntimeError("DATABASE_URL must not be empty")
        if not 1 <= self.PORT <= 65535:
            raise RuntimeError(f"PORT must be between 1 and 65535, got {self.PORT}")
        if self.ENV != "dev" and self.ALLOW_DEV_CORS:
            raise RuntimeError("ALLOW_DEV_CORS must be disabled in non-dev environments")


settings = Settings()
