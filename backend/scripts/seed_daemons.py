"""CLI script to seed daemons into the backend DB.
Usage: python scripts/seed_daemons.py [--file daemons.json]
"""
import sys
import json
import argparse
import pathlib
from typing import Optional
# Ensure `backend/` is on sys.path so `daemon_registry` imports work when running this script directly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from sqlmodel import Session
from daemon_registry.database import engine, create_db_and_tables
from daemon_registry import services


def load_daemons(path: pathlib.Path) -> list:
    """Read a JSON array of `{name, port, description?, id?}` objects."""
    data = json.loads(path.read_text(encoding='utf-8'))
    if not isinstance(data, list):
        raise ValueError('daemon file must contain a JSON array')
    for idx, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f'daemon #{idx} in {path.name} must be an object')
    return data


def main(file: Optional[str] = None) -> int:
    """Seed the daemon table and return the number of rows created.

    Without `file` the built-in default daemons are used. Nothing is
    inserted when the table already holds rows.
    """
    daemons = None
    if file:
        path = pathlib.Path(file)
        if not path.exists():
            print(f'Daemon file not found at {path}')
            return 0
        daemons = load_daemons(path)
    create_db_and_tables()
    with Session(engine) as session:
        created = services.DaemonService(session).seed_defaults(daemons)
    if created:
        print(f'Seeded {created} daemons')
    else:
        print('Daemon table is not empty; nothing seeded')
    return created


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('--file', help='JSON file with daemons to seed instead of the defaults')
    args = parser.parse_args()
    main(file=args.file)
