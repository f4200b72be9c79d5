"""Run a quick smoke test against the app.

Uses FastAPI's TestClient to hit the health, greeting and daemon
listing endpoints and prints what comes back.
"""

import sys
import os

# Ensure backend folder is on sys.path so `daemon_registry` package can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fastapi.testclient import TestClient
from daemon_registry.main import app


def run_testclient():
    client = TestClient(app)
    for path in ('/health', '/hello', '/daemons'):
        resp = client.get(path)
        print(path, 'STATUS:', resp.status_code)
        if resp.headers.get('content-type', '').startswith('application/json'):
            print('JSON:', resp.json())
        else:
            print('CONTENT:', resp.text)


if __name__ == '__main__':
    run_testclient()
