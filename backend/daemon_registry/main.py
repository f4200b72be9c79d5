"""FastAPI application entrypoint and HTTP controllers.

This module defines the HTTP endpoints of the daemon registry.
Controllers are intentionally thin: they accept requests, delegate to
services, and return JSON responses.

Endpoints implemented:
- GET /hello
- GET /daemons
- POST /daemons
- GET /daemons/example
- GET /daemons/{daemon_id}
- GET /health
"""

from fastapi import FastAPI, Depends, HTTPException, Path, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import Session
from typing import List, Optional
import json
import logging
import time
import uuid
from .database import engine, create_db_and_tables, get_session
from . import services, models
from .schemas import DaemonIn, DaemonOut, MAX_ID
from .config import settings

app = FastAPI(title="Daemon Registry API")
logger = logging.getLogger("daemon_registry.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

# Wide-open CORS keeps local HTML testers working without extra config in dev.
if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

create_db_and_tables()
if settings.SEED_DEFAULT_DAEMONS:
    with Session(engine) as _session:
        services.DaemonService(_session).seed_defaults()


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    response: Response
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        logger.exception(
            "request_failed %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "duration_ms": elapsed_ms,
                    "client": request.client.host if request.client else "unknown",
                },
                ensure_ascii=True,
            ),
        )
        raise
    response.headers["X-Request-ID"] = req_id
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
    logger.info(
        "request_done %s",
        json.dumps(
            {
                "request_id": req_id,
                "path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
                "duration_ms": elapsed_ms,
                "client": request.client.host if request.client else "unknown",
            },
            ensure_ascii=True,
        ),
    )
    return response


def _daemon_out(d: models.Daemon) -> dict:
    return {'id': d.id, 'name': d.name, 'port': d.port, 'description': d.description}


@app.get('/hello', response_class=PlainTextResponse)
def hello(name: Optional[str] = None):
    """Return a plain-text greeting, `Hello World!` by default."""
    who = name.strip() if name and name.strip() else 'World'
    return f'Hello {who}!'


@app.get('/daemons', response_model=List[DaemonOut])
def list_daemons(db: Session = Depends(get_session)):
    """List every stored daemon ordered by id."""
    svc = services.DaemonService(db)
    return [_daemon_out(d) for d in svc.list_daemons()]


@app.post('/daemons', response_model=DaemonOut, status_code=201)
def create_daemon(payload: DaemonIn, db: Session = Depends(get_session)):
    """Register a daemon.

    The id is assigned by the database unless the payload supplies one;
    a supplied id that is already taken is rejected with 409.
    """
    svc = services.DaemonService(db)
    try:
        d = svc.create_daemon(payload.name, payload.port, payload.description, daemon_id=payload.id)
    except services.DaemonExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _daemon_out(d)


@app.get('/daemons/example', response_model=DaemonOut)
def example_daemon(db: Session = Depends(get_session)):
    """Return a hard-coded test daemon without touching the database."""
    return _daemon_out(services.DaemonService(db).example_daemon())


@app.get('/daemons/{daemon_id}', response_model=DaemonOut)
def get_daemon(daemon_id: int = Path(..., le=MAX_ID), db: Session = Depends(get_session)):
    d = services.DaemonService(db).get_daemon(daemon_id)
    if not d:
        raise HTTPException(status_code=404, detail='daemon not found')
    return _daemon_out(d)


@app.get("/", response_class=HTMLResponse)
def home():
    """Minimal homepage for quick manual testing."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
      <meta charset="UTF-8" />
      <title>Daemon Registry API</title>
      <style>
        body { font-family: Arial, sans-serif; margin: 32px; }
        a { color: #0a6; }
        .card { max-width: 640px; padding: 16px; border: 1px solid #ddd; border-radius: 8px; }
      </style>
    </head>
    <body>
      <div class="card">
        <h1>Daemon Registry API</h1>
        <p>Quick links for local testing:</p>
        <ul>
          <li><a href="/docs">Swagger UI</a></li>
          <li><a href="/daemons">Registered daemons</a></li>
          <li><a href="/hello">Greeting</a></li>
        </ul>
        <p>POST a JSON body like <code>{"name": "sshd", "port": 22}</code> to <code>/daemons</code> to register one.</p>
      </div>
    </body>
    </html>
    """


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}
