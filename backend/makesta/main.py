"""Makesta API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MakestaError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Lifespan builds every process-wide collaborator once: DB manager,
      TokenIssuer (signing key), MaterialFileStore (upload dir),
      AttendancePolicy; they are read-only afterwards

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - run() leaves logging to setup_logging (uvicorn log_config disabled)
    - Collaborators live on app.state so tests can swap them without patching modules
"""

import logging
from contextlib import asynccontextmanager
from datetime import timedelta

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import makesta.models  # noqa: F401  (populate Base.metadata)
from makesta.api.error_handlers import register_error_handlers
from makesta.api.routes import (
    attendance, auth, certificates, grades, health, instructors,
    materials, participants,
)
from makesta.config import Settings, get_settings
from makesta.core.attendance_rules import AttendancePolicy
from makesta.core.token_issuer import TokenIssuer
from makesta.infrastructure.database import init_db
from makesta.infrastructure.file_store import MaterialFileStore
from makesta.infrastructure.observability import setup_logging
from makesta.repositories.users import UserRepository
from makesta.services.bootstrap_organizer import bootstrap_organizer

logger = logging.getLogger(__name__)


def configure_state(app: FastAPI, settings: Settings) -> None:
    """Attach the configured collaborators to app.state."""
    app.state.token_issuer = TokenIssuer(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl=timedelta(hours=settings.jwt_ttl_hours),
    )
    app.state.file_store = MaterialFileStore(
        settings.upload_dir, max_bytes=settings.max_upload_bytes,
    )
    app.state.attendance_policy = AttendancePolicy(
        allow_closed_sessions=settings.attendance_allow_closed_sessions,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if manager.is_sqlite:
        # Local/dev databases are created in place; PostgreSQL goes through alembic
        await manager.create_all()

    configure_state(app, settings)
    app.state.file_store.ensure_dir()

    async with manager.session() as db:
        await bootstrap_organizer(UserRepository(db), settings)

    logger.info("Makesta API started")
    yield
    await manager.dispose()
    logger.info("Makesta API shutting down")


app = FastAPI(title="Makesta API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(participants.router)
app.include_router(materials.router)
app.include_router(attendance.router)
app.include_router(instructors.router)
app.include_router(grades.router)
app.include_router(certificates.router)

register_error_handlers(app)


def run() -> None:
    """Serve the API (console script `makesta-api`)."""
    uvicorn.run(
        "makesta.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
