"""Tutorials API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TutorialAPIError -> {"message": ...} JSON responses
    - CORS configured from settings (not hardcoded)
    - Database manager built on startup via lifespan and attached to app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Tables created on startup: the store owns its schema, there are no migrations
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import health, tutorials
from app.config import get_settings
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await db_manager.create_tables()
    app.state.db_manager = db_manager
    logger.info("Tutorials API started")
    yield
    logger.info("Tutorials API shutting down")
    await db_manager.close()
    app.state.db_manager = None


app = FastAPI(
    title="Tutorials API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(tutorials.router)

register_error_handlers(app)


@app.get("/")
async def root():
    return {"message": "Welcome to the Tutorials API."}


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    logger.info(f"Starting Tutorials API on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
