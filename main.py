"""
Task Tracker API — application entry point.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import register_exception_handlers, register_middleware
from api.routes import router as api_router
from auth.routes import router as auth_router
from config.settings import Settings, config
from database.session import Database
from tasks.routes import router as tasks_router

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("sqlalchemy.engine", "asyncio", "aiosqlite"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


async def check_database(database: Database) -> None:
    """Startup probe.  The app cannot serve anything without its store."""
    try:
        await database.ping()
    except Exception as exc:
        logger.error("Error connecting to the database: %s", exc)
        raise SystemExit(1) from exc
    logger.info("Successfully connected to the database")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or config
    database = Database(settings)

    app = FastAPI(
        title="Task Tracker API",
        version="1.0.0",
        description="Per-user task tracking with JWT authentication.",
    )
    app.state.settings = settings
    app.state.database = database

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)
    register_exception_handlers(app)

    # Routes
    app.include_router(auth_router, prefix="/auth")
    app.include_router(tasks_router, prefix="/tasks")
    app.include_router(api_router)

    @app.on_event("startup")
    async def on_startup():
        await check_database(database)
        if settings.create_tables:
            await database.create_all()
            logger.info("Database schema ensured")
        logger.info("Application ready to accept requests.")

    @app.on_event("shutdown")
    async def on_shutdown():
        await database.dispose()

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
