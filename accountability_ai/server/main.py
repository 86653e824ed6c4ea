"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request timing), registers exception handlers and includes all API routers.
It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from accountability_ai.core.database import init_db
from accountability_ai.core.logging_config import get_logger, setup_logging
from accountability_ai.core.monitoring import initialize_logfire

from .api.v1 import ai, checkins, health, prayers, sessions, tasks, users, voice
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing database tables on startup.
    """
    try:
        logger.info("Starting up Accountability AI Server...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    logger.info("Shutting down Accountability AI Server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Accountability AI Server API

    Backend for a personal accountability assistant: timed focus sessions,
    periodic check-ins with AI coaching, prayer tracking, Microsoft To-Do sync
    and text-to-speech.
    """,
    version=constant.API_VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(LogfireMiddleware)

setup_exception_handlers(app)
initialize_logfire(app)

app.include_router(health.router, tags=["health"])
app.include_router(users.router, prefix=f"{constant.API_V1_STR}/users", tags=["users"])
app.include_router(sessions.router, prefix=f"{constant.API_V1_STR}/sessions", tags=["sessions"])
app.include_router(checkins.router, prefix=f"{constant.API_V1_STR}/checkins", tags=["checkins"])
app.include_router(ai.router, prefix=f"{constant.API_V1_STR}/ai", tags=["ai"])
app.include_router(prayers.router, prefix=f"{constant.API_V1_STR}/prayers", tags=["prayers"])
app.include_router(tasks.router, prefix=f"{constant.API_V1_STR}/tasks", tags=["tasks"])
app.include_router(voice.router, prefix=f"{constant.API_V1_STR}/voice", tags=["voice"])


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "accountability_ai.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
