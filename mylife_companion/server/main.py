"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request logging), registers exception handlers, mounts the avatar files and
includes all API routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from mylife_companion import __version__
from mylife_companion.core.database import init_db
from mylife_companion.core.logging_config import get_logger, setup_logging
from mylife_companion.core.monitoring import initialize_logfire

from .api.v1 import (
    auth,
    calendar,
    health,
    health_calendar,
    health_metrics,
    health_records,
    support_chat,
    task_categories,
    tasks,
    users,
)
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

    Creates missing tables (when enabled) and turns on Logfire tracing (when
    configured) before the first request is served.
    """
    # Startup
    try:
        logger.info("Starting up MyLife Companion Server...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    initialize_logfire(app)

    yield

    # Shutdown
    logger.info("Shutting down MyLife Companion Server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    MyLife Companion API

    Backend for the MyLife Companion personal life-management app. It manages
    user accounts, tasks, calendar events, health metrics with their health
    calendar, and an emotional support chat.
    """,
    version=__version__,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

cors_config = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_config.origins,
    allow_credentials=cors_config.allow_credentials,
    allow_methods=cors_config.allow_methods,
    allow_headers=cors_config.allow_headers,
)
app.add_middleware(LogfireMiddleware)

setup_exception_handlers(app)

app.mount(
    settings.avatar.url_prefix,
    StaticFiles(directory=settings.avatar.upload_dir, check_dir=False),
    name="avatars",
)

app.include_router(health.router, tags=["health"])
app.include_router(auth.router, prefix=f"{constant.API_PREFIX}/auth", tags=["auth"])
app.include_router(users.router, prefix=f"{constant.API_PREFIX}/users", tags=["users"])
app.include_router(tasks.router, prefix=f"{constant.API_PREFIX}/tasks", tags=["tasks"])
app.include_router(task_categories.router, prefix=f"{constant.API_PREFIX}/task-categories", tags=["tasks"])
app.include_router(calendar.router, prefix=f"{constant.API_PREFIX}/calendar", tags=["calendar"])
app.include_router(health_records.router, prefix=f"{constant.API_PREFIX}/health", tags=["health records"])
app.include_router(health_metrics.router, prefix=f"{constant.API_PREFIX}/health-metrics", tags=["health metrics"])
app.include_router(health_calendar.router, prefix=f"{constant.API_PREFIX}/health-calendar", tags=["health calendar"])
app.include_router(support_chat.router, prefix=f"{constant.API_PREFIX}/support", tags=["support"])


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    uvicorn.run(
        "mylife_companion.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )
