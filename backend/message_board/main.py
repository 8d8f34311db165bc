"""Message Board API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MessageBoardError → JSON or empty-body responses
    - CORS configured from settings (not hardcoded)
    - Connection pool created on startup and disposed on shutdown via lifespan
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from message_board.api.error_handlers import register_error_handlers
from message_board.api.routes import messages
from message_board.config import get_settings
from message_board.infrastructure.database import close_db, init_db
from message_board.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.database_pool_timeout,
        command_timeout=settings.database_command_timeout,
    )
    logger.info(
        f"Message board running at {settings.app_host}:{settings.app_port}",
    )
    yield
    await close_db()
    logger.info("Message board shutting down")


app = FastAPI(title="Message Board", version="1.0.0", lifespan=lifespan)

settings = get_settings()
if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

app.include_router(messages.router)

register_error_handlers(app)
