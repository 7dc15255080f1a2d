"""User Service API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Typed errors rendered by error_handlers; everything else non-2xx rewritten
      by ProblemDetailsMiddleware, so every error body is application/problem+json
    - CORS configured from settings (not hardcoded)
    - Database pool created on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: cleaner cleanup
    - ProblemDetailsMiddleware added before CORS so CORS headers land on rewritten responses
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from user_service.api.error_handlers import register_error_handlers
from user_service.api.problem_details import ProblemDetailsMiddleware
from user_service.api.routes import health, users
from user_service.config import get_settings
from user_service.infrastructure.database import close_db, init_db
from user_service.infrastructure.observability import setup_logging

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
    )
    logger.info("User service started")
    yield
    await close_db()
    logger.info("User service shutting down")


app = FastAPI(
    title="User Service API", version="0.1.0", lifespan=lifespan,
)

app.add_middleware(ProblemDetailsMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(users.router)


@app.get("/", response_class=PlainTextResponse)
async def home():
    return "Home"


def run() -> None:
    """Serve the app on the configured host:port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
