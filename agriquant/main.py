"""FastAPI application entrypoint — lifespan, routers, middleware."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from redis.asyncio import Redis

from agriquant.config import get_settings
from agriquant.middleware.logging import RequestLoggingMiddleware, configure_structured_logging
from agriquant.routes import chat, crops, logbook, planner, sessions
from agriquant.services.session_service import SessionRegistry

logger = structlog.get_logger("agriquant")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application startup / shutdown lifecycle.

    Startup:
      1. Initialize structured logging
      2. Connect to Redis when logbook persistence is enabled
      3. Create the session registry

    Shutdown:
      1. Close every session (cancels pending chat replies)
      2. Close the Redis connection pool
    """
    configure_structured_logging()
    settings = get_settings()
    logger.info(
        "AgriQuant starting",
        log_level=settings.log_level,
        logbook_persistence_enabled=settings.logbook_persistence_enabled,
    )

    redis: Redis | None = None
    try:
        if settings.logbook_persistence_enabled:
            redis = Redis.from_url(settings.redis_url)
            await redis.ping()
        app.state.redis = redis
        app.state.sessions = SessionRegistry(redis, settings)
    except Exception as exc:
        logger.exception("startup failure", error=str(exc))
        if redis is not None:
            await redis.aclose()
        raise

    yield

    logger.info("AgriQuant shutting down", open_sessions=len(app.state.sessions))
    app.state.sessions.close_all()
    if redis is not None:
        await redis.aclose()


app = FastAPI(
    title="AgriQuant API",
    description=(
        "Hydrogen-rich water advisory API — treatment plan estimation, spray "
        "reminders, a persistent treatment logbook and a keyword-driven HRW "
        "knowledge base assistant."
    ),
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS ────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)


# ── Health check ────────────────────────────────────────────────────────────
@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Basic health check — verifies the API process is alive."""
    return {
        "status": "ok",
        "service": "agriquant",
        "version": "0.1.0",
    }


# ── Router registration ────────────────────────────────────────────────────
app.include_router(sessions.router, prefix="/api/v1")
app.include_router(planner.router, prefix="/api/v1")
app.include_router(logbook.router, prefix="/api/v1")
app.include_router(chat.router, prefix="/api/v1")
app.include_router(crops.router, prefix="/api/v1")
