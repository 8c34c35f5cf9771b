"""
FastAPI application factory.

Creates and configures the FastAPI application instance.  On startup the
database is initialised, the live session is created and, unless disabled,
a frame loop starts advancing its timer.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.logger import setup_logger
from app.db.init_db import init_db
from app.services.live_session import LiveSession
from app.workout.recorder import SessionRecorder
from app.workout.scheduler import AsyncFrameLoop


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logger(level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)
    init_db()

    live = LiveSession(recorder=SessionRecorder(fallback_effort=settings.DEFAULT_EFFORT_RATING))
    app.state.live_session = live

    frame_loop = None
    if settings.FRAME_LOOP_ENABLED:
        frame_loop = AsyncFrameLoop(live.on_frame, interval=settings.FRAME_INTERVAL_SECONDS)
        frame_loop.start()
    try:
        yield
    finally:
        if frame_loop is not None:
            await frame_loop.stop()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Timed block workouts with per-block progress tracking.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan)

# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "Pre-Seminary Workout API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "workout-api",
        "version": settings.VERSION
    }


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "authors": settings.AUTHORS,
        "project url": settings.PROJECT_URL,
        "session length minutes": settings.SESSION_LENGTH_MINUTES,
    }
