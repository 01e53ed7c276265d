"""Maze Walker API - Main FastAPI Application."""

import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from maze_walker.config import get_settings
from maze_walker.api.routes import maze

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("maze_walker")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request, tagged with a short request id."""

    async def dispatch(self, request: Request, call_next):
        request_id = uuid.uuid4().hex[:8]
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            # Logged here with the id, re-raised for FastAPI to answer 500
            logger.exception(
                f"[{request_id}] {request.method} {request.url.path} failed "
                f"after {(time.perf_counter() - started) * 1000:.1f}ms"
            )
            raise

        logger.info(
            f"[{request_id}] {request.method} {request.url.path} -> "
            f"{response.status_code} in {(time.perf_counter() - started) * 1000:.1f}ms"
        )
        response.headers["X-Request-ID"] = request_id
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Maze Walker API...")

    # Startup: build the one maze this process serves. Grid errors abort startup.
    app.state.maze = settings.build_maze()
    info = app.state.maze.get_maze_info()
    logger.info(
        f"Maze loaded ({info['width']}x{info['height']}, "
        f"start {info['start_position']})"
    )

    yield

    logger.info("Shutting down Maze Walker API...")
    app.state.maze = None


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Walk a maze one key press at a time",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)

# CORS middleware - configured based on environment
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "ok", "version": settings.app_version}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }


# Include routers
app.include_router(maze.router, prefix="/v1")
