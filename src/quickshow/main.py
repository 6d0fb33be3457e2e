"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from quickshow.admin.app import setup_admin
from quickshow.api.routes import health, shows
from quickshow.config import settings
from quickshow.database import engine

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.tmdb_api_key:
        logger.warning("TMDB_API_KEY not set, movie ingestion and now-playing will fail")
    for name in settings.default_admin_settings():
        logger.warning(f"{name.upper()} is still the default value, set it before exposing /admin")
    logger.info("QuickShow API started")

    yield

    # Shutdown: release pooled database connections
    await engine.dispose()
    logger.info("Database engine disposed")


# Create FastAPI app
app = FastAPI(
    title="QuickShow API",
    description="Show scheduling and browsing for a movie ticket booking app",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, shows.request_validation_handler)

# Include routers
app.include_router(health.router)
app.include_router(shows.router, prefix="/api", tags=["shows"])
setup_admin(app)
