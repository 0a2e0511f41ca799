"""
Contacts API Application Entry Point.
"""
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from app.core import jsend
from app.core.config import settings
from app.core.database import Base, engine
from app.core.error_handlers import register_error_handlers
from app.model import Contact  # noqa: F401  registers models on Base.metadata
from app.router.endpoints import api_router
from app.schema.contact import NoDataEnvelope
import logging
import uvicorn

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting application...")

    # Check database connection
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection OK")

        # Create tables directly for local/SQLite use (use Alembic migrations in production)
        if settings.AUTO_CREATE_TABLES:
            Base.metadata.create_all(bind=engine)
            logger.info("Database tables created")
    except SQLAlchemyError as e:
        logger.error(f"Database connection failed: {e}")

    os.makedirs(settings.avatar_dir, exist_ok=True)

    yield

    logger.info("Shutting down...")
    engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="Contacts management API: filter, paginate, create/update with avatar upload, delete.",
    docs_url="/api-docs",
    redoc_url=None,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Error envelopes (404 for unknown routes, 400/405/500 classification)
register_error_handlers(app)


@app.get("/", response_model=NoDataEnvelope, tags=["health"])
async def root():
    return jsend.success()


# Routes
app.include_router(api_router)

# Serve public files (uploaded avatars) at /public/... (directory must exist before mount)
os.makedirs(settings.avatar_dir, exist_ok=True)
app.mount("/public", StaticFiles(directory=settings.PUBLIC_DIR), name="public")


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
