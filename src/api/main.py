"""FastAPI application entry point."""

import os
import sys
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Add src to path
# main.py is at /app/src/api/main.py
# src is at /app/src, so we go up 2 levels
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.exception_handlers import setup_exception_handlers
from api.routes import users
from adapter.memory.user_repository import InMemoryUserRepository
from utils.logging import setup_structured_logging

# Set up structured JSON logging
setup_structured_logging(os.getenv("LOG_LEVEL", "INFO"))

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
_project_root = _src_path.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "Users API"
DEFAULT_PORT = 6000


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown logic."""
    logger.info("Service starting", extra={"service": SERVICE_NAME, "version": VERSION})
    yield  # App runs here
    logger.info("Service stopped", extra={"users": app.state.user_repo.count()})


# Create FastAPI app
# Docs routes are off so that every unknown path answers with the 404 contract
app = FastAPI(
    title=SERVICE_NAME,
    description="In-memory user CRUD service",
    version=VERSION,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

# The store lives as long as the process; nothing is persisted
app.state.user_repo = InMemoryUserRepository()

setup_exception_handlers(app)

# Register routes
app.include_router(users.router)


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", DEFAULT_PORT))
    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        access_log=False  # Application logs already cover each request outcome
    )
