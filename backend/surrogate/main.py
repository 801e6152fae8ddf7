"""Main FastAPI application."""

import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from surrogate.config import settings

logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup: Create data directory
    os.makedirs(settings.data_dir, exist_ok=True)
    logger.info("Data directory initialized")
    logger.info(f"  - Data: {settings.data_dir}")
    logger.info(f"  - Model: {settings.llm_model}")
    if not settings.anthropic_api_key:
        logger.info("  - Running in offline mode (no Anthropic API key)")

    yield

    logger.info("Shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Conversational assistant that routes requests to scheduling, docs, email, payment, finance and search agents",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "AI Surrogate Agent API",
        "version": "0.1.0",
        "status": "operational",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "anthropic_configured": bool(settings.anthropic_api_key),
    }


# Import and include routers
from surrogate.api import assistant, chats, events, records

app.include_router(assistant.router, prefix="/api/v1/assistant", tags=["assistant"])
app.include_router(chats.router, prefix="/api/v1/chats", tags=["chats"])
app.include_router(events.router, prefix="/api/v1/events", tags=["events"])
app.include_router(records.router, prefix="/api/v1", tags=["records"])
