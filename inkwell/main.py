"""
Inkwell API

Serves blog articles to the web front end: listing, detail with rendered
content, and the editor dashboard's preview and create endpoints.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inkwell.config import get_settings
from inkwell.logging_config import setup_logging
from inkwell.middleware import RequestIDMiddleware, SecurityHeadersMiddleware
from inkwell.routers import articles, render
from inkwell.services.article_store import article_count

logger = logging.getLogger(__name__)

settings = get_settings()

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: configure logging and load the article data."""
    setup_logging()
    logger.info("Inkwell API starting with %d articles", article_count())
    yield


app = FastAPI(
    title="Inkwell API",
    description="Blog articles, rendered content, and editor preview",
    version=VERSION,
    lifespan=lifespan,
)

# CORS (innermost of the three)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Security headers, applied to CORS preflight responses too
app.add_middleware(SecurityHeadersMiddleware)

# Request ID (added last, so outermost)
app.add_middleware(RequestIDMiddleware)

# Routers
app.include_router(articles.router, prefix="/api")
app.include_router(render.router, prefix="/api")


@app.get("/api/health")
async def health_check() -> dict[str, Any]:
    """Health check reporting the loaded article count."""
    return {
        "status": "ok",
        "service": "inkwell-api",
        "version": VERSION,
        "articles": article_count(),
    }
