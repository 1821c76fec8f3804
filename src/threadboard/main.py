# src/threadboard/main.py
"""Main entry point for the Threadboard application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from threadboard.api.graphql import graphql_router
from threadboard.core.logging_config import configure_logging
from threadboard.core.settings import settings
from threadboard.db.session import create_tables

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=f"{settings.app_name} API",
    description="Users, posts and threaded comments over GraphQL",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

app.include_router(graphql_router, prefix="/graphql")


@app.on_event("startup")
async def on_startup() -> None:
    configure_logging()
    logger.info("Using %s storage backend", settings.storage_backend)
    if settings.storage_backend == "sql":
        create_tables()


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "graphql": "/graphql",
        "storage": settings.storage_backend,
    }


def run() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run("threadboard.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()
