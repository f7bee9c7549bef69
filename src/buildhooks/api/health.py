"""Health check endpoints."""

from fastapi import APIRouter

from .. import __version__

router = APIRouter(tags=["health"])


@router.get("/")
async def root() -> dict:
    """Service name and version."""
    return {"message": "Welcome to buildhooks!", "version": __version__}


@router.get("/health")
async def health_check() -> dict:
    """Basic health check."""
    return {"status": "ok"}
