"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from . import __version__
from .api.router import router
from .config import settings
from .utils.logging import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    yield


app = FastAPI(
    title="buildhooks",
    description="Turns version-control webhooks into CI build triggers",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "buildhooks.main:app",
        host=settings.host,
        port=settings.port,
    )
