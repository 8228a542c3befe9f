"""Consultation request service"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from . import __version__
from .endpoints import ROUTERS
from .logger import get_logger, setup_sentry
from .settings import settings


logger = get_logger(__name__)

if settings.sentry_dsn:
    setup_sentry(settings.sentry_dsn, "consultation", __version__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    logger.info(f"Starting consultation service v{__version__}")
    yield
    logger.info("Shutting down consultation service")


app = FastAPI(
    title="Consultation",
    description=__doc__,
    version=__version__,
    root_path=settings.root_path,
    root_path_in_servers=False,
    openapi_tags=[{"name": name, "description": doc} for name, (_, doc) in ROUTERS.items()],
    lifespan=lifespan,
)

for router, _ in ROUTERS.values():
    app.include_router(router, prefix="/api")


def run() -> None:
    import uvicorn

    uvicorn.run("consultation.main:app", host=settings.host, port=settings.port, reload=settings.reload)


if __name__ == "__main__":
    run()
