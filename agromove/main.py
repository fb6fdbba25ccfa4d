import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agromove import __version__
from agromove.core.config import get_settings
from agromove.infrastructure.database.session import dispose_engine, init_db
from agromove.infrastructure.observability import setup_logging
from agromove.interfaces.http import create_api_router
from agromove.interfaces.http.error_handlers import register_error_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.logging.level, settings.logging.format)
    if settings.creates_schema_on_startup:
        await init_db()
    logger.info("%s %s started (%s)", settings.project_name, __version__, settings.environment)
    yield
    await dispose_engine()
    logger.info("%s shutting down", settings.project_name)


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.project_name,
        description="Wallet ledger and shipment order lifecycle API",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn using the `server` settings section."""
    server = get_settings().server
    uvicorn.run("agromove.main:app", host=server.host, port=server.port, reload=server.reload)


if __name__ == "__main__":
    run()
