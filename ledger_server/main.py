from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ledger_server import __version__
from ledger_server.api import create_api_router
from ledger_server.core.config import Settings, get_settings
from ledger_server.core.container import ApplicationContainer
from ledger_server.core.logging import configure_logging
from ledger_server.schemas import HealthResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = ApplicationContainer.from_settings(app.state.settings)
    await container.startup()
    app.state.container = container
    app.state.database = container.database
    try:
        yield
    finally:
        await container.shutdown()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        description="Session-scoped personal finance ledger",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(version=__version__)

    return app


app = create_app()
