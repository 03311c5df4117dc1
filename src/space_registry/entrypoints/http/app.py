from fastapi import FastAPI

from space_registry import __version__
from space_registry.entrypoints.http.exception_handlers import register_exception_handlers
from space_registry.entrypoints.http.routes.health import router as health_router
from space_registry.entrypoints.http.routes.ships import router as ships_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Space Registry API",
        description="""
        Registry of starships: filterable listing and validated writes.

        ## Features
        - List and count ships with filters, ordering and pagination
        - Create, update and delete ships
        - Ratings derived server-side from speed, usage and production year

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(ships_router, prefix="/v1")

    return app


app = build_app()
