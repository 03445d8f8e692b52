"""FastAPI application main entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ordering import __version__
from ordering.data import Database
from ordering.domain.exceptions import ControlError, DataAccessError
from ordering.infrastructure import configure_logging
from ordering.settings import AppSettings, get_app_settings

from apps.api.v1.endpoints import catalog, orders

logger = logging.getLogger(__name__)


def create_app(
    database: Optional[Database] = None,
    settings: Optional[AppSettings] = None,
) -> FastAPI:
    """Build the API application.

    Args:
        database: Pre-built Database handle (tests pass one in); when
            omitted, one is created from settings at startup
        settings: Application settings (loaded from environment when omitted)

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_app_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_database = getattr(app.state, "database", None) is None
        if owns_database:
            app.state.database = Database(settings.database)
            if settings.database.create_schema:
                await app.state.database.init()
        try:
            yield
        finally:
            if owns_database:
                await app.state.database.close()

    app = FastAPI(
        title=settings.app_name,
        description="Purchase orders from providers to warehouses",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.database = database

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(orders.router, prefix="/api/v1")
    app.include_router(catalog.router, prefix="/api/v1")

    @app.exception_handler(DataAccessError)
    async def data_access_error_handler(request: Request, exc: DataAccessError) -> JSONResponse:
        """Storage failures abort the action and surface their message."""
        logger.error(f"Data access failed on {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": exc.message},
        )

    @app.exception_handler(ControlError)
    async def control_error_handler(request: Request, exc: ControlError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": exc.message},
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        """Handle ValueError exceptions.

        Args:
            request: FastAPI request
            exc: ValueError exception

        Returns:
            JSONResponse with error details
        """
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint.

        Returns:
            Health status
        """
        return {"status": "healthy"}

    return app


def main() -> None:
    import uvicorn
    from dotenv import load_dotenv

    # Load environment variables ONCE before any settings objects are created
    load_dotenv()
    settings = get_app_settings()
    configure_logging(settings.logging)
    uvicorn.run(create_app(settings=settings), host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
