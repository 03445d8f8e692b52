"""FastAPI dependencies for dependency injection."""

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ordering.application.services import (
    CatalogService,
    StockReportService,
    WarehouseOrderService,
)
from ordering.data import Database


def get_database(request: Request) -> Database:
    """Get the Database handle stored on the application.

    Returns:
        Database instance
    """
    return request.app.state.database


def get_session_factory(request: Request) -> async_sessionmaker[AsyncSession]:
    """Get SQLAlchemy session factory.

    Returns:
        async_sessionmaker instance
    """
    return get_database(request).session_factory


def get_order_service(request: Request) -> WarehouseOrderService:
    """Get WarehouseOrderService instance.

    Returns:
        WarehouseOrderService instance
    """
    return WarehouseOrderService(get_session_factory(request))


def get_catalog_service(request: Request) -> CatalogService:
    return CatalogService(get_session_factory(request))


def get_stock_report_service(request: Request) -> StockReportService:
    return StockReportService(get_session_factory(request))
