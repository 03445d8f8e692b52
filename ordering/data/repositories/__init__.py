"""SQLAlchemy repository implementations."""

from .order_repository_impl import SqlAlchemyWarehouseOrderRepository
from .reference_repository_impl import (
    SqlAlchemyProductRepository,
    SqlAlchemyProviderRepository,
    SqlAlchemyStoreRepository,
    SqlAlchemyUserRepository,
    SqlAlchemyWarehouseRepository,
)
from .stock_report_repository_impl import SqlAlchemyStoreStockReportRepository

__all__ = [
    "SqlAlchemyProductRepository",
    "SqlAlchemyProviderRepository",
    "SqlAlchemyStoreRepository",
    "SqlAlchemyStoreStockReportRepository",
    "SqlAlchemyUserRepository",
    "SqlAlchemyWarehouseOrderRepository",
    "SqlAlchemyWarehouseRepository",
]
