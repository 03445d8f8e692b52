"""Application services for products and store stock reports."""
from typing import List, Optional

from sqlalchemy.ext.asyncio import async_sessionmaker

from ordering.application.dtos import ProductDTO, StockReportDTO
from ordering.data.uow import create_uow

from .converters import product_to_dto, stock_report_to_dto


class CatalogService:
    """Read access to the product catalogue."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def list_products(self) -> List[ProductDTO]:
        async with create_uow(self._session_factory) as uow:
            products = await uow.products.all()
            return [product_to_dto(product) for product in products]


class StockReportService:
    """Read access to store stock reports."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def reports_for_store(self, store_id: int) -> Optional[List[StockReportDTO]]:
        """Stock reports of a store, newest first; None if the store is unknown."""
        async with create_uow(self._session_factory) as uow:
            store = await uow.stores.get_by_id(store_id)
            if store is None:
                return None
            reports = await uow.stock_reports.get_reports_by_store(store)
            return [stock_report_to_dto(report) for report in reports]
