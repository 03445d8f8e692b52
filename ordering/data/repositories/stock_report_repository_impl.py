"""SQLAlchemy implementation of StoreStockReportRepository."""
import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ordering.domain.entities import Store, StoreStockReport
from ordering.domain.exceptions import DataAccessError
from ordering.domain.repositories import StoreStockReportRepository

from ..errors import translate_errors
from ..mappers import StockReportMapper
from ..models import StoreStockReportItemModel, StoreStockReportModel


logger = logging.getLogger(__name__)


class SqlAlchemyStoreStockReportRepository(StoreStockReportRepository):
    """Stock reports are loaded with items and products eagerly."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, report: StoreStockReport) -> int:
        """
        Insert a report header together with its items.

        Returns:
            Generated report id
        """
        if report.store.id is None:
            raise DataAccessError("Store must be persisted before reporting its stock")

        logger.info(f"Creating stock report for store: {report.store.id}")

        with translate_errors(f"Create stock report for store {report.store.id}"):
            report_model = StockReportMapper.to_persistence(report)
            self._session.add(report_model)
            await self._session.flush()

        report.id = report_model.id
        logger.info(f"✅ Created stock report: {report_model.id}")
        return report_model.id

    async def get_reports_by_store(self, store: Store) -> List[StoreStockReport]:
        """
        Find the stock reports of a store, newest first.

        Args:
            store: Store whose reports to load (reused for every report)
        """
        logger.info(f"Finding stock reports for store: {store.id}")

        with translate_errors(f"Select stock reports of store {store.id}"):
            result = await self._session.execute(
                select(StoreStockReportModel)
                .options(
                    selectinload(StoreStockReportModel.items)
                    .selectinload(StoreStockReportItemModel.product)
                )
                .where(StoreStockReportModel.store_id == store.id)
                .order_by(StoreStockReportModel.date.desc(), StoreStockReportModel.id.desc())
            )
            report_models = result.scalars().all()

        reports = [StockReportMapper.to_domain(model, store) for model in report_models]

        logger.info(f"✅ Found {len(reports)} stock reports for store {store.id}")
        return reports
