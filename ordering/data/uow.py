"""Unit of Work pattern for atomic transactions."""
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ordering.domain.exceptions import DataAccessError

from .repositories import (
    SqlAlchemyProductRepository,
    SqlAlchemyProviderRepository,
    SqlAlchemyStoreRepository,
    SqlAlchemyStoreStockReportRepository,
    SqlAlchemyUserRepository,
    SqlAlchemyWarehouseOrderRepository,
    SqlAlchemyWarehouseRepository,
)


logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Atomic commit/rollback of all repository operations
    3. Lazy initialization of repositories over one shared session

    Usage:
        async with UnitOfWork(session_factory) as uow:
            order_id = await uow.orders.create(order)
            await uow.orders.insert_order_items(order.items, order_id)
            await uow.commit()
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

        # Lazy-loaded repositories
        self._orders: Optional[SqlAlchemyWarehouseOrderRepository] = None
        self._warehouses: Optional[SqlAlchemyWarehouseRepository] = None
        self._providers: Optional[SqlAlchemyProviderRepository] = None
        self._products: Optional[SqlAlchemyProductRepository] = None
        self._stores: Optional[SqlAlchemyStoreRepository] = None
        self._users: Optional[SqlAlchemyUserRepository] = None
        self._stock_reports: Optional[SqlAlchemyStoreStockReportRepository] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception, then close the session."""
        try:
            if exc_type is not None:
                logger.error(f"Transaction failed: {exc_val}")
                await self._session.rollback()
        finally:
            await self._session.close()
            self._session = None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def warehouses(self) -> SqlAlchemyWarehouseRepository:
        if self._warehouses is None:
            self._warehouses = SqlAlchemyWarehouseRepository(self.session)
        return self._warehouses

    @property
    def providers(self) -> SqlAlchemyProviderRepository:
        if self._providers is None:
            self._providers = SqlAlchemyProviderRepository(self.session)
        return self._providers

    @property
    def products(self) -> SqlAlchemyProductRepository:
        if self._products is None:
            self._products = SqlAlchemyProductRepository(self.session)
        return self._products

    @property
    def stores(self) -> SqlAlchemyStoreRepository:
        if self._stores is None:
            self._stores = SqlAlchemyStoreRepository(self.session)
        return self._stores

    @property
    def users(self) -> SqlAlchemyUserRepository:
        if self._users is None:
            self._users = SqlAlchemyUserRepository(self.session)
        return self._users

    @property
    def orders(self) -> SqlAlchemyWarehouseOrderRepository:
        """Lazy-load order repository (wired to the warehouse/provider repositories)."""
        if self._orders is None:
            self._orders = SqlAlchemyWarehouseOrderRepository(
                self.session,
                warehouses=self.warehouses,
                providers=self.providers,
            )
        return self._orders

    @property
    def stock_reports(self) -> SqlAlchemyStoreStockReportRepository:
        if self._stock_reports is None:
            self._stock_reports = SqlAlchemyStoreStockReportRepository(self.session)
        return self._stock_reports

    async def commit(self) -> None:
        """Commit all pending changes."""
        try:
            await self.session.commit()
            logger.info("✅ Transaction committed")
        except SQLAlchemyError as e:
            logger.error(f"❌ Commit failed: {e}")
            await self.rollback()
            raise DataAccessError(f"Commit failed: {e}") from e

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        await self.session.rollback()
        logger.warning("Transaction rolled back")


def create_uow(session_factory: async_sessionmaker) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory)
