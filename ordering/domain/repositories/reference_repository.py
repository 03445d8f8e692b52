"""Repository interfaces for entities referenced by orders."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.parties import Provider, Store, User, Warehouse
from ..entities.product import Product
from ..entities.stock_report import StoreStockReport


class ProviderRepository(ABC):

    @abstractmethod
    async def get_by_id(self, provider_id: int) -> Optional[Provider]:
        pass


class WarehouseRepository(ABC):

    @abstractmethod
    async def get_by_id(self, warehouse_id: int) -> Optional[Warehouse]:
        pass


class StoreRepository(ABC):

    @abstractmethod
    async def get_by_id(self, store_id: int) -> Optional[Store]:
        pass


class ProductRepository(ABC):

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Optional[Product]:
        pass

    @abstractmethod
    async def all(self) -> List[Product]:
        pass


class UserRepository(ABC):

    @abstractmethod
    async def create(self, user: User) -> int:
        """Insert the user's address, then the user; returns the user id."""
        pass


class StoreStockReportRepository(ABC):

    @abstractmethod
    async def create(self, report: StoreStockReport) -> int:
        pass

    @abstractmethod
    async def get_reports_by_store(self, store: Store) -> List[StoreStockReport]:
        pass
