"""SQLAlchemy implementations of the reference entity repositories."""
import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ordering.domain.entities import Address, Product, Provider, Store, User, Warehouse
from ordering.domain.exceptions import DataAccessError
from ordering.domain.repositories import (
    ProductRepository,
    ProviderRepository,
    StoreRepository,
    UserRepository,
    WarehouseRepository,
)

from ..errors import translate_errors
from ..mappers import AddressMapper, ProductMapper, ProviderMapper, UserMapper
from ..models import AddressModel, ProductModel, ProviderModel, StoreModel, WarehouseModel


logger = logging.getLogger(__name__)


class SqlAlchemyProviderRepository(ProviderRepository):
    """Provider lookups."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, provider_id: int) -> Optional[Provider]:
        with translate_errors(f"Select provider {provider_id}"):
            result = await self._session.execute(
                select(ProviderModel).where(ProviderModel.id == provider_id)
            )
            model = result.scalar_one_or_none()

        return ProviderMapper.to_domain(model) if model else None


class SqlAlchemyProductRepository(ProductRepository):
    """Product lookups."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        with translate_errors(f"Select product {product_id}"):
            result = await self._session.execute(
                select(ProductModel).where(ProductModel.id == product_id)
            )
            model = result.scalar_one_or_none()

        return ProductMapper.to_domain(model) if model else None

    async def all(self) -> List[Product]:
        with translate_errors("Select products"):
            result = await self._session.execute(select(ProductModel).order_by(ProductModel.id))
            models = result.scalars().all()

        return [ProductMapper.to_domain(model) for model in models]


class _UserLookup:
    """Shared lookup for the two user tables (Store, Warehouse)."""

    model_class = None

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _get_by_id(self, user_id: int):
        table = self.model_class.__tablename__

        with translate_errors(f"Select {table} {user_id}"):
            result = await self._session.execute(
                select(self.model_class).where(self.model_class.id == user_id)
            )
            model = result.scalar_one_or_none()

            if not model:
                return None

            address = None
            if model.address_id is not None:
                address_model = await self._session.get(AddressModel, model.address_id)
                if address_model:
                    address = AddressMapper.to_domain(address_model)

        return UserMapper.to_domain(model, address)


class SqlAlchemyWarehouseRepository(_UserLookup, WarehouseRepository):
    model_class = WarehouseModel

    async def get_by_id(self, warehouse_id: int) -> Optional[Warehouse]:
        return await self._get_by_id(warehouse_id)


class SqlAlchemyStoreRepository(_UserLookup, StoreRepository):
    model_class = StoreModel

    async def get_by_id(self, store_id: int) -> Optional[Store]:
        return await self._get_by_id(store_id)


class SqlAlchemyUserRepository(UserRepository):
    """Creates store and warehouse accounts together with their address."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, user: User) -> int:
        """
        Insert the user's address, then the user row.

        Args:
            user: Store or Warehouse to persist

        Returns:
            Generated user id

        Raises:
            DataAccessError: If the user type is unsupported or storage fails
        """
        try:
            UserMapper.model_class_for(user)
        except TypeError as e:
            raise DataAccessError(str(e)) from e

        logger.info(f"Creating {type(user).__name__}: {user.email}")

        with translate_errors(f"Create {type(user).__name__}"):
            address_id = None
            if user.address is not None:
                address_model = AddressMapper.to_persistence(user.address)
                self._session.add(address_model)
                await self._session.flush()
                address_id = address_model.id
                user.address.id = address_id

            user_model = UserMapper.to_persistence(user, address_id)
            self._session.add(user_model)
            await self._session.flush()

        logger.info(f"✅ Created {type(user).__name__}: {user_model.id}")
        return user_model.id
