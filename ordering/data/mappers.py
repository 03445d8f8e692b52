"""Static mappers for domain entities ↔ database models."""

from decimal import Decimal
from typing import Type

from ordering.domain.entities import (
    Address,
    OrderHeader,
    OrderItem,
    OrderRevision,
    OrderSummary,
    Product,
    Provider,
    Store,
    StoreStockReport,
    StoreStockReportItem,
    User,
    Warehouse,
)
from ordering.domain.enums import OrderStatus

from .models import (
    AddressModel,
    ProductModel,
    ProviderModel,
    StoreModel,
    StoreStockReportItemModel,
    StoreStockReportModel,
    WarehouseModel,
    WarehouseOrderItemModel,
    WarehouseOrderModel,
    WarehouseOrderRevisionModel,
)


def _decimal(value) -> Decimal:
    return Decimal(str(value))


class ProductMapper:
    """Static mapper for Product ↔ ProductModel transformation."""

    @staticmethod
    def to_domain(model: ProductModel) -> Product:
        return Product(
            id=model.id,
            name=model.name,
            weight=_decimal(model.weight),
            price=_decimal(model.price),
        )

    @staticmethod
    def to_persistence(entity: Product) -> ProductModel:
        return ProductModel(
            id=entity.id,
            name=entity.name,
            weight=entity.weight,
            price=entity.price,
        )


class AddressMapper:
    """Static mapper for Address ↔ AddressModel transformation."""

    @staticmethod
    def to_domain(model: AddressModel) -> Address:
        return Address(
            id=model.id,
            street=model.street,
            city=model.city,
            zip_code=model.zip_code,
            country=model.country,
        )

    @staticmethod
    def to_persistence(entity: Address) -> AddressModel:
        return AddressModel(
            id=entity.id,
            street=entity.street,
            city=entity.city,
            zip_code=entity.zip_code,
            country=entity.country,
        )


class ProviderMapper:
    """Static mapper for Provider ↔ ProviderModel transformation."""

    @staticmethod
    def to_domain(model: ProviderModel) -> Provider:
        return Provider(
            id=model.id,
            name=model.name,
            email=model.email,
            address_id=model.address_id,
        )


class UserMapper:
    """Static mapper for Store/Warehouse ↔ StoreModel/WarehouseModel."""

    @staticmethod
    def model_class_for(user: User) -> Type:
        """Pick the table a user lives in.

        Raises:
            TypeError: If the user is neither a Store nor a Warehouse
        """
        if isinstance(user, Store):
            return StoreModel
        if isinstance(user, Warehouse):
            return WarehouseModel
        raise TypeError(f"Unsupported user type: {type(user).__name__}")

    @staticmethod
    def to_domain(model, address: Address = None) -> User:
        user_class = Store if isinstance(model, StoreModel) else Warehouse
        return user_class(
            id=model.id,
            name=model.name,
            email=model.email,
            password=model.password,
            address=address,
        )

    @staticmethod
    def to_persistence(entity: User, address_id: int):
        model_class = UserMapper.model_class_for(entity)
        return model_class(
            name=entity.name,
            email=entity.email,
            password=entity.password,
            address_id=address_id,
        )


class OrderItemMapper:
    """Static mapper for OrderItem ↔ WarehouseOrderItemModel transformation."""

    @staticmethod
    def to_domain(model: WarehouseOrderItemModel, product: Product) -> OrderItem:
        return OrderItem(
            quantity=model.quantity,
            unit_price=_decimal(model.unit_price),
            product=product,
        )

    @staticmethod
    def to_persistence(entity: OrderItem, order_id: int) -> WarehouseOrderItemModel:
        return WarehouseOrderItemModel(
            order_id=order_id,
            product_id=entity.product.id,
            quantity=entity.quantity,
            unit_price=entity.unit_price,
        )


class OrderRevisionMapper:
    """Static mapper for OrderRevision ↔ WarehouseOrderRevisionModel transformation."""

    @staticmethod
    def to_domain(model: WarehouseOrderRevisionModel) -> OrderRevision:
        return OrderRevision(
            id=model.id,
            order_id=model.order_id,
            date=model.date,
            note=model.note,
            status=OrderStatus[model.status],
        )

    @staticmethod
    def to_persistence(entity: OrderRevision, order_id: int) -> WarehouseOrderRevisionModel:
        return WarehouseOrderRevisionModel(
            order_id=order_id,
            status=entity.status.name,
            date=entity.date,
            note=entity.note,
        )


class OrderMapper:
    """Static mapper for order headers ↔ WarehouseOrderModel.

    References (warehouse, provider) are resolved by the repository and
    passed in, so the mapper never touches the session.
    """

    @staticmethod
    def to_summary(
        model: WarehouseOrderModel,
        warehouse: Warehouse,
        provider: Provider,
    ) -> OrderSummary:
        return OrderSummary(
            id=model.id,
            date=model.date,
            status=OrderStatus[model.status],
            warehouse=warehouse,
            provider=provider,
        )

    @staticmethod
    def to_persistence(entity: OrderHeader) -> WarehouseOrderModel:
        return WarehouseOrderModel(
            provider_id=entity.provider.id,
            warehouse_id=entity.warehouse.id,
            date=entity.date,
            status=entity.status.name,
        )


class StockReportMapper:
    """Static mapper for StoreStockReport ↔ StoreStockReportModel (with nested items)."""

    @staticmethod
    def to_domain(model: StoreStockReportModel, store: Store) -> StoreStockReport:
        items = [
            StoreStockReportItem(
                product=ProductMapper.to_domain(item_model.product),
                quantity=item_model.quantity,
            )
            for item_model in model.items
        ]
        return StoreStockReport(id=model.id, store=store, date=model.date, items=items)

    @staticmethod
    def to_persistence(entity: StoreStockReport) -> StoreStockReportModel:
        report_model = StoreStockReportModel(store_id=entity.store.id, date=entity.date)
        report_model.items = [
            StoreStockReportItemModel(product_id=item.product.id, quantity=item.quantity)
            for item in entity.items
        ]
        return report_model
