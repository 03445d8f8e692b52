"""SQLAlchemy ORM models for the warehouse order aggregate."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Numeric, String, Text

from .base import Base


class WarehouseOrderModel(Base):
    """SQLAlchemy ORM model for WarehouseOrder table (order header)."""

    __tablename__ = "WarehouseOrder"

    id = Column(Integer, primary_key=True, autoincrement=True)
    provider_id = Column("providerID", Integer, ForeignKey("Provider.id"), nullable=False)
    warehouse_id = Column("warehouseID", Integer, ForeignKey("Warehouse.id"), nullable=False)
    date = Column(DateTime, nullable=False)
    # Status is stored by symbolic name
    status = Column(String(20), nullable=False)

    __table_args__ = (
        Index("ix_warehouse_order_warehouse", "warehouseID"),
        Index("ix_warehouse_order_provider", "providerID"),
    )

    def __repr__(self):
        return f"<WarehouseOrderModel(id={self.id}, status={self.status})>"


class WarehouseOrderItemModel(Base):
    """SQLAlchemy ORM model for WarehouseOrderItem table.

    Items have no identity of their own; one row per product per order.
    """

    __tablename__ = "WarehouseOrderItem"

    order_id = Column(
        "orderID",
        Integer,
        ForeignKey("WarehouseOrder.id", ondelete="CASCADE"),
        primary_key=True,
    )
    product_id = Column("productID", Integer, ForeignKey("Product.id"), primary_key=True)
    quantity = Column(Integer, nullable=False)
    unit_price = Column("unitPrice", Numeric(10, 2), nullable=False)

    def __repr__(self):
        return (
            f"<WarehouseOrderItemModel(order_id={self.order_id}, "
            f"product_id={self.product_id}, quantity={self.quantity})>"
        )


class WarehouseOrderRevisionModel(Base):
    """SQLAlchemy ORM model for WarehouseOrderRevision table (append-only)."""

    __tablename__ = "WarehouseOrderRevision"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(
        "orderID",
        Integer,
        ForeignKey("WarehouseOrder.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    status = Column(String(20), nullable=False)
    date = Column(DateTime, nullable=False)
    note = Column(Text, nullable=False, default="")
