"""SQLAlchemy ORM models for store stock reports."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship

from .base import Base


class StoreStockReportModel(Base):
    """SQLAlchemy ORM model for StoreStockReport table."""

    __tablename__ = "StoreStockReport"

    id = Column(Integer, primary_key=True, autoincrement=True)
    store_id = Column("storeID", Integer, ForeignKey("Store.id"), nullable=False, index=True)
    date = Column(DateTime, nullable=False)

    # Relationship to items
    items = relationship(
        "StoreStockReportItemModel", back_populates="report", cascade="all, delete-orphan"
    )


class StoreStockReportItemModel(Base):
    """SQLAlchemy ORM model for StoreStockReportItem table."""

    __tablename__ = "StoreStockReportItem"

    report_id = Column(
        "reportID",
        Integer,
        ForeignKey("StoreStockReport.id", ondelete="CASCADE"),
        primary_key=True,
    )
    product_id = Column("productID", Integer, ForeignKey("Product.id"), primary_key=True)
    quantity = Column(Integer, nullable=False)

    # Relationships
    report = relationship("StoreStockReportModel", back_populates="items")
    product = relationship("ProductModel")
