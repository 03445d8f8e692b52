"""
SQLAlchemy ORM models for entities referenced by orders.

Table and column names follow the existing schema (camelCase columns).
"""
from sqlalchemy import Column, ForeignKey, Integer, Numeric, String

from .base import Base


class AddressModel(Base):
    """SQLAlchemy ORM model for Address table."""

    __tablename__ = "Address"

    id = Column(Integer, primary_key=True, autoincrement=True)
    street = Column(String(255), nullable=False)
    city = Column(String(100), nullable=False)
    zip_code = Column("zipCode", String(20), nullable=False)
    country = Column(String(100), nullable=False)


class ProviderModel(Base):
    """SQLAlchemy ORM model for Provider table."""

    __tablename__ = "Provider"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    address_id = Column("addressID", Integer, ForeignKey("Address.id"), nullable=True)


class WarehouseModel(Base):
    """SQLAlchemy ORM model for Warehouse table."""

    __tablename__ = "Warehouse"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    password = Column(String(255), nullable=False)
    address_id = Column("addressID", Integer, ForeignKey("Address.id"), nullable=True)


class StoreModel(Base):
    """SQLAlchemy ORM model for Store table."""

    __tablename__ = "Store"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    password = Column(String(255), nullable=False)
    address_id = Column("addressID", Integer, ForeignKey("Address.id"), nullable=True)


class ProductModel(Base):
    """SQLAlchemy ORM model for Product table."""

    __tablename__ = "Product"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    weight = Column(Numeric(10, 3), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)

    def __repr__(self):
        return f"<ProductModel(id={self.id}, name={self.name}, price={self.price})>"
