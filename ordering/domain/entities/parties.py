"""Counterparties and facilities referenced by orders."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Address:
    street: str
    city: str
    zip_code: str
    country: str
    id: Optional[int] = None


@dataclass
class Provider:
    """Supplier that warehouse orders are placed with."""
    name: str
    email: str
    address_id: Optional[int] = None
    id: Optional[int] = None


@dataclass
class User:
    """
    Account holder that owns a location.

    Stores and warehouses are both users; the concrete subclass decides
    which table the account lives in.
    """
    name: str
    email: str
    password: str
    address: Optional[Address] = None
    id: Optional[int] = None


@dataclass
class Warehouse(User):
    """Facility that receives warehouse orders."""


@dataclass
class Store(User):
    """Retail location that receives stock reports."""
