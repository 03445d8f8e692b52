"""
Order Status Enum.

Lifecycle states of a warehouse order.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Warehouse order lifecycle states (persisted by name)."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    FULFILLED = "FULFILLED"
    CANCELLED = "CANCELLED"
