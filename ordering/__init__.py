"""Warehouse ordering: purchase orders from providers to warehouses."""

__version__ = "1.0.0"
