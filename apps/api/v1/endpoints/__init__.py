"""API v1 endpoint routers."""

from . import catalog, orders

__all__ = ["catalog", "orders"]
