"""Data layer - SQLAlchemy persistence."""

from .database import Database
from .uow import UnitOfWork, create_uow

__all__ = ["Database", "UnitOfWork", "create_uow"]
