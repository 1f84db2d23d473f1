"""
Picking Repositories
Storage boundary for the pick list report
"""
from .base import PickingRepository
from .sql import SQLPickingRepository

__all__ = ["PickingRepository", "SQLPickingRepository"]
