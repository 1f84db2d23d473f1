"""
Rack Pick List SQLAlchemy Models
Database models for the warehouse schema
"""

# Import all models to ensure they are registered with SQLAlchemy
from .warehouse import OrderProductRec, ProductRackRec, ProductRec, RackRec

__all__ = [
    "RackRec",
    "ProductRec",
    "ProductRackRec",
    "OrderProductRec",
]
