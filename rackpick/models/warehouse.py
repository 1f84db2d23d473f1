"""
Rack Pick List Warehouse Models
SQLAlchemy models for racks, products and order lines
"""
from sqlalchemy import Boolean, CheckConstraint, Column, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import relationship

from rackpick.core.database import Base


class RackRec(Base):
    """Rack Record - Storage rack master data"""
    __tablename__ = "rack"

    rack_id = Column(Integer, primary_key=True, autoincrement=False, doc="Rack ID")
    rack_name = Column(Text, nullable=False, doc="Rack display name")

    product_links = relationship("ProductRackRec", back_populates="rack")


class ProductRec(Base):
    """Product Record - Product master data"""
    __tablename__ = "product"

    product_id = Column(Integer, primary_key=True, autoincrement=False, doc="Product ID")
    product_name = Column(Text, nullable=False, doc="Product name")

    rack_links = relationship("ProductRackRec", back_populates="product")


class ProductRackRec(Base):
    """Product Rack Record - Racks holding a product, one of them marked main"""
    __tablename__ = "product_rack"

    product_id = Column(Integer, ForeignKey("product.product_id"), primary_key=True, doc="Product ID")
    rack_id = Column(Integer, ForeignKey("rack.rack_id"), primary_key=True, doc="Rack ID")
    is_main = Column(Boolean, nullable=False, default=False, doc="Main rack flag")

    product = relationship("ProductRec", back_populates="rack_links")
    rack = relationship("RackRec", back_populates="product_links")

    __table_args__ = (
        Index("ix_product_rack_product_main", "product_id", "is_main"),
    )


class OrderProductRec(Base):
    """Order Product Record - One product line of a customer order"""
    __tablename__ = "order_product"

    order_id = Column(Integer, primary_key=True, autoincrement=False, doc="Order ID")
    product_id = Column(Integer, primary_key=True, doc="Product ID")
    quantity = Column(Integer, nullable=False, doc="Quantity to pick")

    __table_args__ = (
        CheckConstraint("quantity > 0", name="positive_quantity"),
    )
