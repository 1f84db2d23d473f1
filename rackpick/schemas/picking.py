"""Pick List Schemas"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class LineItem(BaseModel):
    """One product line of an order"""
    model_config = ConfigDict(frozen=True)

    order_id: int
    product_id: int
    quantity: int = Field(..., gt=0)


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: int
    name: str


class Rack(BaseModel):
    model_config = ConfigDict(frozen=True)

    rack_id: int
    name: str


class PickEntry(BaseModel):
    """
    Rendering-ready pick line

    Grouped under the name of the product's main rack
    """
    model_config = ConfigDict(frozen=True)

    order_id: int
    product: Product
    quantity: int = Field(..., gt=0)
    secondary_racks: List[str] = Field(default_factory=list)
