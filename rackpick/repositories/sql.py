"""
SQL Picking Repository
Resolves orders, products and racks through a SQLAlchemy session
"""
from typing import Dict, Iterable, List

from pydantic import ValidationError
from sqlalchemy import and_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rackpick.core.exceptions import RackNotFoundError, RepositoryError
from rackpick.core.logging import get_logger
from rackpick.models import OrderProductRec, ProductRackRec, ProductRec, RackRec
from rackpick.schemas import LineItem, Rack
from .base import PickingRepository

logger = get_logger("repository")


class SQLPickingRepository(PickingRepository):
    """
    Picking repository backed by the warehouse tables

    Every SQLAlchemyError is re-raised as RepositoryError.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_line_items(self, order_ids: Iterable[int]) -> Dict[int, List[LineItem]]:
        ids = list(order_ids)
        if not ids:
            return {}

        stmt = (
            select(OrderProductRec)
            .where(OrderProductRec.order_id.in_(ids))
            .order_by(OrderProductRec.order_id, OrderProductRec.product_id)
        )
        try:
            rows = self.db.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to query orders {ids}: {e}") from e

        orders: Dict[int, List[LineItem]] = {}
        for row in rows:
            try:
                item = LineItem(
                    order_id=row.order_id,
                    product_id=row.product_id,
                    quantity=row.quantity
                )
            except ValidationError as e:
                raise RepositoryError(
                    f"Invalid line item row (order {row.order_id}, product {row.product_id}, "
                    f"quantity {row.quantity})"
                ) from e
            orders.setdefault(row.order_id, []).append(item)

        logger.debug(f"Fetched {len(rows)} line items for {len(orders)} of {len(ids)} orders")
        return orders

    def get_product_name(self, product_id: int) -> str:
        stmt = select(ProductRec.product_name).where(ProductRec.product_id == product_id)
        try:
            name = self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to query product {product_id}: {e}") from e

        if name is None:
            raise RepositoryError(f"Product {product_id} not found")
        return name

    def get_main_rack(self, product_id: int) -> Rack:
        stmt = (
            select(RackRec.rack_id, RackRec.rack_name)
            .join(ProductRackRec, ProductRackRec.rack_id == RackRec.rack_id)
            .where(and_(
                ProductRackRec.product_id == product_id,
                ProductRackRec.is_main.is_(True)
            ))
            .order_by(RackRec.rack_id)
            .limit(1)
        )
        try:
            row = self.db.execute(stmt).first()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to query main rack of product {product_id}: {e}") from e

        if row is None:
            raise RackNotFoundError(product_id)
        return Rack(rack_id=row.rack_id, name=row.rack_name)

    def get_secondary_racks(self, product_id: int) -> List[Rack]:
        stmt = (
            select(RackRec.rack_id, RackRec.rack_name)
            .join(ProductRackRec, ProductRackRec.rack_id == RackRec.rack_id)
            .where(and_(
                ProductRackRec.product_id == product_id,
                ProductRackRec.is_main.is_(False)
            ))
            .order_by(RackRec.rack_id)
        )
        try:
            rows = self.db.execute(stmt).all()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to query secondary racks of product {product_id}: {e}") from e

        return [Rack(rack_id=row.rack_id, name=row.rack_name) for row in rows]
