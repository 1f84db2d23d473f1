"""
Rack Aggregation Service
Groups order line items under the rack they are picked from
"""
from typing import Dict, Iterable, List

from rackpick.core.logging import get_logger
from rackpick.repositories import PickingRepository
from rackpick.schemas import LineItem, PickEntry, Product, Rack

logger = get_logger("picking.aggregator")


class PickingContext:
    """Lookups memoized for the duration of one report run"""

    def __init__(self):
        self.product_names: Dict[int, str] = {}
        self.main_racks: Dict[int, Rack] = {}
        self.secondary_racks: Dict[int, List[Rack]] = {}


class RackAggregator:
    """
    Resolves line items to racks and buckets them by rack name

    Each instance owns its own PickingContext, so separate runs never
    share cached lookups. Errors from the repository propagate unchanged.
    """

    def __init__(self, repository: PickingRepository):
        self.repository = repository
        self.context = PickingContext()

    def resolve_orders(self, order_ids: Iterable[int]) -> Dict[int, List[LineItem]]:
        """
        Fetch line items for every requested order
        An order without rows maps to an empty list
        """
        requested = sorted(set(order_ids))
        fetched = self.repository.get_line_items(requested)

        orders: Dict[int, List[LineItem]] = {}
        for order_id in requested:
            items = list(fetched.get(order_id, []))
            if not items:
                logger.warning(f"Order {order_id} has no line items")
            orders[order_id] = items
        return orders

    def resolve_product_name(self, product_id: int) -> str:
        names = self.context.product_names
        if product_id not in names:
            logger.debug(f"Looking up name of product {product_id}")
            names[product_id] = self.repository.get_product_name(product_id)
        return names[product_id]

    def resolve_main_rack(self, product_id: int) -> Rack:
        """Raises RackNotFoundError when the product has no main rack"""
        racks = self.context.main_racks
        if product_id not in racks:
            logger.debug(f"Looking up main rack of product {product_id}")
            racks[product_id] = self.repository.get_main_rack(product_id)
        return racks[product_id]

    def resolve_secondary_racks(self, product_id: int) -> List[Rack]:
        racks = self.context.secondary_racks
        if product_id not in racks:
            logger.debug(f"Looking up secondary racks of product {product_id}")
            racks[product_id] = list(self.repository.get_secondary_racks(product_id))
        return racks[product_id]

    def group_by_rack(self, orders: Dict[int, List[LineItem]]) -> Dict[str, List[PickEntry]]:
        """
        Bucket every line item under its main rack name

        Orders are visited in ascending ID order and items in fetched order,
        which fixes the order of entries inside each bucket. Racks that
        share a name end up in the same bucket.
        """
        racks: Dict[str, List[PickEntry]] = {}

        for order_id in sorted(orders):
            for item in orders[order_id]:
                product = Product(
                    product_id=item.product_id,
                    name=self.resolve_product_name(item.product_id)
                )
                main_rack = self.resolve_main_rack(item.product_id)
                secondary = self.resolve_secondary_racks(item.product_id)

                entry = PickEntry(
                    order_id=item.order_id,
                    product=product,
                    quantity=item.quantity,
                    secondary_racks=[rack.name for rack in secondary]
                )
                racks.setdefault(main_rack.name, []).append(entry)

        logger.debug(f"Grouped {sum(len(v) for v in racks.values())} entries into {len(racks)} racks")
        return racks

    def aggregate(self, order_ids: Iterable[int]) -> Dict[str, List[PickEntry]]:
        """Resolve the orders and group their items by rack"""
        return self.group_by_rack(self.resolve_orders(order_ids))
