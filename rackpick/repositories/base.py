"""
Base Picking Repository
Read-only lookups the pick list report needs from storage
"""
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List

from rackpick.schemas import LineItem, Rack


class PickingRepository(ABC):
    """
    Storage boundary for the pick list report

    Implementations raise RepositoryError for storage failures and
    RackNotFoundError when a product has no main rack.
    """

    @abstractmethod
    def get_line_items(self, order_ids: Iterable[int]) -> Dict[int, List[LineItem]]:
        """
        Fetch the line items of the given orders
        Orders without rows are absent from the result
        """
        pass

    @abstractmethod
    def get_product_name(self, product_id: int) -> str:
        pass

    @abstractmethod
    def get_main_rack(self, product_id: int) -> Rack:
        pass

    @abstractmethod
    def get_secondary_racks(self, product_id: int) -> List[Rack]:
        pass
