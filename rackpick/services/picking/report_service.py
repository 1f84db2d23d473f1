"""
Pick List Report Service
Drives repository lookups, rack aggregation and rendering for one run
"""
from typing import Dict, Iterable, List, Optional, TextIO

from rackpick.core.logging import get_logger
from rackpick.repositories import PickingRepository
from rackpick.schemas import PickEntry
from rackpick.services.picking.aggregator import RackAggregator
from rackpick.services.picking.reporter import PickListReporter

logger = get_logger("picking.report")


class PickListReportService:
    """
    Generates the rack-grouped pick list for a set of orders

    The report is written only after every line item resolved, so a
    failure leaves nothing half-written.
    """

    def __init__(self, repository: PickingRepository, reporter: Optional[PickListReporter] = None):
        self.repository = repository
        self.reporter = reporter or PickListReporter()

    def build(self, order_ids: Iterable[int]) -> Dict[str, List[PickEntry]]:
        """Aggregate the orders with a fresh per-run context"""
        aggregator = RackAggregator(self.repository)
        racks = aggregator.aggregate(order_ids)

        logger.info(
            f"Pick list ready: {sum(len(entries) for entries in racks.values())} entries "
            f"across {len(racks)} racks"
        )
        return racks

    def write(self, order_ids: Iterable[int], stream: TextIO) -> None:
        racks = self.build(order_ids)
        self.reporter.write(racks, stream)
