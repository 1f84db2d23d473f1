"""
Picking Services
Rack aggregation and pick list rendering
"""
from .aggregator import PickingContext, RackAggregator
from .report_service import PickListReportService
from .reporter import PickListReporter

__all__ = [
    "PickingContext",
    "RackAggregator",
    "PickListReporter",
    "PickListReportService",
]
