"""
Rack Pick List Services
"""
from .picking import PickListReportService, PickListReporter, RackAggregator

__all__ = ["PickListReportService", "PickListReporter", "RackAggregator"]
