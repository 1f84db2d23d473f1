"""
Pick List Reporter
Renders rack-grouped pick entries as plain text
"""
from typing import Dict, List, TextIO

from rackpick.schemas import PickEntry

REPORT_BANNER = "=+=+=+="
RACK_HEADER = "===Rack {name}"
PRODUCT_LINE = "{name} (id={product_id})"
ORDER_LINE = "order {order_id}, {quantity} pcs"
SECONDARY_LINE = "extra racks: {racks}"


class PickListReporter:
    """
    Deterministic text rendering of the pick list

    Racks are listed in ascending ordinal order of their names; entries keep
    the order the aggregator produced.
    """

    def sorted_rack_names(self, racks: Dict[str, List[PickEntry]]) -> List[str]:
        return sorted(racks)

    def render_entry(self, entry: PickEntry) -> List[str]:
        lines = [
            PRODUCT_LINE.format(name=entry.product.name, product_id=entry.product.product_id),
            ORDER_LINE.format(order_id=entry.order_id, quantity=entry.quantity),
        ]
        if entry.secondary_racks:
            lines.append(SECONDARY_LINE.format(racks=", ".join(entry.secondary_racks)))
        lines.append("")
        return lines

    def render(self, racks: Dict[str, List[PickEntry]]) -> str:
        lines = [REPORT_BANNER]
        for rack_name in self.sorted_rack_names(racks):
            lines.append(RACK_HEADER.format(name=rack_name))
            for entry in racks[rack_name]:
                lines.extend(self.render_entry(entry))
        return "\n".join(lines) + "\n"

    def write(self, racks: Dict[str, List[PickEntry]], stream: TextIO) -> None:
        stream.write(self.render(racks))
        stream.flush()
