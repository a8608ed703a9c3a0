"""
Lexscopistan — Storage Summary
Renders what the skopes stored: container counts and contents.
"""

from typing import Dict, List, Optional
import json
import logging

from ..skopes.crop_stack import CropStorageResult
from ..skopes.gem_heap import StorageFacility

logger = logging.getLogger(__name__)


class SummaryPresenter:
    """
    Summarises a storage facility (and optionally crop storage).

    The facility part always reports the number of containers used and the
    distinct minerals held by each container.
    """

    def __init__(self, facility: StorageFacility,
                 crop_storage: Optional[CropStorageResult] = None):
        self.facility = facility
        self.crop_storage = crop_storage

    def facility_lines(self) -> List[str]:
        lines = [f"The heap skope used {self.facility.size} storage containers"]
        for container, metadata in self.facility.items():
            lines.append(f"Container {container.id} contents: {', '.join(metadata.contents)}")

        if self.facility.dropped_orders:
            lines.append(f"Dropped {len(self.facility.dropped_orders)} orders "
                         f"({self.facility.dropped_kg} kg): no containers left")
        return lines

    def crop_lines(self) -> List[str]:
        if self.crop_storage is None:
            return []

        lines = [f"The stack skope used {len(self.crop_storage.containers)} storage containers"]
        for container in self.crop_storage.containers:
            types: Dict[str, int] = {}
            for bushel in container.bushels:
                types[bushel.type] = types.get(bushel.type, 0) + 1
            listing = ", ".join(f"{name} x{count}" for name, count in types.items())
            lines.append(f"Container {container.id} ({container.count} bushels): {listing}")
        return lines

    def render_text(self) -> str:
        lines = self.crop_lines()
        if lines:
            lines.append("")
        lines.extend(self.facility_lines())
        return "\n".join(lines)

    def to_dict(self) -> Dict:
        report = {
            "heap_skope": {
                "containers_used": self.facility.size,
                "containers": [
                    {
                        "id": container.id,
                        "contents": list(metadata.contents),
                        "orders": metadata.order_count,
                        "total_kg": metadata.total_kg,
                    }
                    for container, metadata in self.facility.items()
                ],
                "dropped_orders": len(self.facility.dropped_orders),
                "dropped_kg": self.facility.dropped_kg,
            },
        }

        if self.crop_storage is not None:
            report["stack_skope"] = {
                "containers_used": len(self.crop_storage.containers),
                "total_bushels": self.crop_storage.total_bushels,
                "containers": [
                    {"id": c.id, "bushels": c.count, "sealed": c.is_full}
                    for c in self.crop_storage.containers
                ],
            }
        return report

    def export_json(self, filepath: str):
        """Export the summary to a JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.info(f"Summary exported to {filepath}")
