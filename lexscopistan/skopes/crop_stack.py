"""
Lexscopistan — Crop Stack Skope
Processes field crops into bushels and packs them into crop containers.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Union
import logging

from ..core.containers import (
    BushelUnit,
    CapacityExceeded,
    ContainerSupply,
    CropContainer,
    crop_container_supply,
)
from ..config import CROP

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CropRecord:
    """A crop growing in the field."""
    type: str
    plants: int

    @classmethod
    def from_dict(cls, data: Mapping) -> "CropRecord":
        return cls(type=data["type"], plants=data["plants"])


@dataclass(frozen=True)
class ProcessedCrop:
    """Bushels produced from one crop record."""
    type: str
    bushels: int


CropInput = Union[CropRecord, Mapping]


class YieldProcessor:
    """
    Converts raw crops into bushels.

    One bushel for every 22 plants; leftover plants are discarded.
    """

    def process_one(self, crop: CropInput) -> ProcessedCrop:
        record = crop if isinstance(crop, CropRecord) else CropRecord.from_dict(crop)
        if record.plants < 0:
            raise ValueError(f"{record.type}: plant count cannot be negative: {record.plants}")
        return ProcessedCrop(record.type, record.plants // CROP.plants_per_bushel)

    def process(self, crops: Iterable[CropInput]) -> List[ProcessedCrop]:
        """Process every crop, keeping field order."""
        return [self.process_one(crop) for crop in crops]


@dataclass
class CropStorageResult:
    """Containers filled by one packing pass."""
    containers: List[CropContainer] = field(default_factory=list)

    @property
    def sealed(self) -> List[CropContainer]:
        """Containers filled to capacity."""
        return [c for c in self.containers if c.is_full]

    @property
    def partial(self) -> Optional[CropContainer]:
        """Trailing container left partly filled, if any."""
        if self.containers and not self.containers[-1].is_full:
            return self.containers[-1]
        return None

    @property
    def total_bushels(self) -> int:
        return sum(c.count for c in self.containers)

    def bushels_by_type(self) -> Dict[str, int]:
        totals: Dict[str, int] = {}
        for container in self.containers:
            for bushel in container.bushels:
                totals[bushel.type] = totals.get(bushel.type, 0) + 1
        return totals


class BushelPacker:
    """
    Packs bushels into crop containers, 21 per container.

    Full containers are sealed as soon as they reach capacity and replaced
    with the next one from the supply. A partly filled container left at the
    end is kept as the last container.
    """

    def __init__(self, supply: ContainerSupply):
        self.supply = supply

    def check_capacity(self, processed: List[ProcessedCrop]):
        """Raise CapacityExceeded if the supply cannot hold every bushel."""
        demand = sum(p.bushels for p in processed)
        available = self.supply.remaining * CROP.bushels_per_container
        if demand > available:
            raise CapacityExceeded(
                f"{demand} bushels need {-(-demand // CROP.bushels_per_container)} containers, "
                f"only {self.supply.remaining} available ({available} bushels)"
            )

    def pack(self, processed: Iterable[ProcessedCrop]) -> CropStorageResult:
        processed = list(processed)
        self.check_capacity(processed)

        result = CropStorageResult()
        current = self.supply.next_container()

        for crop in processed:
            for _ in range(crop.bushels):
                current.bushels.append(BushelUnit(crop.type))

                if current.is_full:
                    result.containers.append(current)
                    logger.debug(f"Sealed crop container {current.id}")
                    current = self.supply.next_container()

        if current is not None and current.count > 0:
            result.containers.append(current)
            logger.debug(f"Sealed partial crop container {current.id} ({current.count} bushels)")

        return result


class CropStackSkope:
    """
    Stack skope: processes a field and stores the bushels.

    Each run draws on a fresh 10-container supply.
    """

    def __init__(self, name: str = "Stack_Skope"):
        self.name = name
        self.processor = YieldProcessor()
        self.processed: List[ProcessedCrop] = []
        self.storage: Optional[CropStorageResult] = None

    def run(self, crops: Iterable[CropInput]) -> CropStorageResult:
        processed = self.processor.process(crops)
        storage = BushelPacker(crop_container_supply()).pack(processed)

        self.processed = processed
        self.storage = storage

        logger.info(f"{self.name}: Stored {self.storage.total_bushels} bushels "
                    f"in {len(self.storage.containers)} containers")
        return self.storage

    def get_status(self) -> Dict:
        storage = self.storage or CropStorageResult()
        partial = storage.partial
        return {
            "name": self.name,
            "crops_processed": len(self.processed),
            "bushels_produced": sum(p.bushels for p in self.processed),
            "containers_used": len(storage.containers),
            "containers_sealed": len(storage.sealed),
            "partial_container_bushels": partial.count if partial else 0,
            "bushels_by_type": storage.bushels_by_type(),
        }
