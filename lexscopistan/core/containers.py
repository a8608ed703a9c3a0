"""
Lexscopistan — Storage Containers
Container records and the bounded supplies that issue them.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union
from enum import Enum
import logging

from ..config import CROP, MINERAL

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================

class CapacityExceeded(Exception):
    """More units than the container supply can ever hold."""
    pass


class SupplyExhausted(Exception):
    """A container was requested after the supply ran out."""
    pass


class ContainerKind(Enum):
    """Kinds of storage container."""
    CROP = "Crop"
    MINERAL = "Mineral"


# =============================================================================
# CONTENTS
# =============================================================================

@dataclass(frozen=True)
class BushelUnit:
    """One bushel of a processed crop."""
    type: str


@dataclass(frozen=True)
class Order:
    """One parcel withdrawn from the mine (0-5 kg)."""
    mineral: str
    amount: int


# =============================================================================
# CONTAINERS
# =============================================================================

@dataclass(eq=False)
class CropContainer:
    """A crop storage container. Holds up to 21 bushels."""
    id: int
    bushels: List[BushelUnit] = field(default_factory=list)
    kind: ContainerKind = ContainerKind.CROP

    @property
    def count(self) -> int:
        return len(self.bushels)

    @property
    def is_full(self) -> bool:
        return self.count >= CROP.bushels_per_container

    def __repr__(self) -> str:
        return f"CropContainer({self.id}: {self.count}/{CROP.bushels_per_container} bushels)"


@dataclass(eq=False)
class MineralContainer:
    """
    A mineral storage container.

    Capacity is measured as orders x parcel weight, so a container is full
    at 113 orders (565 kg) even if some orders are partial parcels.
    """
    id: int
    orders: List[Order] = field(default_factory=list)
    kind: ContainerKind = ContainerKind.MINERAL

    @property
    def count(self) -> int:
        return len(self.orders)

    @property
    def weight_kg(self) -> int:
        """Capacity weight (orders x 5 kg)."""
        return self.count * MINERAL.parcel_kg

    @property
    def total_kg(self) -> int:
        """Actual mineral weight held."""
        return sum(o.amount for o in self.orders)

    @property
    def is_full(self) -> bool:
        return self.weight_kg >= MINERAL.container_capacity_kg

    def __repr__(self) -> str:
        return f"MineralContainer({self.id}: {self.weight_kg}/{MINERAL.container_capacity_kg} kg)"


Container = Union[CropContainer, MineralContainer]


# =============================================================================
# CONTAINER SUPPLY
# =============================================================================

class ContainerSupply:
    """
    Bounded, single-use supply of empty containers.

    Issues containers on demand with ids 1..maximum. Once the maximum is
    reached the supply is exhausted for good; there is no reset.

        supply = ContainerSupply(ContainerKind.CROP, 10)
        supply.next_container()   # CropContainer(1: 0/21 bushels)
        supply.next_container()   # CropContainer(2: 0/21 bushels)
    """

    def __init__(self, kind: ContainerKind, maximum: int):
        if maximum < 0:
            raise ValueError(f"Container maximum cannot be negative: {maximum}")
        self.kind = kind
        self.maximum = maximum
        self._issued = 0

    @property
    def issued(self) -> int:
        return self._issued

    @property
    def remaining(self) -> int:
        return self.maximum - self._issued

    @property
    def exhausted(self) -> bool:
        return self._issued >= self.maximum

    def next_container(self) -> Optional[Container]:
        """Issue the next container, or None once the supply is exhausted."""
        if self.exhausted:
            return None

        self._issued += 1
        if self.kind == ContainerKind.CROP:
            container = CropContainer(self._issued)
        else:
            container = MineralContainer(self._issued)

        logger.debug(f"{self.kind.value} supply: issued container {self._issued}/{self.maximum}")
        return container

    def take(self) -> Container:
        """Issue the next container, raising SupplyExhausted if none are left."""
        container = self.next_container()
        if container is None:
            raise SupplyExhausted(
                f"All {self.maximum} {self.kind.value.lower()} containers have been issued"
            )
        return container

    def __iter__(self):
        return self

    def __next__(self) -> Container:
        container = self.next_container()
        if container is None:
            raise StopIteration
        return container

    def __repr__(self) -> str:
        return f"ContainerSupply({self.kind.value}: {self._issued}/{self.maximum} issued)"


def crop_container_supply() -> ContainerSupply:
    """Supply for a stack skope (10 crop containers)."""
    return ContainerSupply(ContainerKind.CROP, CROP.max_containers)


def mineral_container_supply() -> ContainerSupply:
    """Supply for a heap skope (30 mineral containers)."""
    return ContainerSupply(ContainerKind.MINERAL, MINERAL.max_containers)
