"""
Lexscopistan — Gem Heap Skope
Draws the gem mine down in 5 kg parcels and packs the orders into
mineral containers recorded in a storage facility.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple
import logging

from ..core.containers import (
    ContainerSupply,
    MineralContainer,
    Order,
    mineral_container_supply,
)
from ..config import MINERAL

logger = logging.getLogger(__name__)


class MineralStockpile:
    """
    The gem mine.

    Holds its own copy of the stock. The only ways in are `products`
    (mineral names, in mine order) and `process` (withdraw one parcel).
    """

    def __init__(self, stock: Mapping[str, int]):
        for mineral, kilograms in stock.items():
            if kilograms < 0:
                raise ValueError(f"{mineral}: stock cannot be negative: {kilograms}")
        self.__stock = dict(stock)

    @property
    def products(self) -> Tuple[str, ...]:
        return tuple(self.__stock)

    def process(self, mineral: str) -> Order:
        """Withdraw up to one parcel (5 kg) of a mineral."""
        if mineral not in self.__stock:
            raise ValueError(f"Unknown mineral: {mineral}")

        amount = min(MINERAL.parcel_kg, self.__stock[mineral])
        self.__stock[mineral] -= amount
        return Order(mineral, amount)

    def __repr__(self) -> str:
        return f"MineralStockpile({', '.join(self.products)})"


class MineralAllocator:
    """Turns the whole stockpile into orders, one mineral at a time."""

    def __init__(self, stockpile: MineralStockpile):
        self.stockpile = stockpile

    def drain(self, mineral: str) -> Iterator[Order]:
        """Withdraw a mineral until a short (or empty) parcel comes back."""
        while True:
            order = self.stockpile.process(mineral)
            if order.amount > 0:
                yield order
            if order.amount != MINERAL.parcel_kg:
                break

    def allocate(self) -> List[Order]:
        orders: List[Order] = []
        for mineral in self.stockpile.products:
            drawn = list(self.drain(mineral))
            logger.debug(f"{mineral}: {len(drawn)} orders, {sum(o.amount for o in drawn)} kg")
            orders.extend(drawn)
        return orders


@dataclass
class ContainerMetadata:
    """What the facility knows about a stored container."""
    contents: Tuple[str, ...]   # Distinct minerals, first-seen order
    order_count: int = 0
    total_kg: int = 0

    @classmethod
    def describe(cls, container: MineralContainer) -> "ContainerMetadata":
        contents = tuple(dict.fromkeys(o.mineral for o in container.orders))
        return cls(contents, container.count, container.total_kg)


@dataclass
class StorageFacility:
    """Mineral containers in the order they were stored, with metadata."""
    records: Dict[MineralContainer, ContainerMetadata] = field(default_factory=dict)
    dropped_orders: List[Order] = field(default_factory=list)

    def store(self, container: MineralContainer) -> ContainerMetadata:
        metadata = ContainerMetadata.describe(container)
        self.records[container] = metadata
        return metadata

    @property
    def size(self) -> int:
        return len(self.records)

    @property
    def containers(self) -> List[MineralContainer]:
        return list(self.records)

    @property
    def dropped_kg(self) -> int:
        return sum(o.amount for o in self.dropped_orders)

    def get(self, container: MineralContainer) -> Optional[ContainerMetadata]:
        return self.records.get(container)

    def items(self):
        return self.records.items()

    def __len__(self) -> int:
        return len(self.records)

    def __contains__(self, container) -> bool:
        return container in self.records


class OrderPacker:
    """
    Packs orders into mineral containers.

    A container is sealed once it holds 565 kg worth of orders. After the
    last container has been used, any further orders are dropped and
    listed on the facility.
    """

    def __init__(self, supply: ContainerSupply):
        self.supply = supply

    def pack(self, orders: Iterable[Order]) -> StorageFacility:
        facility = StorageFacility()
        current = self.supply.next_container()

        for order in orders:
            if current is None:
                facility.dropped_orders.append(order)
                continue

            current.orders.append(order)
            if current.is_full:
                metadata = facility.store(current)
                logger.debug(f"Sealed mineral container {current.id}: {', '.join(metadata.contents)}")
                current = self.supply.next_container()

        # Last container is stored however full it is
        if current is not None and current.orders:
            facility.store(current)

        if facility.dropped_orders:
            logger.warning(f"Mineral supply exhausted after {self.supply.maximum} containers: "
                           f"dropped {len(facility.dropped_orders)} orders ({facility.dropped_kg} kg)")

        return facility


class GemHeapSkope:
    """
    Heap skope: drains a mine and stores the gems.

    Each run draws on a fresh 30-container supply.
    """

    def __init__(self, name: str = "Heap_Skope"):
        self.name = name
        self.orders: List[Order] = []
        self.facility: Optional[StorageFacility] = None

    def run(self, stock: Mapping[str, int]) -> StorageFacility:
        orders = MineralAllocator(MineralStockpile(stock)).allocate()
        facility = OrderPacker(mineral_container_supply()).pack(orders)

        self.orders = orders
        self.facility = facility

        logger.info(f"{self.name}: Packed {len(self.orders)} orders "
                    f"into {self.facility.size} containers")
        return self.facility

    def get_status(self) -> Dict:
        facility = self.facility or StorageFacility()
        orders_by_mineral: Dict[str, int] = {}
        for order in self.orders:
            orders_by_mineral[order.mineral] = orders_by_mineral.get(order.mineral, 0) + 1

        return {
            "name": self.name,
            "orders": len(self.orders),
            "orders_by_mineral": orders_by_mineral,
            "total_kg": sum(o.amount for o in self.orders),
            "containers_used": facility.size,
            "dropped_orders": len(facility.dropped_orders),
            "dropped_kg": facility.dropped_kg,
        }
