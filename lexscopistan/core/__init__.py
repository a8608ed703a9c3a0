"""
Lexscopistan — Core Module
Container records, container supplies, and storage exceptions.
"""

from .containers import (
    BushelUnit,
    CapacityExceeded,
    ContainerKind,
    ContainerSupply,
    CropContainer,
    MineralContainer,
    Order,
    SupplyExhausted,
    crop_container_supply,
    mineral_container_supply,
)

__all__ = [
    # Contents
    "BushelUnit",
    "Order",

    # Containers
    "ContainerKind",
    "CropContainer",
    "MineralContainer",
    "ContainerSupply",
    "crop_container_supply",
    "mineral_container_supply",

    # Exceptions
    "CapacityExceeded",
    "SupplyExhausted",
]
