"""
Lexscopistan — Skope Storage Simulation

Processes the agricultural field into bushels packed in stack skope
containers, and the gem mine into 5 kg orders packed in heap skope
containers.
"""

__version__ = "1.0.0"

from .config import (
    CROP,
    MINERAL,
    AGRICULTURAL_FIELD,
    GEM_MINE,
    CropStorageConfig,
    MineralStorageConfig,
)

from .core import (
    BushelUnit,
    Order,
    ContainerKind,
    CropContainer,
    MineralContainer,
    ContainerSupply,
    CapacityExceeded,
    SupplyExhausted,
)

from .skopes import (
    CropRecord,
    ProcessedCrop,
    YieldProcessor,
    BushelPacker,
    CropStorageResult,
    CropStackSkope,
    MineralStockpile,
    MineralAllocator,
    ContainerMetadata,
    StorageFacility,
    OrderPacker,
    GemHeapSkope,
)

from .economy import EconomyRun, run_economy

__all__ = [
    # Version info
    "__version__",

    # Config
    "CROP",
    "MINERAL",
    "AGRICULTURAL_FIELD",
    "GEM_MINE",
    "CropStorageConfig",
    "MineralStorageConfig",

    # Core
    "BushelUnit",
    "Order",
    "ContainerKind",
    "CropContainer",
    "MineralContainer",
    "ContainerSupply",
    "CapacityExceeded",
    "SupplyExhausted",

    # Skopes
    "CropRecord",
    "ProcessedCrop",
    "YieldProcessor",
    "BushelPacker",
    "CropStorageResult",
    "CropStackSkope",
    "MineralStockpile",
    "MineralAllocator",
    "ContainerMetadata",
    "StorageFacility",
    "OrderPacker",
    "GemHeapSkope",

    # Runs
    "EconomyRun",
    "run_economy",
]
