"""
Lexscopistan — Skopes Package
Crop stack and gem heap processing pipelines.
"""

from .crop_stack import (
    CropRecord,
    ProcessedCrop,
    YieldProcessor,
    BushelPacker,
    CropStorageResult,
    CropStackSkope,
)
from .gem_heap import (
    MineralStockpile,
    MineralAllocator,
    ContainerMetadata,
    StorageFacility,
    OrderPacker,
    GemHeapSkope,
)

__all__ = [
    # Crops
    'CropRecord', 'ProcessedCrop', 'YieldProcessor', 'BushelPacker',
    'CropStorageResult', 'CropStackSkope',
    # Minerals
    'MineralStockpile', 'MineralAllocator', 'ContainerMetadata',
    'StorageFacility', 'OrderPacker', 'GemHeapSkope',
]
