"""
Lexscopistan — Configuration
Storage constants for the skopes and the static field/mine tables.
"""

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class CropStorageConfig:
    """Crop stack skope constants."""

    # Lexscopistanian food processors make 1 bushel per 22 plants
    plants_per_bushel: int = 22

    # Stack skopes carry 10 containers of 21 bushels
    bushels_per_container: int = 21
    max_containers: int = 10

    @property
    def total_capacity_bushels(self) -> int:
        """Bushels the whole container supply can hold."""
        return self.bushels_per_container * self.max_containers


@dataclass(frozen=True)
class MineralStorageConfig:
    """Gem heap skope constants."""

    parcel_kg: int = 5               # Largest single withdrawal
    container_capacity_kg: int = 565
    max_containers: int = 30         # Heap skopes carry 30 containers

    @property
    def orders_per_container(self) -> int:
        """Full parcels that fit in one container (565 / 5 = 113)."""
        return self.container_capacity_kg // self.parcel_kg

    @property
    def total_capacity_kg(self) -> int:
        return self.container_capacity_kg * self.max_containers


# Default configurations
CROP = CropStorageConfig()
MINERAL = MineralStorageConfig()


# =============================================================================
# STATIC INPUT TABLES
# =============================================================================

# Field of crops to process, in harvest order
AGRICULTURAL_FIELD: List[Dict] = [
    {"type": "Corn", "plants": 368},
    {"type": "Wheat", "plants": 452},
    {"type": "Kale", "plants": 212},
    {"type": "Turnip", "plants": 84},
]

# Mine stockpile, kilograms per mineral, in extraction order
GEM_MINE: Dict[str, int] = {
    "Onyx": 2943,
    "Amethyst": 3958,
    "Bloodstone": 4010,
    "Emerald": 3850,
}
