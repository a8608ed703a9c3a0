"""
Lexscopistan — Economy Run
Runs the stack skope and the heap skope over the field and the mine.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional
import logging

from .config import AGRICULTURAL_FIELD, GEM_MINE
from .skopes.crop_stack import CropInput, CropStackSkope, CropStorageResult
from .skopes.gem_heap import GemHeapSkope, StorageFacility
from .output.summary import SummaryPresenter

logger = logging.getLogger(__name__)


@dataclass
class EconomyRun:
    """Everything one pass over the field and the mine produced."""
    stack_skope: CropStackSkope
    heap_skope: GemHeapSkope

    @property
    def crop_storage(self) -> CropStorageResult:
        return self.stack_skope.storage

    @property
    def facility(self) -> StorageFacility:
        return self.heap_skope.facility

    def summary(self) -> SummaryPresenter:
        return SummaryPresenter(self.facility, self.crop_storage)

    def get_status(self) -> Dict:
        return {
            "stack_skope": self.stack_skope.get_status(),
            "heap_skope": self.heap_skope.get_status(),
        }


def run_economy(field: Optional[Iterable[CropInput]] = None,
                mine: Optional[Mapping[str, int]] = None) -> EconomyRun:
    """Process a field and a mine (the static tables by default)."""
    stack_skope = CropStackSkope()
    stack_skope.run(AGRICULTURAL_FIELD if field is None else field)

    heap_skope = GemHeapSkope()
    heap_skope.run(GEM_MINE if mine is None else mine)

    return EconomyRun(stack_skope, heap_skope)
