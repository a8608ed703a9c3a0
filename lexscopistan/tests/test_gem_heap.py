"""
Tests for the gem heap skope:
- Mineral stockpile withdrawals
- Order allocation
- Order packing into the storage facility
"""

import logging

import pytest

from lexscopistan.config import GEM_MINE
from lexscopistan.core.containers import (
    ContainerKind,
    ContainerSupply,
    Order,
    mineral_container_supply,
)
from lexscopistan.skopes.gem_heap import (
    GemHeapSkope,
    MineralAllocator,
    MineralStockpile,
    OrderPacker,
)


def allocate(stock):
    return MineralAllocator(MineralStockpile(stock)).allocate()


# =============================================================================
# STOCKPILE
# =============================================================================

class TestMineralStockpile:
    """Tests for parcel withdrawals."""

    def test_products_in_mine_order(self):
        stockpile = MineralStockpile(GEM_MINE)
        assert stockpile.products == ("Onyx", "Amethyst", "Bloodstone", "Emerald")

    def test_full_parcel(self):
        stockpile = MineralStockpile({"Onyx": 12})
        assert stockpile.process("Onyx") == Order("Onyx", 5)
        assert stockpile.process("Onyx") == Order("Onyx", 5)
        assert stockpile.process("Onyx") == Order("Onyx", 2)
        assert stockpile.process("Onyx") == Order("Onyx", 0)

    def test_source_mapping_not_touched(self):
        stock = {"Onyx": 10}
        stockpile = MineralStockpile(stock)
        stockpile.process("Onyx")
        assert stock == {"Onyx": 10}

    def test_stock_not_exposed(self):
        stockpile = MineralStockpile({"Onyx": 10})
        assert not hasattr(stockpile, "stock")
        assert not hasattr(stockpile, "_stock")

    def test_unknown_mineral(self):
        with pytest.raises(ValueError):
            MineralStockpile({"Onyx": 10}).process("Ruby")

    def test_negative_stock_rejected(self):
        with pytest.raises(ValueError):
            MineralStockpile({"Onyx": -5})


# =============================================================================
# ALLOCATION
# =============================================================================

class TestMineralAllocator:
    """Tests for draining the mine into orders."""

    def test_onyx_orders(self):
        orders = allocate({"Onyx": 2943})

        assert len(orders) == 589
        assert all(o.amount == 5 for o in orders[:588])
        assert orders[-1] == Order("Onyx", 3)

    @pytest.mark.parametrize("kilograms,count,last", [
        (3958, 792, 3),
        (4010, 802, 5),
        (3850, 770, 5),
        (4, 1, 4),
        (5, 1, 5),
    ])
    def test_order_counts(self, kilograms, count, last):
        orders = allocate({"Gem": kilograms})

        assert len(orders) == count
        assert orders[-1].amount == last
        assert sum(o.amount for o in orders) == kilograms

    def test_empty_mineral_produces_no_orders(self):
        assert allocate({"Onyx": 0, "Emerald": 7}) == [Order("Emerald", 5), Order("Emerald", 2)]

    def test_mine_drained(self):
        stockpile = MineralStockpile(GEM_MINE)
        MineralAllocator(stockpile).allocate()

        for mineral in stockpile.products:
            assert stockpile.process(mineral).amount == 0

    def test_minerals_in_mine_order(self):
        orders = allocate(GEM_MINE)
        minerals = list(dict.fromkeys(o.mineral for o in orders))
        assert minerals == ["Onyx", "Amethyst", "Bloodstone", "Emerald"]
        assert len(orders) == 2953


# =============================================================================
# PACKING
# =============================================================================

class TestOrderPacker:
    """Tests for packing orders into 565 kg containers."""

    def test_static_mine_packing(self):
        facility = OrderPacker(mineral_container_supply()).pack(allocate(GEM_MINE))
        containers = facility.containers

        assert facility.size == 27
        assert [c.id for c in containers] == list(range(1, 28))
        assert all(c.count == 113 for c in containers[:-1])
        assert containers[-1].count == 15
        assert facility.dropped_orders == []

    def test_contents_are_distinct_minerals(self):
        facility = OrderPacker(mineral_container_supply()).pack(allocate(GEM_MINE))

        for container, metadata in facility.items():
            assert len(set(metadata.contents)) == len(metadata.contents)
            assert set(metadata.contents) == {o.mineral for o in container.orders}

        containers = facility.containers
        assert facility.get(containers[0]).contents == ("Onyx",)
        assert facility.get(containers[5]).contents == ("Onyx", "Amethyst")
        assert facility.get(containers[-1]).contents == ("Emerald",)

    def test_partial_parcels_still_fill_container(self):
        orders = [Order("Onyx", 1)] * 113 + [Order("Emerald", 5)]
        facility = OrderPacker(mineral_container_supply()).pack(orders)

        first, second = facility.containers
        assert first.count == 113
        assert facility.get(first).total_kg == 113
        assert facility.get(second).contents == ("Emerald",)

    def test_exact_fill_leaves_no_empty_record(self):
        supply = mineral_container_supply()
        facility = OrderPacker(supply).pack([Order("Onyx", 5)] * 226)

        assert facility.size == 2
        assert supply.issued == 3

    def test_capacity_is_fixed(self):
        with pytest.raises(TypeError):
            OrderPacker(mineral_container_supply(), capacity_kg=100)

    def test_no_orders(self):
        facility = OrderPacker(mineral_container_supply()).pack([])
        assert facility.size == 0

    def test_orders_dropped_when_supply_exhausted(self, caplog):
        orders = allocate({"Onyx": 17000})
        assert len(orders) == 3400

        with caplog.at_level(logging.WARNING):
            facility = OrderPacker(mineral_container_supply()).pack(orders)

        assert facility.size == 30
        assert len(facility.dropped_orders) == 10
        assert facility.dropped_kg == 50
        assert "dropped 10 orders" in caplog.text

    def test_small_supply(self):
        supply = ContainerSupply(ContainerKind.MINERAL, 1)
        facility = OrderPacker(supply).pack([Order("Onyx", 5)] * 120)

        assert facility.size == 1
        assert len(facility.dropped_orders) == 7


class TestGemHeapSkope:
    """Tests for the full heap skope."""

    def test_run_static_mine(self):
        skope = GemHeapSkope()
        facility = skope.run(GEM_MINE)

        assert facility.size == 27
        assert len(skope.orders) == 2953

    def test_status(self):
        skope = GemHeapSkope()
        skope.run(GEM_MINE)
        status = skope.get_status()

        assert status["orders_by_mineral"] == {
            "Onyx": 589, "Amethyst": 792, "Bloodstone": 802, "Emerald": 770,
        }
        assert status["total_kg"] == sum(GEM_MINE.values())
        assert status["containers_used"] == 27
        assert status["dropped_orders"] == 0

    def test_failed_run_keeps_previous_status(self):
        skope = GemHeapSkope()
        skope.run(GEM_MINE)

        with pytest.raises(ValueError):
            skope.run({"Onyx": -5})

        status = skope.get_status()
        assert status["orders"] == 2953
        assert status["containers_used"] == 27
