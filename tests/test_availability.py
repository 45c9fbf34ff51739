"""
Availability Aggregator: sums across warehouses
"""
from logistics.services import AvailabilityAggregator, StockAdjustmentService


def test_unstocked_resource_has_zero_available(db, resource_id):
    assert AvailabilityAggregator.total_available(db, resource_id) == 0
    assert AvailabilityAggregator.by_warehouse(db, resource_id) == {}


def test_total_is_sum_over_warehouses(db, resource_id, other_resource_id, warehouses):
    StockAdjustmentService.create_stock(db, resource_id, warehouses[0], 30)
    StockAdjustmentService.create_stock(db, resource_id, warehouses[1], 10)
    StockAdjustmentService.create_stock(db, other_resource_id, warehouses[0], 99)

    assert AvailabilityAggregator.total_available(db, resource_id) == 40
    assert AvailabilityAggregator.by_warehouse(db, resource_id) == {
        warehouses[0]: 30,
        warehouses[1]: 10,
    }


def test_total_counts_empty_rows_as_zero(db, resource_id, warehouses):
    StockAdjustmentService.create_stock(db, resource_id, warehouses[0], 0)

    assert AvailabilityAggregator.total_available(db, resource_id) == 0


def test_total_follows_adjustments(db, resource_id, warehouses):
    stock = StockAdjustmentService.create_stock(db, resource_id, warehouses[0], 30)
    StockAdjustmentService.create_stock(db, resource_id, warehouses[1], 10)

    StockAdjustmentService.adjust(db, stock.id, -25)

    assert AvailabilityAggregator.total_available(db, resource_id) == 15


def test_repeated_reads_are_identical(db, resource_id, warehouses):
    StockAdjustmentService.create_stock(db, resource_id, warehouses[0], 7)
    StockAdjustmentService.create_stock(db, resource_id, warehouses[1], 8)

    first = AvailabilityAggregator.total_available(db, resource_id)
    second = AvailabilityAggregator.total_available(db, resource_id)
    assert first == second == 15
