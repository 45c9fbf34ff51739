"""
Movement Ledger: append validation and read-only audit queries
"""
import uuid
from datetime import datetime, timedelta, timezone

import pytest

from logistics.core.exceptions import InvalidArgument
from logistics.models import StockMovement, MovementKind
from logistics.services import MovementLedger, StockStore

BASE_TIME = datetime(2026, 3, 1, 8, 0, tzinfo=timezone.utc)


@pytest.fixture
def stock_id(db, resource_id, warehouses):
    stock = StockStore.create(db, resource_id, warehouses[0], 0)
    db.commit()
    return stock.id


def _append(db, stock_id, minutes, **kwargs):
    kwargs.setdefault("kind", MovementKind.ENTRY)
    kwargs.setdefault("quantity", 1)
    movement = MovementLedger.append(
        db, stock_id=stock_id, timestamp=BASE_TIME + timedelta(minutes=minutes), **kwargs
    )
    db.commit()
    return movement.id


def test_append_zero_quantity_is_rejected(db, stock_id):
    with pytest.raises(InvalidArgument):
        MovementLedger.append(db, stock_id, MovementKind.EXIT, 0, BASE_TIME)
    db.rollback()

    assert db.query(StockMovement).count() == 0


def test_append_negative_quantity_is_rejected(db, stock_id):
    with pytest.raises(InvalidArgument):
        MovementLedger.append(db, stock_id, MovementKind.EXIT, -5, BASE_TIME)


def test_append_unknown_kind_is_rejected(db, stock_id):
    with pytest.raises(InvalidArgument):
        MovementLedger.append(db, stock_id, "LOAN", 3, BASE_TIME)


def test_append_reason_too_long_is_rejected(db, stock_id):
    with pytest.raises(InvalidArgument):
        MovementLedger.append(db, stock_id, MovementKind.ENTRY, 3, BASE_TIME, reason="x" * 201)


def test_append_records_all_fields(db, stock_id):
    order_id = uuid.uuid4()
    shipment_id = uuid.uuid4()
    movement = MovementLedger.append(
        db, stock_id, MovementKind.EXIT, 7, BASE_TIME,
        order_id=order_id, shipment_id=shipment_id, reason="Convoy resupply"
    )
    db.commit()

    stored = db.get(StockMovement, movement.id)
    assert stored.stock_id == stock_id
    assert stored.kind == MovementKind.EXIT
    assert stored.quantity == 7
    assert stored.order_id == order_id
    assert stored.shipment_id == shipment_id
    assert stored.reason == "Convoy resupply"


def test_persisted_movement_cannot_be_modified(db, stock_id):
    movement_id = _append(db, stock_id, 0, quantity=4)
    movement = db.get(StockMovement, movement_id)

    movement.quantity = 40
    with pytest.raises(InvalidArgument):
        db.commit()
    db.rollback()

    assert db.get(StockMovement, movement_id).quantity == 4


def test_persisted_movement_cannot_be_deleted(db, stock_id):
    movement_id = _append(db, stock_id, 0)

    db.delete(db.get(StockMovement, movement_id))
    with pytest.raises(InvalidArgument):
        db.commit()
    db.rollback()

    assert db.get(StockMovement, movement_id) is not None


def test_last_n_for_order_returns_newest_first(db, stock_id):
    order_id = uuid.uuid4()
    oldest = _append(db, stock_id, 0, order_id=order_id)
    middle = _append(db, stock_id, 10, order_id=order_id)
    newest = _append(db, stock_id, 20, order_id=order_id)
    _append(db, stock_id, 30, order_id=uuid.uuid4())

    assert [m.id for m in MovementLedger.last_n_for_order(db, order_id, 2)] == [newest, middle]
    assert [m.id for m in MovementLedger.last_n_for_order(db, order_id, 10)] == [newest, middle, oldest]


def test_last_n_for_order_requires_positive_limit(db, stock_id):
    with pytest.raises(InvalidArgument):
        MovementLedger.last_n_for_order(db, uuid.uuid4(), 0)


def test_all_for_shipment(db, stock_id):
    shipment_id = uuid.uuid4()
    first = _append(db, stock_id, 0, shipment_id=shipment_id)
    second = _append(db, stock_id, 5, shipment_id=shipment_id)
    _append(db, stock_id, 6)

    assert [m.id for m in MovementLedger.all_for_shipment(db, shipment_id)] == [second, first]
    assert MovementLedger.all_for_shipment(db, uuid.uuid4()) == []


def test_since_and_count_since(db, stock_id):
    _append(db, stock_id, 0)
    recent = _append(db, stock_id, 60)
    latest = _append(db, stock_id, 120)

    cutoff = BASE_TIME + timedelta(minutes=30)
    assert [m.id for m in MovementLedger.since(db, cutoff)] == [latest, recent]
    assert MovementLedger.count_since(db, cutoff) == 2
    assert MovementLedger.count_since(db, BASE_TIME + timedelta(days=1)) == 0


def test_since_accepts_other_timezones(db, stock_id):
    _append(db, stock_id, 60)

    # 09:30 at UTC+2 is 07:30 UTC, before the movement at 09:00 UTC
    cutoff = datetime(2026, 3, 1, 9, 30, tzinfo=timezone(timedelta(hours=2)))
    assert MovementLedger.count_since(db, cutoff) == 1
