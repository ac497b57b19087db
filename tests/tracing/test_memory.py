"""Tests for the in-memory history store."""

import pytest

from taskforce.tracing import HistoryStore, InMemoryHistoryStore, TickRecord


def record(tick: int, *events) -> TickRecord:
    return TickRecord(
        tick=tick, zone="W1N1", timestamp=float(tick), snapshot={"tick": tick}, events=list(events)
    )


def test_satisfies_protocol():
    assert isinstance(InMemoryHistoryStore(), HistoryStore)


def test_bounded_eviction_of_oldest():
    store = InMemoryHistoryStore(max_ticks=2)
    for tick in (1, 2, 3):
        store.record_tick(record(tick))

    assert store.tick_count == 2
    assert store.get_tick(1) is None
    assert store.get_tick_range() == (2, 3)


def test_snapshot_and_events_lookup():
    store = InMemoryHistoryStore()
    store.record_tick(record(1, {"type": "a"}))
    store.record_tick(record(2, {"type": "b"}, {"type": "c"}))
    store.record_tick(record(3, {"type": "d"}))

    assert store.get_snapshot(2) == {"tick": 2}
    assert store.get_snapshot(9) is None
    assert [event["type"] for event in store.get_events(2, 3)] == ["b", "c", "d"]


def test_clear_empties_store():
    store = InMemoryHistoryStore()
    store.record_tick(record(1))
    store.clear()

    assert store.tick_count == 0
    assert store.get_tick_range() is None


def test_max_ticks_must_be_positive():
    with pytest.raises(ValueError):
        InMemoryHistoryStore(max_ticks=0)
