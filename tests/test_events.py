"""
Tests for testconsole/events.py
"""
import pytest

from testconsole.events import EventRegistry


def test_publish_calls_handlers_in_registration_order():
    registry = EventRegistry()
    calls = []
    registry.subscribe("tick", lambda p: calls.append(("first", p)))
    registry.subscribe("tick", lambda p: calls.append(("second", p)))
    registry.subscribe("tock", lambda p: calls.append(("other", p)))

    registry.publish("tick", 1)

    assert calls == [("first", 1), ("second", 1)]


def test_publish_without_handlers_is_a_no_op():
    EventRegistry().publish("nobody-listens", object())


def test_handler_errors_propagate():
    registry = EventRegistry()
    later = []

    def boom(_):
        raise RuntimeError("listener failed")

    registry.subscribe("tick", boom)
    registry.subscribe("tick", later.append)

    with pytest.raises(RuntimeError, match="listener failed"):
        registry.publish("tick", None)
    assert later == []


def test_handler_may_publish_reentrantly():
    registry = EventRegistry()
    seen = []
    registry.subscribe("outer", lambda p: registry.publish("inner", p + 1))
    registry.subscribe("inner", seen.append)

    registry.publish("outer", 1)

    assert seen == [2]


def test_subscribe_rejects_non_callables():
    with pytest.raises(TypeError):
        EventRegistry().subscribe("tick", "not callable")
