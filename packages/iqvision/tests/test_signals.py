"""Unit tests for SignalBus."""
from __future__ import annotations

from iqvision.signals import SignalBus


def test_emit_dispatches_immediately():
    """emit() reaches subscribers before it returns."""
    bus = SignalBus()
    received = []

    def handler(signal_name: str, data: dict) -> None:
        received.append((signal_name, data))

    bus.subscribe("state_changed", handler)
    bus.emit("state_changed", value=42)

    assert received == [("state_changed", {"value": 42})]


def test_emit_without_subscribers():
    SignalBus().emit("nobody", value=1)


def test_handlers_called_in_registration_order():
    bus = SignalBus()
    order = []
    bus.subscribe("event", lambda s, d: order.append("a"))
    bus.subscribe("event", lambda s, d: order.append("b"))
    bus.subscribe("event", lambda s, d: order.append("c"))

    bus.emit("event")

    assert order == ["a", "b", "c"]


def test_signals_route_by_name():
    bus = SignalBus()
    alpha, beta = [], []
    bus.subscribe("alpha", lambda s, d: alpha.append(d))
    bus.subscribe("beta", lambda s, d: beta.append(d))

    bus.emit("alpha", x=1)

    assert alpha == [{"x": 1}]
    assert beta == []


def test_unsubscribe():
    bus = SignalBus()
    received = []

    def handler(signal_name: str, data: dict) -> None:
        received.append(data)

    bus.subscribe("event", handler)
    bus.unsubscribe("event", handler)
    bus.emit("event", x=1)

    assert received == []


def test_unsubscribe_unknown_is_noop():
    bus = SignalBus()
    bus.unsubscribe("missing", lambda s, d: None)
    bus.subscribe("event", lambda s, d: None)
    bus.unsubscribe("event", lambda s, d: None)


def test_handler_may_unsubscribe_during_emit():
    """Removing yourself mid-dispatch does not skip the next handler."""
    bus = SignalBus()
    calls = []

    def once(signal_name: str, data: dict) -> None:
        calls.append("once")
        bus.unsubscribe("event", once)

    bus.subscribe("event", once)
    bus.subscribe("event", lambda s, d: calls.append("always"))

    bus.emit("event")
    bus.emit("event")

    assert calls == ["once", "always", "always"]


def test_publish_waits_for_flush():
    bus = SignalBus()
    received = []
    bus.subscribe("event", lambda s, d: received.append(d))

    bus.publish("event", n=1)
    bus.publish("event", n=2)
    assert received == []

    bus.flush()
    assert received == [{"n": 1}, {"n": 2}]

    bus.flush()
    assert len(received) == 2


def test_flush_delivers_signals_published_by_handlers():
    """A handler publishing during flush is served after the earlier queue."""
    bus = SignalBus()
    order = []

    def first(signal_name: str, data: dict) -> None:
        order.append(("first", data["n"]))
        if data["n"] == 1:
            bus.publish("second", n=3)

    bus.subscribe("first", first)
    bus.subscribe("second", lambda s, d: order.append(("second", d["n"])))

    bus.publish("first", n=1)
    bus.publish("first", n=2)
    bus.flush()

    assert order == [("first", 1), ("first", 2), ("second", 3)]
