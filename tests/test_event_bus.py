from synmind_ui.services.event_bus import EventBus, UIEvent, get_event_bus
from synmind_ui.services.service_locator import services


def test_get_event_bus_registers_once():
    bus = get_event_bus()
    assert isinstance(bus, EventBus)
    assert services.get("event_bus") is bus
    assert get_event_bus() is bus


def test_subscribe_publish_basic():
    bus = EventBus()
    received = []

    def handler(evt):
        received.append((evt.name, evt.payload))

    bus.subscribe(UIEvent.CAPABILITY_CHANGED, handler)
    bus.publish(UIEvent.CAPABILITY_CHANGED, {"matches": True})
    assert received == [(UIEvent.CAPABILITY_CHANGED.value, {"matches": True})]


def test_unsubscribe_stops_delivery():
    bus = EventBus()
    count = 0

    def incr(_):
        nonlocal count
        count += 1

    sub = bus.subscribe("custom", incr)
    bus.publish("custom")
    bus.unsubscribe(sub)
    bus.unsubscribe(sub)
    bus.publish("custom")
    assert count == 1
    assert bus.subscriber_count("custom") == 0
    assert sub.active is False


def test_unsubscribe_during_publish_skips_handler():
    bus = EventBus()
    order = []
    second = None

    def first(_):
        order.append("first")
        bus.unsubscribe(second)

    def later(_):
        order.append("second")

    bus.subscribe("custom", first)
    second = bus.subscribe("custom", later)
    bus.publish("custom")
    assert order == ["first"]


def test_error_isolation():
    bus = EventBus()
    order = []

    def bad(_):
        order.append("bad")
        raise RuntimeError("boom")

    def good(_):
        order.append("good")

    bus.subscribe("custom", bad)
    bus.subscribe("custom", good)
    bus.publish("custom", 123)
    assert order == ["bad", "good"]
    assert len(bus.errors) == 1
    bus.clear()
    assert bus.errors == []
