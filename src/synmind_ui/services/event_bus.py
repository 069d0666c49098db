"""Synchronous event bus for environment notifications.

Carries the "something in the runtime environment changed" signals the hooks
react to (currently capability flags such as touch-primary input). Producers
publish, hooks subscribe and keep the returned ``Subscription`` so they can
unsubscribe deterministically on teardown.

Properties:
 - No Qt dependency; dispatch happens inline on the publishing thread.
 - One failing handler doesn't break the publish cycle; the failure is
   recorded in ``errors`` and logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Any, Dict, List, Protocol

from .service_locator import services

__all__ = [
    "UIEvent",
    "Event",
    "EventBus",
    "EventHandler",
    "Subscription",
    "get_event_bus",
]

_logger = logging.getLogger(__name__)


class UIEvent(str, Enum):
    CAPABILITY_CHANGED = "capability_changed"


@dataclass
class Event:
    name: str
    payload: Any
    timestamp: float


class EventHandler(Protocol):
    def __call__(self, event: Event) -> None: ...  # pragma: no cover - structural


@dataclass
class Subscription:
    event: str
    handler: EventHandler
    active: bool = True


class EventBus:
    """Synchronous event dispatcher.

    The subscriber table is guarded by a re-entrant lock. Handlers run while
    the lock is NOT held (subscribers are snapshotted first) so a handler may
    subscribe or unsubscribe without deadlocking. A subscription cancelled
    during a publish is skipped for the rest of that publish.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: List[tuple[Event, BaseException]] = []

    # ------------------------------------------------------------------
    # Subscription management
    # ------------------------------------------------------------------
    def subscribe(self, name: str | UIEvent, handler: EventHandler) -> Subscription:
        key = name.value if isinstance(name, UIEvent) else name
        sub = Subscription(event=key, handler=handler)
        with self._lock:
            self._subs.setdefault(key, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            bucket = self._subs.get(sub.event)
            if bucket:
                for i, existing in enumerate(bucket):
                    if existing is sub:
                        bucket.pop(i)
                        break
                if not bucket:
                    self._subs.pop(sub.event, None)
        sub.active = False

    def clear(self) -> None:
        with self._lock:
            self._subs.clear()
            self._errors.clear()

    # ------------------------------------------------------------------
    # Publishing
    # ------------------------------------------------------------------
    def publish(self, name: str | UIEvent, payload: Any = None) -> Event:
        key = name.value if isinstance(name, UIEvent) else name
        evt = Event(name=key, payload=payload, timestamp=perf_counter())
        with self._lock:
            subs = list(self._subs.get(key, ()))
        for sub in subs:
            if not sub.active:
                continue
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - isolate handler failures
                with self._lock:
                    self._errors.append((evt, exc))
                _logger.warning("handler for %r failed: %s", key, exc)
        return evt

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    def subscriber_count(self, name: str | UIEvent) -> int:
        key = name.value if isinstance(name, UIEvent) else name
        with self._lock:
            return len(self._subs.get(key, ()))

    @property
    def errors(self) -> list[tuple[Event, BaseException]]:
        with self._lock:
            return list(self._errors)


def get_event_bus() -> EventBus:
    """Return the registered bus, registering a fresh one on first use."""
    bus = services.try_get("event_bus")
    if bus is None:
        bus = EventBus()
        services.register("event_bus", bus, allow_override=True)
    return bus
