"""Touch-primary input detection.

``TouchCapabilityDetector`` exposes whether the runtime is touch-primary (a
touch screen with no hovering pointer). It reads a ``CapabilityQuery``
synchronously at construction and then follows the query's change channel;
there is no polling.

The default query is the shared ``touch_primary`` ``EnvironmentCapability``
registered in the service locator. Its initial value comes from
``probe_touch_primary()`` (settings override first, then Qt input devices).
Whoever learns about an input change (e.g. a device hot-plug handler) calls
``update()`` on it and every detector follows.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from ..services.event_bus import Event, EventBus, UIEvent, get_event_bus
from ..services.service_locator import services
from ..services.settings_service import SettingsService

__all__ = [
    "CapabilityQuery",
    "EnvironmentCapability",
    "TouchCapabilityDetector",
    "TOUCH_PRIMARY",
    "get_touch_capability",
    "probe_touch_primary",
]

_logger = logging.getLogger(__name__)

TOUCH_PRIMARY = "touch_primary"

CapabilityHandler = Callable[[bool], None]


class CapabilityQuery(Protocol):
    @property
    def matches(self) -> bool: ...  # pragma: no cover - structural

    def subscribe(
        self, handler: CapabilityHandler
    ) -> Callable[[], None]: ...  # pragma: no cover - structural


class EnvironmentCapability:
    """Named boolean environment capability broadcast over the EventBus.

    Changes are published as ``UIEvent.CAPABILITY_CHANGED`` with payload
    ``{"capability": name, "matches": bool}``; ``subscribe`` filters that
    stream down to this capability.
    """

    def __init__(self, name: str, matches: bool = False, *, bus: Optional[EventBus] = None) -> None:
        self._name = name
        self._matches = bool(matches)
        self._bus = bus if bus is not None else EventBus()

    @property
    def name(self) -> str:
        return self._name

    @property
    def matches(self) -> bool:
        return self._matches

    def update(self, matches: bool) -> bool:
        """Set the capability value; returns True when it changed (and was published)."""
        matches = bool(matches)
        if matches == self._matches:
            return False
        self._matches = matches
        _logger.debug("capability %s -> %s", self._name, matches)
        self._bus.publish(
            UIEvent.CAPABILITY_CHANGED, {"capability": self._name, "matches": matches}
        )
        return True

    def subscribe(self, handler: CapabilityHandler) -> Callable[[], None]:
        def _relay(event: Event) -> None:
            payload = event.payload or {}
            if payload.get("capability") == self._name:
                handler(bool(payload.get("matches")))

        sub = self._bus.subscribe(UIEvent.CAPABILITY_CHANGED, _relay)
        return lambda: self._bus.unsubscribe(sub)


def probe_touch_primary() -> bool:
    """Synchronous touch-primary query for the current runtime."""
    override = SettingsService.instance.touch_override
    if override is not None:
        return override
    from .qt_adapters import qt_touch_primary  # local import keeps Qt out of module import

    return qt_touch_primary()


def get_touch_capability() -> EnvironmentCapability:
    cap = services.try_get("touch_capability")
    if cap is None:
        cap = EnvironmentCapability(TOUCH_PRIMARY, probe_touch_primary(), bus=get_event_bus())
        services.register("touch_capability", cap, allow_override=True)
    return cap


class TouchCapabilityDetector:
    """Mirrors a capability query into ``is_touch`` until closed."""

    def __init__(self, query: Optional[CapabilityQuery] = None) -> None:
        self._query = query if query is not None else get_touch_capability()
        self._is_touch = bool(self._query.matches)
        self._closed = False
        self._unsubscribe: Optional[Callable[[], None]] = self._query.subscribe(self._on_change)

    def _on_change(self, matches: bool) -> None:
        if self._closed:
            return
        self._is_touch = bool(matches)

    @property
    def is_touch(self) -> bool:
        return self._is_touch

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True
        unsubscribe, self._unsubscribe = self._unsubscribe, None
        if unsubscribe is not None:
            unsubscribe()

    def __enter__(self) -> "TouchCapabilityDetector":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
