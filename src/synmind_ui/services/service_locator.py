"""Registry of process-wide hook infrastructure.

The hooks layer shares exactly two things between otherwise independent
units: the ``event_bus`` carrying environment notifications and the
``touch_capability`` every default ``TouchCapabilityDetector`` follows. Both
are created lazily by their accessor functions and registered here so tests
can swap them::

    with services.override_context(touch_capability=fake):
        detector = TouchCapabilityDetector()
"""

from __future__ import annotations

from contextlib import contextmanager
from threading import RLock
from typing import Any, Dict, Generator

__all__ = ["ServiceLocator", "services", "ServiceAlreadyRegisteredError", "ServiceNotFoundError"]

_MISSING = object()


class ServiceAlreadyRegisteredError(RuntimeError):
    """Raised when attempting to register an existing key without allow_override."""


class ServiceNotFoundError(KeyError):
    """Raised when a requested service key is not present."""


class ServiceLocator:
    """String-keyed registry guarded by a re-entrant lock."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._values: Dict[str, Any] = {}

    def register(self, key: str, value: Any, *, allow_override: bool = False) -> None:
        with self._lock:
            if key in self._values and not allow_override:
                raise ServiceAlreadyRegisteredError(f"Service '{key}' already registered")
            self._values[key] = value

    def get(self, key: str) -> Any:
        with self._lock:
            if key not in self._values:
                raise ServiceNotFoundError(key)
            return self._values[key]

    def try_get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._values.get(key, default)

    @contextmanager
    def override_context(self, **overrides: Any) -> Generator[None, None, None]:
        """Swap in ``overrides`` for the duration of the block.

        Prior values come back on exit, even when the block raises; keys that
        were absent before are removed again.
        """
        with self._lock:
            saved = {key: self._values.get(key, _MISSING) for key in overrides}
            self._values.update(overrides)
        try:
            yield
        finally:
            with self._lock:
                for key, prior in saved.items():
                    if prior is _MISSING:
                        self._values.pop(key, None)
                    else:
                        self._values[key] = prior

    def clear(self) -> None:
        with self._lock:
            self._values.clear()


services = ServiceLocator()
