"""Container size observation.

``ContainerSizeObserver`` mirrors the live pixel dimensions of one external
measurable surface (a Qt widget through ``QtWidgetSurface``, or any object
satisfying ``MeasurableSurface``). It reads the surface once on attach, then
replaces its dimensions on every resize notification.

Teardown guarantees:
 - ``detach()`` calls the surface's unsubscribe handle exactly once.
 - Handlers are bound to the attachment that created them; a stale handler the
   surface keeps calling after detach (or after re-attach elsewhere) is inert.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

__all__ = [
    "ContainerDimensions",
    "MeasurableSurface",
    "ContainerSizeObserver",
    "ResizeHandler",
    "Unsubscribe",
]

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContainerDimensions:
    width: float = 0
    height: float = 0

    @classmethod
    def of(cls, width: float, height: float) -> "ContainerDimensions":
        """Build dimensions with negative values coerced to 0."""
        return cls(max(0, width), max(0, height))


ResizeHandler = Callable[[ContainerDimensions], None]
Unsubscribe = Callable[[], None]


class MeasurableSurface(Protocol):
    def measure(self) -> ContainerDimensions: ...  # pragma: no cover - structural

    def subscribe_resize(
        self, handler: ResizeHandler
    ) -> Unsubscribe: ...  # pragma: no cover - structural


class ContainerSizeObserver:
    """Tracks the size of a single attached surface.

    Parameters
    ----------
    surface:
        Surface to attach immediately (optional).
    on_resize:
        Called with the new ``ContainerDimensions`` after every notification
        received while attached.
    """

    def __init__(
        self,
        surface: Optional[MeasurableSurface] = None,
        *,
        on_resize: Optional[ResizeHandler] = None,
    ) -> None:
        self._size = ContainerDimensions()
        self._surface: Optional[MeasurableSurface] = None
        self._unsubscribe: Optional[Unsubscribe] = None
        self._token: Optional[object] = None
        self._on_resize = on_resize
        if surface is not None:
            self.attach(surface)

    # Lifecycle --------------------------------------------------------
    def attach(self, surface: Optional[MeasurableSurface]) -> None:
        if surface is None:
            self.detach()
            return
        if surface is self._surface:
            return
        self.detach()
        # State is only committed once both surface calls succeed.
        token = object()
        initial = surface.measure()
        unsubscribe = surface.subscribe_resize(self._bind(token))
        self._token = token
        self._surface = surface
        self._unsubscribe = unsubscribe
        self._size = ContainerDimensions.of(initial.width, initial.height)
        _logger.debug("observing %r at %sx%s", surface, self._size.width, self._size.height)

    def detach(self) -> None:
        unsubscribe = self._unsubscribe
        self._token = None
        self._surface = None
        self._unsubscribe = None
        if unsubscribe is not None:
            unsubscribe()
            _logger.debug("container observation stopped")

    def __enter__(self) -> "ContainerSizeObserver":
        return self

    def __exit__(self, *exc_info) -> None:
        self.detach()

    # Internal ---------------------------------------------------------
    def _bind(self, token: object) -> ResizeHandler:
        def _handle(dimensions: ContainerDimensions) -> None:
            if self._token is not token:
                return
            self._size = ContainerDimensions.of(dimensions.width, dimensions.height)
            if self._on_resize is not None:
                self._on_resize(self._size)

        return _handle

    # Accessors --------------------------------------------------------
    @property
    def size(self) -> ContainerDimensions:
        return self._size

    @property
    def width(self) -> float:
        return self._size.width

    @property
    def height(self) -> float:
        return self._size.height

    @property
    def surface(self) -> Optional[MeasurableSurface]:
        return self._surface

    @property
    def attached(self) -> bool:
        return self._surface is not None
