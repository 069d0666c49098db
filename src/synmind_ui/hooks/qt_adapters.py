"""PyQt6 adapters for the hooks layer.

 - ``QtWidgetSurface`` makes a ``QWidget`` a ``MeasurableSurface``: it measures
   the widget's current size and reports ``QEvent.Type.Resize`` through an
   event filter parented to the widget.
 - ``qt_touch_primary`` inspects registered input devices and reports whether
   touch is the only pointing input.

Both need a ``QApplication``/``QGuiApplication`` for meaningful results; tests
create an offscreen instance.
"""

from __future__ import annotations

from typing import Callable

from PyQt6 import sip
from PyQt6.QtCore import QEvent, QObject
from PyQt6.QtGui import QGuiApplication, QInputDevice
from PyQt6.QtWidgets import QWidget

from .container_size import ContainerDimensions, ResizeHandler

__all__ = ["QtWidgetSurface", "qt_touch_primary"]


class _ResizeFilter(QObject):
    def __init__(self, parent: QWidget, handler: ResizeHandler) -> None:
        super().__init__(parent)
        self._handler = handler

    def eventFilter(self, watched, event):  # type: ignore[override]
        if event.type() == QEvent.Type.Resize:
            size = event.size()
            self._handler(ContainerDimensions.of(size.width(), size.height()))
        return False


class QtWidgetSurface:
    """Measurable surface backed by a ``QWidget``."""

    def __init__(self, widget: QWidget) -> None:
        self._widget = widget

    @property
    def widget(self) -> QWidget:
        return self._widget

    def measure(self) -> ContainerDimensions:
        return ContainerDimensions.of(self._widget.width(), self._widget.height())

    def subscribe_resize(self, handler: ResizeHandler) -> Callable[[], None]:
        filt = _ResizeFilter(self._widget, handler)
        self._widget.installEventFilter(filt)

        def _unsubscribe() -> None:
            # Widget destruction also destroys the parented filter.
            if sip.isdeleted(filt):
                return
            self._widget.removeEventFilter(filt)
            filt.deleteLater()

        return _unsubscribe

    def __repr__(self) -> str:  # pragma: no cover - debug aid
        return f"QtWidgetSurface({self._widget.objectName() or type(self._widget).__name__})"


_POINTER_TYPES = (QInputDevice.DeviceType.Mouse, QInputDevice.DeviceType.TouchPad)


def qt_touch_primary() -> bool:
    """True when a touch screen is registered and no hovering pointer is."""
    if QGuiApplication.instance() is None:
        return False
    kinds = {device.type() for device in QInputDevice.devices()}
    if QInputDevice.DeviceType.TouchScreen not in kinds:
        return False
    return not any(kind in kinds for kind in _POINTER_TYPES)
