"""Qt-backed surface and probe tests (offscreen platform)."""

from __future__ import annotations

import pytest

from synmind_ui.hooks.chart_size import ChartSizeResolver
from synmind_ui.hooks.container_size import ContainerDimensions, ContainerSizeObserver


@pytest.fixture
def surface_widget(qt_app):
    from PyQt6.QtWidgets import QWidget

    parent = QWidget()
    parent.resize(800, 600)
    child = QWidget(parent)
    child.resize(300, 200)
    parent.show()
    qt_app.processEvents()
    yield child
    parent.close()
    parent.deleteLater()


def test_surface_measures_widget(surface_widget):
    from synmind_ui.hooks.qt_adapters import QtWidgetSurface

    surface = QtWidgetSurface(surface_widget)
    assert surface.measure() == ContainerDimensions(300, 200)


def test_observer_follows_widget_resize(qt_app, surface_widget):
    from synmind_ui.hooks.qt_adapters import QtWidgetSurface

    observer = ContainerSizeObserver(QtWidgetSurface(surface_widget))
    assert observer.size == ContainerDimensions(300, 200)
    surface_widget.resize(420, 260)
    qt_app.processEvents()
    assert observer.size == ContainerDimensions(420, 260)
    assert ChartSizeResolver("responsive", observer).value == 260
    observer.detach()


def test_synthetic_resize_event(qt_app, surface_widget):
    from PyQt6.QtCore import QSize
    from PyQt6.QtGui import QResizeEvent
    from synmind_ui.hooks.qt_adapters import QtWidgetSurface

    observer = ContainerSizeObserver(QtWidgetSurface(surface_widget))
    qt_app.sendEvent(surface_widget, QResizeEvent(QSize(500, 450), QSize(300, 200)))
    assert observer.size == ContainerDimensions(500, 450)
    observer.detach()


def test_detached_observer_ignores_widget_resize(qt_app, surface_widget):
    from synmind_ui.hooks.qt_adapters import QtWidgetSurface

    observer = ContainerSizeObserver(QtWidgetSurface(surface_widget))
    observer.detach()
    surface_widget.resize(640, 480)
    qt_app.processEvents()
    assert observer.size == ContainerDimensions(300, 200)


def test_qt_touch_probe_returns_bool(qt_app):
    from synmind_ui.hooks.qt_adapters import qt_touch_primary

    assert isinstance(qt_touch_primary(), bool)
