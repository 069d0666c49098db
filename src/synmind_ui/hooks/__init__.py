"""Reusable UI state primitives.

Each unit is an independent, consumer-owned state object:
 - PaginationEngine: page window over a sequence
 - ContainerSizeObserver: live size of a measurable surface
 - ChartSizeResolver / resolve_chart_size: square chart edge length
 - CollapsibleController: open/closed flag with change callback
 - TouchCapabilityDetector: touch-primary runtime flag

Qt adapters live in ``synmind_ui.hooks.qt_adapters`` and are not imported
here so the core stays importable without a display.
"""

from .pagination import PaginationEngine, PaginationState  # noqa: F401
from .container_size import (  # noqa: F401
    ContainerDimensions,
    ContainerSizeObserver,
    MeasurableSurface,
)
from .chart_size import ChartSize, ChartSizeResolver, RESPONSIVE, resolve_chart_size  # noqa: F401
from .collapsible import CollapsibleController  # noqa: F401
from .touch_device import (  # noqa: F401
    CapabilityQuery,
    EnvironmentCapability,
    TouchCapabilityDetector,
    get_touch_capability,
    probe_touch_primary,
)

__all__ = [
    "PaginationEngine",
    "PaginationState",
    "ContainerDimensions",
    "ContainerSizeObserver",
    "MeasurableSurface",
    "ChartSize",
    "ChartSizeResolver",
    "RESPONSIVE",
    "resolve_chart_size",
    "CollapsibleController",
    "CapabilityQuery",
    "EnvironmentCapability",
    "TouchCapabilityDetector",
    "get_touch_capability",
    "probe_touch_primary",
]
