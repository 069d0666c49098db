"""Chart edge length resolution.

A chart size is a preset name, an explicit pixel count or ``"responsive"``.
Responsive sizing follows the smaller side of the observed container and is
clamped into ``[CHART_MIN_SIZE, lg]`` so charts stay usable on small panels
and do not grow unbounded on wide ones. Before the container has been measured
(width 0) the ``md`` preset is used.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from ..design.chart_sizes import CHART_MIN_SIZE, CHART_SIZE_VALUES, fixed_chart_size, is_preset
from .container_size import ContainerDimensions, ContainerSizeObserver

__all__ = ["ChartSize", "RESPONSIVE", "resolve_chart_size", "ChartSizeResolver"]

_logger = logging.getLogger(__name__)

ChartSize = Union[str, int, float]
RESPONSIVE = "responsive"


def resolve_chart_size(size: ChartSize, container: Optional[ContainerDimensions] = None) -> int:
    """Resolve ``size`` to an integer edge length in pixels.

    ``container`` is only consulted in responsive mode; None means no
    container is attached.
    """
    if isinstance(size, bool) or not isinstance(size, (str, int, float)):
        raise TypeError(f"Unsupported chart size: {size!r}")
    if isinstance(size, (int, float)):
        return fixed_chart_size(size)
    if is_preset(size):
        return CHART_SIZE_VALUES[size]
    if size != RESPONSIVE:
        _logger.warning("unknown chart size %r, using 'md'", size)
        return CHART_SIZE_VALUES["md"]
    if container is None or container.width == 0:
        return CHART_SIZE_VALUES["md"]
    smaller = min(container.width, container.height or container.width)
    return int(round(max(min(smaller, CHART_SIZE_VALUES["lg"]), CHART_MIN_SIZE)))


class ChartSizeResolver:
    """Binds a chart size to an optional container observer.

    ``value`` is derived on every read, so it follows the observer without any
    notification plumbing.
    """

    def __init__(self, size: ChartSize, observer: Optional[ContainerSizeObserver] = None) -> None:
        self.size = size
        self.observer = observer

    @property
    def value(self) -> int:
        container = None
        if self.observer is not None and self.observer.attached:
            container = self.observer.size
        return resolve_chart_size(self.size, container)

    def __int__(self) -> int:
        return self.value
