"""Chart size presets.

Charts in the assessment UI are square. Their edge length comes from one of
three named presets or from the available container space. Explicit pixel
counts never drop below ``CHART_MIN_SIZE`` and the presets are all at least
that large; a raw container width passed to ``chart_size_for`` is used as is.

Preset scale:
 - sm: 200px  (mobile, compact cards)
 - md: 280px  (default, tablet; also the fallback before first measurement)
 - lg: 360px  (desktop, full width; also the responsive upper bound)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

__all__ = [
    "ChartSizePreset",
    "CHART_MIN_SIZE",
    "CHART_SIZE_VALUES",
    "list_presets",
    "get_preset",
    "is_preset",
    "chart_size_for",
    "fixed_chart_size",
]

CHART_MIN_SIZE = 200


@dataclass(frozen=True)
class ChartSizePreset:
    """Named chart edge length.

    Attributes
    ----------
    id: str
        Preset identifier (sm|md|lg).
    pixels: int
        Edge length in pixels.
    description: str
        Typical placement for the preset.
    """

    id: str
    pixels: int
    description: str


_REGISTRY: Dict[str, ChartSizePreset] = {}


def _register(preset: ChartSizePreset) -> None:
    if preset.id in _REGISTRY:
        raise ValueError(f"Duplicate chart size preset: {preset.id}")
    if preset.pixels < CHART_MIN_SIZE:
        raise ValueError(f"Preset {preset.id} below minimum chart size")
    _REGISTRY[preset.id] = preset


_register(ChartSizePreset("sm", 200, "Mobile and compact cards."))
_register(ChartSizePreset("md", 280, "Default size; tablet layouts."))
_register(ChartSizePreset("lg", 360, "Desktop and full-width panels."))

CHART_SIZE_VALUES: Dict[str, int] = {p.id: p.pixels for p in _REGISTRY.values()}


def list_presets() -> List[ChartSizePreset]:
    return sorted(_REGISTRY.values(), key=lambda p: p.pixels)


def get_preset(preset_id: str) -> ChartSizePreset:
    preset = _REGISTRY.get(preset_id)
    if preset is None:
        raise KeyError(f"Unknown chart size preset: {preset_id}")
    return preset


def is_preset(value: object) -> bool:
    return isinstance(value, str) and value in _REGISTRY


def fixed_chart_size(pixels: float) -> int:
    """Round an explicit pixel count, raised to ``CHART_MIN_SIZE``.

    Raises ``ValueError`` for NaN and infinities.
    """
    if not math.isfinite(pixels):
        raise ValueError(f"Chart size must be finite, got {pixels!r}")
    return int(round(max(pixels, CHART_MIN_SIZE)))


def chart_size_for(size: Union[str, int, float], container_width: Optional[float] = None) -> int:
    """Static chart size lookup for call sites without a live container.

    Numbers are raised to ``CHART_MIN_SIZE``; presets map to their pixels; any
    other value yields ``container_width`` when known, else the ``md`` preset.
    """
    if isinstance(size, (int, float)) and not isinstance(size, bool):
        return fixed_chart_size(size)
    if is_preset(size):
        return CHART_SIZE_VALUES[size]  # type: ignore[index]
    if container_width is not None:
        return int(round(container_width))
    return CHART_SIZE_VALUES["md"]
