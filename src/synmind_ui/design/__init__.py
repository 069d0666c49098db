"""Design constants shared by the hooks layer."""

from .chart_sizes import (  # noqa: F401
    ChartSizePreset,
    CHART_MIN_SIZE,
    CHART_SIZE_VALUES,
    list_presets,
    get_preset,
    is_preset,
    chart_size_for,
    fixed_chart_size,
)

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
