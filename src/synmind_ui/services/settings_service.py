"""Runtime defaults and environment overrides for the hooks layer.

A single dataclass instance holds the defaults hooks fall back to when the
caller does not pass explicit values. Tests and application bootstrap may
mutate ``SettingsService.instance`` or replace it with a fresh instance.

Environment bootstrap: ``SYNMIND_FORCE_TOUCH`` pins the touch-primary probe.
``1/true/yes/on`` forces touch, ``0/false/no/off`` forces pointer input, any
other value (or unset) leaves detection to the runtime probe.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import ClassVar, Optional

__all__ = ["SettingsService", "touch_override_from_env"]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def touch_override_from_env(value: Optional[str] = None) -> Optional[bool]:
    """Parse the ``SYNMIND_FORCE_TOUCH`` value (read from env when None)."""
    raw = os.getenv("SYNMIND_FORCE_TOUCH", "") if value is None else value
    raw = raw.strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    return None


@dataclass
class SettingsService:
    """Hook defaults.

    Attributes:
        default_page: Page a new ``PaginationEngine`` starts on. Default 1.
        default_page_size: Items per page for a new ``PaginationEngine``.
            Default 10.
        touch_override: When not None, ``probe_touch_primary`` returns this
            value instead of querying Qt input devices.
    """

    instance: ClassVar["SettingsService"]

    default_page: int = 1
    default_page_size: int = 10
    touch_override: Optional[bool] = None


SettingsService.instance = SettingsService(touch_override=touch_override_from_env())
