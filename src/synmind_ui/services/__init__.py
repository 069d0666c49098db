"""Service layer exports.

Responsibilities:
 - Service locator (`services`) for shared hook infrastructure
 - EventBus publish/subscribe carrying environment notifications
 - SettingsService defaults and environment overrides
"""

from .service_locator import services, ServiceLocator  # noqa: F401
from .event_bus import EventBus, UIEvent, get_event_bus  # noqa: F401
from .settings_service import SettingsService  # noqa: F401

__all__ = [
    "services",
    "ServiceLocator",
    "EventBus",
    "UIEvent",
    "get_event_bus",
    "SettingsService",
]
