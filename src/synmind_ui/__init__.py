"""SynMind UI core public API.

Curated surface for the presentation layer: the hook state units plus the
shared service infrastructure they rely on. Import ``synmind_ui.hooks`` or
``synmind_ui.design`` directly for the full namespaces.
"""

from __future__ import annotations

from .services.service_locator import (  # noqa: F401
    services,
    ServiceLocator,
    ServiceAlreadyRegisteredError,
    ServiceNotFoundError,
)
from .services.event_bus import EventBus, UIEvent, Event  # noqa: F401
from .services.settings_service import SettingsService  # noqa: F401
from .hooks import (  # noqa: F401
    PaginationEngine,
    ContainerDimensions,
    ContainerSizeObserver,
    ChartSizeResolver,
    resolve_chart_size,
    CollapsibleController,
    TouchCapabilityDetector,
)
from . import design  # noqa: F401

__version__ = "0.1.0"
