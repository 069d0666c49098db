"""Open/closed state for collapsible panels."""

from __future__ import annotations

from typing import Callable, Optional

__all__ = ["CollapsibleController"]


class CollapsibleController:
    """Boolean open state with a change callback.

    ``on_open_change`` fires exactly once per actual transition, with the new
    value. Requests that leave the state unchanged (``open()`` while open,
    ``close()`` while closed) do not fire it. Every operation returns the
    resulting ``is_open``.
    """

    def __init__(
        self,
        *,
        default_open: bool = False,
        on_open_change: Optional[Callable[[bool], None]] = None,
    ) -> None:
        self._is_open = bool(default_open)
        self._on_open_change = on_open_change

    @property
    def is_open(self) -> bool:
        return self._is_open

    def set_open(self, value: bool) -> bool:
        value = bool(value)
        if value == self._is_open:
            return self._is_open
        self._is_open = value
        if self._on_open_change is not None:
            self._on_open_change(value)
        return self._is_open

    def toggle(self) -> bool:
        return self.set_open(not self._is_open)

    def open(self) -> bool:
        return self.set_open(True)

    def close(self) -> bool:
        return self.set_open(False)
