"""
Pointer position access for Qt mouse events.

Qt 6 mouse events expose position(); older event objects only offer x().
The accessor is picked once at import so event handlers never branch on it.
"""
from PyQt6.QtGui import QMouseEvent

from src.core.types import PointerAccessor


def _position_x(event) -> float:
    return event.position().x()


def _legacy_x(event) -> float:
    return float(event.x())


def resolve_pointer_accessor(event_type=QMouseEvent) -> PointerAccessor:
    """Return the function reading the horizontal pointer offset from event_type."""
    if hasattr(event_type, "position"):
        return _position_x
    return _legacy_x


pointer_x = resolve_pointer_accessor()
