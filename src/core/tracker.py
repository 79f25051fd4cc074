"""
Pointer press/drag/release tracking for position surfaces.

The tracker owns the drag state and the listener list, and knows nothing
about the GUI toolkit: callers feed it horizontal offsets and widths.
"""
from __future__ import annotations
import logging

from .config import InteractionState
from .position import clamp_position
from .types import PositionListener

logger = logging.getLogger("WaveSeek")


class PositionTracker:
    """
    Idle/Dragging state machine that reports clamped pointer positions.

    A left press reports and starts a drag, left-held moves keep reporting,
    and a left release ends the drag silently. Moves without the left button
    held are ignored but do not end the drag.
    """
    __slots__ = ('_state', '_listeners')

    def __init__(self) -> None:
        self._state = InteractionState.IDLE
        self._listeners: list[PositionListener] = []

    @property
    def state(self) -> InteractionState:
        """Current interaction state."""
        return self._state

    @property
    def is_dragging(self) -> bool:
        """True between a left press and the matching release."""
        return self._state == InteractionState.DRAGGING

    def add_listener(self, listener: PositionListener) -> None:
        """Register a callback receiving (position, total_width)."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: PositionListener) -> None:
        """Unregister a callback. Unknown callbacks are ignored."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            logger.debug("Listener not registered: %r", listener)

    def press(self, x: float, width: int, left_button: bool = True) -> bool:
        """
        Handle a pointer press.

        Args:
            x: Horizontal pixel offset within the surface
            width: Current surface width in pixels
            left_button: Whether the pressed button is the left one

        Returns:
            True if a position was reported
        """
        if not left_button:
            return False
        self._state = InteractionState.DRAGGING
        logger.debug("Drag started at x=%s (width=%d)", x, width)
        self._emit(x, width)
        return True

    def move(self, x: float, width: int, left_held: bool) -> bool:
        """
        Handle a pointer move.

        Returns:
            True if a position was reported
        """
        if self._state != InteractionState.DRAGGING or not left_held:
            return False
        self._emit(x, width)
        return True

    def release(self, left_button: bool = True) -> None:
        """Handle a pointer release. Only the left button ends a drag."""
        if not left_button:
            return
        if self._state == InteractionState.DRAGGING:
            logger.debug("Drag finished")
        self._state = InteractionState.IDLE

    def reset(self) -> None:
        """Drop any drag in progress."""
        self._state = InteractionState.IDLE

    def _emit(self, x: float, width: int) -> None:
        """Report the clamped position to every listener, in order."""
        position = clamp_position(x, width)
        for listener in list(self._listeners):
            try:
                listener(position, width)
            except Exception:
                logger.exception("Position listener %r failed", listener)
