"""
Simulated transport clock for WaveSeek's demo host.
Keeps a playback position in seconds and advances it on explicit ticks.
"""
from __future__ import annotations
import logging
from typing import Optional, Callable

from .config import TRANSPORT_CONFIG, PlaybackState

logger = logging.getLogger("WaveSeek")


class TransportClock:
    """
    Playback position without an audio device.
    The host drives it with tick() from a UI timer.
    """
    __slots__ = (
        '_duration', '_position', '_state',
        '_on_position_changed', '_on_state_changed', '__weakref__'
    )

    def __init__(
        self,
        duration: float = TRANSPORT_CONFIG.demo_duration,
        on_position_changed: Optional[Callable[[float], None]] = None,
        on_state_changed: Optional[Callable[[PlaybackState], None]] = None
    ) -> None:
        """
        Initialize the clock.

        Args:
            duration: Total length in seconds
            on_position_changed: Callback for position updates (seconds)
            on_state_changed: Callback for state changes
        """
        self._duration = max(0.0, float(duration))
        self._position = 0.0
        self._state = PlaybackState.STOPPED
        self._on_position_changed = on_position_changed
        self._on_state_changed = on_state_changed

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def position(self) -> float:
        """Current playback position in seconds."""
        return self._position

    @property
    def ratio(self) -> float:
        """Current position as a fraction of the duration."""
        if self._duration <= 0:
            return 0.0
        return self._position / self._duration

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state == PlaybackState.PLAYING

    def _set_state(self, state: PlaybackState) -> None:
        """Update state and notify callback."""
        if self._state != state:
            self._state = state
            if self._on_state_changed:
                self._on_state_changed(state)

    def _set_position(self, seconds: float) -> None:
        self._position = max(0.0, min(seconds, self._duration))
        if self._on_position_changed:
            self._on_position_changed(self._position)

    def play(self) -> bool:
        """
        Start advancing on ticks.

        Returns:
            True if playback started
        """
        if self._duration <= 0 or self.is_playing:
            return False
        if self._position >= self._duration:
            self._set_position(0.0)
        self._set_state(PlaybackState.PLAYING)
        logger.info("Playback started at %.2fs", self._position)
        return True

    def pause(self) -> None:
        """Pause playback (keep position)."""
        self._set_state(PlaybackState.PAUSED)
        logger.info("Playback paused at %.2fs", self._position)

    def stop(self) -> None:
        """Stop playback and reset position."""
        self._set_state(PlaybackState.STOPPED)
        self._set_position(0.0)
        logger.info("Playback stopped")

    def toggle_play_pause(self) -> None:
        """Toggle between play and pause states."""
        if self.is_playing:
            self.pause()
        else:
            self.play()

    def seek(self, seconds: float) -> None:
        """Move to a time position, clamped to the duration."""
        self._set_position(seconds)

    def seek_ratio(self, ratio: float) -> None:
        """Move to a fraction of the duration, clamped to [0, 1]."""
        self._set_position(max(0.0, min(1.0, ratio)) * self._duration)

    def tick(self, dt: float) -> None:
        """Advance by dt seconds while playing; stops at the end."""
        if not self.is_playing:
            return
        target = self._position + dt
        if target >= self._duration:
            self._set_position(self._duration)
            self._set_state(PlaybackState.STOPPED)
            logger.info("Playback reached the end")
            return
        self._set_position(target)
