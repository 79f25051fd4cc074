"""
Centralized configuration for WaveSeek.
All magic numbers and default settings in one place.
"""
from dataclasses import dataclass
from enum import Enum, auto


class InteractionState(Enum):
    """Pointer interaction state of a position surface."""
    IDLE = auto()
    DRAGGING = auto()


class PlaybackState(Enum):
    """Playback state enumeration."""
    STOPPED = auto()
    PLAYING = auto()
    PAUSED = auto()


@dataclass(frozen=True, slots=True)
class IndicatorConfig:
    """Position indicator overlay settings."""
    color: tuple[int, int, int] = (255, 255, 0)  # Opaque yellow
    line_width: int = 2
    hidden_ratio: float = -1.0  # Any value outside [0, 1] hides the line


@dataclass(frozen=True, slots=True)
class WaveformConfig:
    """Waveform bitmap settings used by the demo host."""
    default_color: tuple[int, int, int] = (44, 199, 201)  # Teal
    background_color: tuple[int, int, int] = (20, 20, 20)
    amplitude_scale: float = 0.9
    default_width: int = 800
    default_height: int = 160


@dataclass(frozen=True, slots=True)
class TransportConfig:
    """Simulated transport used by the demo host."""
    tick_interval_ms: int = 30
    demo_duration: float = 12.0  # seconds
    demo_samplerate: int = 8000
    demo_frequency: float = 3.0  # Hz, slow enough to see the shape


# Global config instances (immutable singletons)
INDICATOR_CONFIG = IndicatorConfig()
WAVEFORM_CONFIG = WaveformConfig()
TRANSPORT_CONFIG = TransportConfig()
