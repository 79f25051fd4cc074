"""
WaveSeek Core Module

Toolkit-independent logic behind the position surface:
- PositionTracker: Press/drag/release state machine and listener list
- position: Clamping and indicator geometry
- TransportClock: Simulated playback position for the demo host
"""
from .tracker import PositionTracker
from .transport import TransportClock
from .position import clamp_position, indicator_x, is_visible_ratio, position_to_ratio
from .config import (
    INDICATOR_CONFIG,
    WAVEFORM_CONFIG,
    TRANSPORT_CONFIG,
    InteractionState,
    PlaybackState
)

__all__ = [
    # Main classes
    'PositionTracker',
    'TransportClock',
    # Geometry
    'clamp_position',
    'indicator_x',
    'is_visible_ratio',
    'position_to_ratio',
    # Config
    'INDICATOR_CONFIG',
    'WAVEFORM_CONFIG',
    'TRANSPORT_CONFIG',
    'InteractionState',
    'PlaybackState',
]
