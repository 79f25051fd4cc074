"""
Type definitions for the WaveSeek core module.
Provides type aliases for callbacks passed between the core and the UI.
"""
from typing import Any, Callable

# Callback types
PositionListener = Callable[[int, int], None]  # (position, total_width)
PointerAccessor = Callable[[Any], float]       # event -> horizontal pixel offset
