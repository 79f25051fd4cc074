"""
WaveSeek UI Module

Qt-based user interface components:
- PositionIndicatorSurface: Clickable bitmap surface with a position indicator
- render_waveform_pixmap: Waveform bitmap rendering for hosts
- MainWindow: Demo host window
"""
from .position_surface import PositionIndicatorSurface
from .waveform_pixmap import render_waveform_pixmap
from .main_window import MainWindow

__all__ = [
    'PositionIndicatorSurface',
    'render_waveform_pixmap',
    'MainWindow',
]
