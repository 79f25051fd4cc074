from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPainter, QColor, QPen, QPixmap
import numpy as np

from src.core.config import WAVEFORM_CONFIG


def render_waveform_pixmap(data, width, height, color=None, background=None):
    """
    Draws the min/max envelope of the first channel into a pixmap.

    Each pixel column covers an equal slice of the samples and gets one
    vertical stroke from that slice's minimum to its maximum.
    """
    width = max(1, int(width))
    height = max(1, int(height))
    color = QColor(*(color or WAVEFORM_CONFIG.default_color))
    background = QColor(*(background or WAVEFORM_CONFIG.background_color))

    pixmap = QPixmap(width, height)
    pixmap.fill(background)

    if data is None or len(data) == 0:
        return pixmap

    channel = data[:, 0] if data.ndim > 1 else data
    # Split into one bucket per column; short signals leave trailing columns empty
    buckets = np.array_split(np.asarray(channel, dtype=np.float32), min(width, len(channel)))

    mid_y = height / 2
    scale = mid_y * WAVEFORM_CONFIG.amplitude_scale

    painter = QPainter(pixmap)
    try:
        painter.setPen(QPen(color, 1))
        for x, bucket in enumerate(buckets):
            lo = float(np.clip(bucket.min(), -1.0, 1.0))
            hi = float(np.clip(bucket.max(), -1.0, 1.0))
            painter.drawLine(x, int(mid_y - hi * scale), x, int(mid_y - lo * scale))

        painter.setPen(QPen(color.darker(200), 1, Qt.PenStyle.DotLine))
        painter.drawLine(0, int(mid_y), width, int(mid_y))
    finally:
        painter.end()

    return pixmap
