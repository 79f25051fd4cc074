from PyQt6.QtWidgets import QLabel
from PyQt6.QtCore import Qt, QObject, QEvent, pyqtSignal
from PyQt6.QtGui import QPainter, QColor, QPen

from src.core.config import INDICATOR_CONFIG
from src.core.position import indicator_x, is_visible_ratio
from src.core.tracker import PositionTracker
from src.ui.pointer import pointer_x
from src.utils.logger import logger


class PositionIndicatorSurface(QObject):
    """
    Clickable bitmap surface with a movable position indicator.

    Wraps a native QLabel holding the host's bitmap (e.g. a waveform pixmap).
    Left press and left-held drags are reported through `clicked` as
    (position, total_width) with position clamped into the label. A vertical
    line is painted over the label content at the ratio given to
    set_position_ratio(); ratios outside [0, 1] hide it.

    The surface filters the label's events instead of subclassing it and is
    parented to the label, so it is destroyed together with the widget.
    When both parent and label are given, the label is moved under parent.
    """
    clicked = pyqtSignal(int, int)  # position, total width

    _PRESS_EVENTS = (QEvent.Type.MouseButtonPress, QEvent.Type.MouseButtonDblClick)

    def __init__(self, parent=None, label=None, pointer_accessor=None, config=INDICATOR_CONFIG):
        if label is None:
            label = QLabel(parent)
        elif parent is not None:
            label.setParent(parent)
        super().__init__(label)
        self._label = label
        self._pointer_x = pointer_accessor or pointer_x
        self._config = config
        self._position_ratio = config.hidden_ratio

        self._tracker = PositionTracker()
        self._tracker.add_listener(self._report)

        self._pen = QPen(QColor(*config.color), config.line_width)
        self._pen.setStyle(Qt.PenStyle.SolidLine)

        self._label.setCursor(Qt.CursorShape.PointingHandCursor)
        self._label.setMouseTracking(False)
        self._label.installEventFilter(self)
        logger.debug("PositionIndicatorSurface attached to %s", type(label).__name__)

    @property
    def label(self):
        """The native widget to place in layouts."""
        return self._label

    def widget(self):
        return self._label

    @property
    def tracker(self):
        return self._tracker

    @property
    def is_dragging(self):
        return self._tracker.is_dragging

    @property
    def position_ratio(self):
        return self._position_ratio

    @property
    def is_indicator_visible(self):
        return is_visible_ratio(self._position_ratio)

    def set_position_ratio(self, ratio):
        """Set the indicator position (0.0 to 1.0, anything else hides it)."""
        self._position_ratio = float(ratio)
        self._label.update()  # Repaint on the next paint pass

    def hide_indicator(self):
        self.set_position_ratio(self._config.hidden_ratio)

    def set_pixmap(self, pixmap):
        self._label.setPixmap(pixmap)

    def add_listener(self, listener):
        """Register a plain callback receiving (position, total_width)."""
        self._tracker.add_listener(listener)

    def remove_listener(self, listener):
        self._tracker.remove_listener(listener)

    def _report(self, position, total_width):
        self.clicked.emit(position, total_width)

    def eventFilter(self, obj, event):
        if obj is not self._label:
            return super().eventFilter(obj, event)

        etype = event.type()
        if etype in self._PRESS_EVENTS:
            self._tracker.press(
                self._pointer_x(event),
                self._label.width(),
                event.button() == Qt.MouseButton.LeftButton
            )
        elif etype == QEvent.Type.MouseMove:
            self._tracker.move(
                self._pointer_x(event),
                self._label.width(),
                bool(event.buttons() & Qt.MouseButton.LeftButton)
            )
        elif etype == QEvent.Type.MouseButtonRelease:
            self._tracker.release(event.button() == Qt.MouseButton.LeftButton)
        elif etype == QEvent.Type.Paint:
            self._paint(event)
            return True

        # Pointer events always continue to the label's own handlers
        return False

    def _paint(self, event):
        # Label content (the host's pixmap) first, untouched
        self._label.paintEvent(event)

        x = indicator_x(self._position_ratio, self._label.width())
        if x is None:
            return

        painter = QPainter(self._label)
        try:
            painter.setPen(self._pen)
            painter.drawLine(x, 0, x, self._label.height())
        finally:
            painter.end()
