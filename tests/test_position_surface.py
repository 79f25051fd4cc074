"""
pytest-qt tests for PositionIndicatorSurface.

Mouse events are built by hand and delivered with QApplication.sendEvent so
that out-of-bounds coordinates reach the label unchanged. Painting is checked
by rendering the label into a QImage.
"""
import math
import pytest
from PyQt6.QtWidgets import QApplication, QLabel, QWidget
from PyQt6.QtCore import Qt, QEvent, QPointF
from PyQt6.QtGui import QColor, QImage, QMouseEvent, QPixmap

from src.core.config import INDICATOR_CONFIG
from src.ui.pointer import resolve_pointer_accessor
from src.ui.position_surface import PositionIndicatorSurface

LEFT = Qt.MouseButton.LeftButton
RIGHT = Qt.MouseButton.RightButton
NONE = Qt.MouseButton.NoButton
BACKGROUND = QColor(0, 0, 128)
YELLOW = QColor(*INDICATOR_CONFIG.color)


class RecordingLabel(QLabel):
    """QLabel counting the default handlers that actually run."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.presses = 0
        self.releases = 0
        self.paints = 0

    def mousePressEvent(self, event):
        self.presses += 1
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event):
        self.releases += 1
        super().mouseReleaseEvent(event)

    def paintEvent(self, event):
        self.paints += 1
        super().paintEvent(event)


def send_mouse(widget, etype, x, button=LEFT, buttons=LEFT):
    pos = QPointF(x, 5)
    event = QMouseEvent(etype, pos, pos, button, buttons, Qt.KeyboardModifier.NoModifier)
    QApplication.sendEvent(widget, event)


def press(widget, x, button=LEFT):
    send_mouse(widget, QEvent.Type.MouseButtonPress, x, button, button)


def move(widget, x, held=True):
    send_mouse(widget, QEvent.Type.MouseMove, x, NONE, LEFT if held else NONE)


def release(widget, x, button=LEFT):
    send_mouse(widget, QEvent.Type.MouseButtonRelease, x, button, NONE)


def render(label):
    image = QImage(label.size(), QImage.Format.Format_ARGB32)
    image.fill(Qt.GlobalColor.black)
    label.render(image)
    return image


def yellow_columns(image):
    row = image.height() // 2
    return [x for x in range(image.width()) if image.pixelColor(x, row).rgb() == YELLOW.rgb()]


def make_surface(qtbot, width, height=40, label=None):
    surface = PositionIndicatorSurface(label=label)
    qtbot.addWidget(surface.label)
    pixmap = QPixmap(width, height)
    pixmap.fill(BACKGROUND)
    surface.set_pixmap(pixmap)
    surface.label.resize(width, height)
    return surface


@pytest.fixture
def surface(qtbot):
    """Create a 200px wide surface recording its reports."""
    surface = make_surface(qtbot, 200)
    surface.reports = []
    surface.clicked.connect(lambda p, w: surface.reports.append((p, w)))
    return surface


class TestPointerReports:
    """Press/drag/release handling through the label's events."""

    def test_initial_state(self, surface):
        assert not surface.is_dragging
        assert not surface.is_indicator_visible
        assert surface.position_ratio == INDICATOR_CONFIG.hidden_ratio
        assert surface.label.cursor().shape() == Qt.CursorShape.PointingHandCursor
        assert not surface.label.hasMouseTracking()

    def test_press_emits_clicked(self, qtbot, surface):
        with qtbot.waitSignal(surface.clicked, timeout=1000) as blocker:
            press(surface.label, 50)
        assert blocker.args == [50, 200]
        assert surface.is_dragging

    def test_clamped_drag_scenario(self, surface):
        press(surface.label, -10)
        move(surface.label, 250)
        release(surface.label, 250)
        move(surface.label, 100)
        assert surface.reports == [(0, 200), (200, 200)]
        assert not surface.is_dragging

    def test_move_without_held_button_is_silent(self, surface):
        press(surface.label, 10)
        move(surface.label, 60, held=False)
        assert surface.reports == [(10, 200)]
        assert surface.is_dragging

    def test_right_button_ignored(self, surface):
        press(surface.label, 10, button=RIGHT)
        move(surface.label, 60)
        release(surface.label, 60, button=RIGHT)
        assert surface.reports == []
        assert not surface.is_dragging

    def test_double_click_reports(self, surface):
        send_mouse(surface.label, QEvent.Type.MouseButtonDblClick, 30)
        assert surface.reports == [(30, 200)]

    def test_total_width_follows_resize(self, surface):
        surface.label.resize(400, 40)
        press(surface.label, 350)
        assert surface.reports == [(350, 400)]

    def test_plain_listener(self, surface):
        seen = []
        surface.add_listener(lambda p, w: seen.append(p))
        press(surface.label, 20)
        assert seen == [20]
        assert surface.reports == [(20, 200)]

    def test_removed_listener_not_called(self, surface):
        seen = []
        listener = lambda p, w: seen.append(p)
        surface.add_listener(listener)
        surface.remove_listener(listener)
        press(surface.label, 20)
        assert seen == []

    def test_given_label_moves_to_parent(self, qtbot):
        host = QWidget()
        qtbot.addWidget(host)
        label = QLabel()
        surface = PositionIndicatorSurface(host, label=label)
        assert surface.label is label
        assert label.parent() is host
        assert surface.parent() is label

    def test_given_label_keeps_parent_without_one(self, qtbot):
        host = QWidget()
        qtbot.addWidget(host)
        label = QLabel(host)
        PositionIndicatorSurface(label=label)
        assert label.parent() is host

    def test_default_handlers_still_run(self, qtbot):
        label = RecordingLabel()
        surface = make_surface(qtbot, 200, label=label)
        press(label, 10)
        release(label, 10)
        press(label, 10, button=RIGHT)
        assert label.presses == 2
        assert label.releases == 1
        assert surface.label is label
        assert surface.widget() is label


class TestIndicatorPainting:
    """Overlay rendering on top of the label content."""

    def test_half_ratio_on_300px(self, qtbot):
        surface = make_surface(qtbot, 300)
        surface.set_position_ratio(0.5)
        cols = yellow_columns(render(surface.label))
        assert cols
        assert min(cols) >= 149 and max(cols) <= 151

        surface.set_position_ratio(-1.0)
        assert yellow_columns(render(surface.label)) == []

    @pytest.mark.parametrize("ratio", [0.0, 0.25, 0.8])
    def test_line_at_floor_of_ratio(self, qtbot, ratio):
        surface = make_surface(qtbot, 200)
        surface.set_position_ratio(ratio)
        expected = math.floor(ratio * 200)
        cols = yellow_columns(render(surface.label))
        assert cols
        assert all(abs(x - expected) <= 1 for x in cols)

    @pytest.mark.parametrize("ratio", [-1.0, -0.2, 1.5, math.nan, math.inf])
    def test_hidden_ratios_draw_nothing(self, qtbot, ratio):
        surface = make_surface(qtbot, 200)
        surface.set_position_ratio(ratio)
        assert not surface.is_indicator_visible
        assert yellow_columns(render(surface.label)) == []

    def test_base_content_painted(self, qtbot):
        surface = make_surface(qtbot, 200)
        surface.set_position_ratio(0.5)
        image = render(surface.label)
        assert image.pixelColor(10, 20).rgb() == BACKGROUND.rgb()

    def test_label_paint_runs_once_per_pass(self, qtbot):
        label = RecordingLabel()
        surface = make_surface(qtbot, 200, label=label)
        surface.set_position_ratio(0.5)
        render(label)
        assert label.paints == 1

    def test_same_ratio_twice_is_idempotent(self, qtbot):
        surface = make_surface(qtbot, 200)
        surface.set_position_ratio(0.3)
        once = render(surface.label)
        surface.set_position_ratio(0.3)
        assert render(surface.label) == once

    def test_painting_does_not_touch_state(self, qtbot):
        surface = make_surface(qtbot, 200)
        surface.set_position_ratio(0.7)
        press(surface.label, 10)
        render(surface.label)
        assert surface.position_ratio == 0.7
        assert surface.is_dragging

    def test_hide_indicator(self, qtbot):
        surface = make_surface(qtbot, 200)
        surface.set_position_ratio(0.5)
        surface.hide_indicator()
        assert surface.position_ratio == INDICATOR_CONFIG.hidden_ratio
        assert yellow_columns(render(surface.label)) == []


class TestPointerAccessor:
    """Pointer x extraction for both event flavours."""

    def test_position_events(self):
        class Event:
            def position(self):
                return QPointF(12.5, 3)

        assert resolve_pointer_accessor(Event)(Event()) == 12.5

    def test_legacy_events(self):
        class Event:
            def x(self):
                return 7

        assert resolve_pointer_accessor(Event)(Event()) == 7.0

    def test_injected_accessor(self, qtbot):
        surface = PositionIndicatorSurface(pointer_accessor=lambda event: 42.0)
        qtbot.addWidget(surface.label)
        surface.label.resize(100, 20)
        seen = []
        surface.clicked.connect(lambda p, w: seen.append((p, w)))
        press(surface.label, 5)
        assert seen == [(42, 100)]
