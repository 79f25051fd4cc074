from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel, QSizePolicy
from PyQt6.QtCore import Qt, QTimer, QSize
import numpy as np
import qtawesome as qta

from src.core.config import TRANSPORT_CONFIG, WAVEFORM_CONFIG, PlaybackState
from src.core.position import position_to_ratio
from src.core.transport import TransportClock
from src.ui.position_surface import PositionIndicatorSurface
from src.ui.waveform_pixmap import render_waveform_pixmap
from src.utils.logger import logger


def make_demo_signal(duration=TRANSPORT_CONFIG.demo_duration,
                     sr=TRANSPORT_CONFIG.demo_samplerate,
                     freq=TRANSPORT_CONFIG.demo_frequency):
    """Slow amplitude-modulated tone so the envelope has visible structure."""
    t = np.linspace(0, duration, int(duration * sr), endpoint=False, dtype=np.float32)
    envelope = 0.5 + 0.5 * np.sin(2 * np.pi * (freq / 8) * t)
    return (envelope * np.sin(2 * np.pi * freq * t)).astype(np.float32)


class MainWindow(QMainWindow):
    def __init__(self, data=None):
        super().__init__()

        self.setWindowTitle("WaveSeek")
        self.resize(WAVEFORM_CONFIG.default_width, WAVEFORM_CONFIG.default_height + 120)

        self.audio_data = data if data is not None else make_demo_signal()
        self.clock = TransportClock(
            duration=len(self.audio_data) / TRANSPORT_CONFIG.demo_samplerate,
            on_state_changed=self.on_state_changed
        )

        # UI Setup
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self.create_waveform_view()
        self.create_transport_controls()

        # Update timer (GUI update ~30fps)
        self.timer = QTimer()
        self.timer.timeout.connect(self.periodic_update)
        self.timer.start(TRANSPORT_CONFIG.tick_interval_ms)

    def create_waveform_view(self):
        self.surface = PositionIndicatorSurface(self.central_widget)
        label = self.surface.label
        label.setMinimumHeight(WAVEFORM_CONFIG.default_height)
        label.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Expanding)
        label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.surface.clicked.connect(self.on_surface_clicked)
        self.surface.set_position_ratio(0.0)
        self.main_layout.addWidget(label)

    def create_transport_controls(self):
        transport_widget = QWidget()
        transport_widget.setStyleSheet("background-color: #222; border-top: 1px solid #444;")
        transport_layout = QHBoxLayout(transport_widget)
        transport_layout.setContentsMargins(20, 10, 20, 10)

        self.time_label = QLabel("00:00 / 00:00")
        self.time_label.setStyleSheet("font-family: 'Consolas'; font-size: 20px; font-weight: bold; color: #00ffff; min-width: 180px;")

        # Style helper for transport buttons
        btn_style = """
            QPushButton {
                background-color: transparent;
                border-radius: 20px;
                padding: 5px;
            }
            QPushButton:hover { background-color: #444; }
            QPushButton:pressed { background-color: #555; }
        """

        self.btn_stop = QPushButton()
        self.btn_stop.setIcon(qta.icon("fa5s.stop", color="#ff5555"))
        self.btn_stop.setIconSize(QSize(24, 24))
        self.btn_stop.setStyleSheet(btn_style)
        self.btn_stop.clicked.connect(self.stop)

        self.btn_play_pause = QPushButton()
        self.btn_play_pause.setIcon(qta.icon("fa5s.play", color="#55ff55"))
        self.btn_play_pause.setIconSize(QSize(32, 32))
        self.btn_play_pause.setStyleSheet(btn_style)
        self.btn_play_pause.clicked.connect(self.toggle_play_pause)

        transport_layout.addWidget(self.time_label)
        transport_layout.addStretch()
        transport_layout.addWidget(self.btn_stop)
        transport_layout.addWidget(self.btn_play_pause)
        transport_layout.addStretch()

        self.main_layout.addWidget(transport_widget)
        self.statusBar().showMessage("Ready")

    def toggle_play_pause(self):
        self.clock.toggle_play_pause()

    def stop(self):
        self.clock.stop()
        self.surface.set_position_ratio(self.clock.ratio)

    def refresh_waveform(self):
        label = self.surface.label
        pixmap = render_waveform_pixmap(self.audio_data, label.width(), label.height())
        self.surface.set_pixmap(pixmap)
        logger.debug(f"Waveform rendered at {label.width()}x{label.height()}")

    def resizeEvent(self, event):
        super().resizeEvent(event)
        # Wait for the layout to hand the label its new geometry
        QTimer.singleShot(0, self.refresh_waveform)

    def periodic_update(self):
        """Advances the clock and pushes its position into the surface."""
        self.clock.tick(TRANSPORT_CONFIG.tick_interval_ms / 1000.0)
        self.surface.set_position_ratio(self.clock.ratio)

        fmt = lambda s: f"{int(s // 60):02d}:{int(s % 60):02d}"
        self.time_label.setText(f"{fmt(self.clock.position)} / {fmt(self.clock.duration)}")

    def on_surface_clicked(self, position, total_width):
        self.clock.seek_ratio(position_to_ratio(position, total_width))
        self.surface.set_position_ratio(self.clock.ratio)

    def on_state_changed(self, state):
        self.statusBar().showMessage(f"State: {state.name.lower()}", 2000)
        if state == PlaybackState.PLAYING:
            self.btn_play_pause.setIcon(qta.icon("fa5s.pause", color="#ffff55"))
        else:
            self.btn_play_pause.setIcon(qta.icon("fa5s.play", color="#55ff55"))

    def closeEvent(self, event):
        self.timer.stop()
        super().closeEvent(event)
