import sys
from PyQt6.QtWidgets import QApplication
import qdarktheme

from src.ui.main_window import MainWindow
from src.utils.logger import logger

APP_NAME = "WaveSeek"


def main():
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationDisplayName(APP_NAME)

    # Apply modern dark theme
    app.setStyleSheet(qdarktheme.load_stylesheet(theme="dark"))

    window = MainWindow()
    window.show()
    logger.info("%s started (%.1fs demo signal)", APP_NAME, window.clock.duration)

    exit_code = app.exec()
    logger.info("%s exiting with code %d", APP_NAME, exit_code)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
