"""
Demo entry point — bootstraps QApplication and AppWindow.
"""
import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from pinfield.config.settings import settings
from pinfield.utils.logger import logger, setup_logging


def main() -> int:
    setup_logging()
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION} (PyQt5 demo)")

    # Must be set before QApplication is created
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(settings.APP_NAME)
    app.setApplicationVersion(settings.APP_VERSION)

    from pinfield.ui.app_window import AppWindow
    window = AppWindow()
    window.show()

    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
