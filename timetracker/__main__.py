"""Allow running TimeTracker as a module: python -m timetracker."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .logger import configure_logging
from .ui.main_window import MainWindow


def main() -> None:
    log_path = configure_logging()
    logging.getLogger(__name__).info("TimeTracker starting, logging to %s", log_path)

    app = QApplication(sys.argv)
    app.setApplicationName("TimeTracker")
    app.setOrganizationName("TimeTracker")

    window = MainWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
