"""Allow running Pomodoro as a module: python -m pomodoro."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .database.db import init_db
from .app import PomodoroApp


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init_db()
    logging.getLogger("pomodoro").info("Pomodoro ready!")

    app = QApplication(sys.argv)
    app.setApplicationName("Pomodoro")
    app.setOrganizationName("Pomodoro")

    window = PomodoroApp()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
