"""Entrypoint for the rasp Qt desktop shell."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from qt_app.ui.main_window import MainWindow


def main() -> int:
    app = QApplication(sys.argv)
    project = sys.argv[1] if len(sys.argv) > 1 else None
    win = MainWindow(project_path=project)
    win.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
