from __future__ import annotations

import logging
import sys

from PySide6.QtWidgets import QApplication

from catpoint.bootstrap import build_app_system
from catpoint.ui.main_window import MainWindow
from catpoint.ui.theme import APP_QSS


def main() -> None:
    """
    Start the desktop security panel and the image scan worker.

    Notes
    -----
    - Loads configuration from `config.yaml` by default.
    - Optional CLI usage:
        python -m catpoint.dev.run_app --config path/to/config.yaml
    """
    app = QApplication(sys.argv)
    app.setStyleSheet(APP_QSS)

    config_path = None
    if "--config" in sys.argv:
        i = sys.argv.index("--config")
        if i + 1 < len(sys.argv):
            config_path = sys.argv[i + 1]

    wiring = build_app_system(config_path=config_path)

    logging.basicConfig(
        level=wiring.config.logging.level,
        format="%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s",
    )

    win = MainWindow(
        controller=wiring.controller,
        scanner=wiring.scanner,
        title=wiring.config.ui.window_title,
        refresh_ms=wiring.config.ui.refresh_ms,
    )
    win.show()

    wiring.scanner.start()

    def _stop_all() -> None:
        wiring.scanner.stop()
        wiring.scanner.join(timeout=2.0)

    app.aboutToQuit.connect(_stop_all)
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
