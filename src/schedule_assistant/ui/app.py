from __future__ import annotations

import logging
import sys
import threading

from PyQt6.QtWidgets import QApplication

from ..api import api_state
from ..config import AppPalette
from ..core import APP_NAME
from ..logging import configure_logging
from ..services.http import run_local_server
from .calendar_window import CalendarWindow
from .presenter import SchedulePresenter
from .styles.theme import apply_palette


def run_gui(*, serve_api: bool = True, host: str = "127.0.0.1", port: int = 8000) -> None:
    configure_logging()
    app = QApplication.instance() or QApplication(sys.argv)
    palette = AppPalette()
    apply_palette(app, palette)

    presenter = SchedulePresenter(dispatcher=api_state.dispatcher, store=api_state.store)

    if serve_api:
        # Tool-call batches from the live session host arrive over HTTP.
        thread = threading.Thread(
            target=run_local_server,
            kwargs={"host": host, "port": port, "install_signal_handlers": False},
            daemon=True,
        )
        thread.start()
        logging.getLogger(__name__).info("Tool-call endpoint listening on http://%s:%d/api/toolcall", host, port)

    window = CalendarWindow(presenter=presenter, palette=palette, app_name=APP_NAME)
    window.show()
    sys.exit(app.exec())
