# main.py
from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from stylecore.config import CONFIG_FILENAME, load_config
from stylecore.logging_setup import setup_logging
from stylecore.style_state import StyleState
from qtui.main_window import MainWindow
from qtui.theme import apply_theme

def main():
    app_data_dir = Path("app_data")

    # read-only startup settings; selections are never written back
    cfg = load_config(app_data_dir / CONFIG_FILENAME)

    log_rt = setup_logging(app_data_dir=app_data_dir, level=cfg.log_level, console=cfg.console_log)

    state = StyleState(config=cfg)

    app = QApplication(sys.argv)
    apply_theme(app, cfg.theme)

    win = MainWindow(state=state)
    win.show()

    try:
        app.exec()
    finally:
        state.close()
        log_rt.stop()


if __name__ == "__main__":
    main()
