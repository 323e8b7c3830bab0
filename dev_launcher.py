"""Run Receipts and restart it whenever a source file under receipts/ changes."""
import os
import sys
import time
import traceback
from pathlib import Path

from PySide6.QtCore import QObject, Signal
from PySide6.QtWidgets import QApplication
from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from receipts.utils.loggers import get_logger

log = get_logger("receipts.dev")

PACKAGE_DIR = Path(__file__).parent.resolve() / "receipts"
WATCHED_SUFFIXES = (".py", ".qss", ".html")


class Restarter(QObject):
    restart_signal = Signal()

    def __init__(self, path_to_watch: str):
        super().__init__()
        self.last_restart = 0.0
        self.debounce_time = 1.0

        self.observer = Observer()
        self.observer.schedule(Handler(self.restart_signal), path_to_watch, recursive=True)
        self.observer.start()

    def stop(self):
        self.observer.stop()
        self.observer.join()


class Handler(FileSystemEventHandler):
    def __init__(self, restart_signal):
        self.restart_signal = restart_signal

    def on_modified(self, event):
        if event.is_directory or not str(event.src_path).endswith(WATCHED_SUFFIXES):
            return
        changed = Path(event.src_path).resolve()
        if "__pycache__" in changed.parts:
            return
        log.info("Change detected in: %s", changed)
        self.restart_signal.emit()


def main():
    app = QApplication(sys.argv)
    restarter = Restarter(str(PACKAGE_DIR))

    def trigger_restart():
        if time.time() - restarter.last_restart > restarter.debounce_time:
            log.info("Restarting application...")
            restarter.last_restart = time.time()
            restarter.stop()
            app.quit()
            os.execv(sys.executable, [sys.executable] + sys.argv)

    restarter.restart_signal.connect(trigger_restart)

    os.environ["__DEV_LAUNCHER__"] = "1"
    try:
        from receipts.main import main as main_app

        main_app()
    except Exception:
        traceback.print_exc()
        restarter.stop()
        sys.exit(1)
    finally:
        os.environ.pop("__DEV_LAUNCHER__", None)

    exit_code = app.exec()
    restarter.stop()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
