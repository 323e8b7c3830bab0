import os
import sys

from PySide6.QtCore import QEvent, Qt, QTimer
from PySide6.QtWidgets import QApplication, QMainWindow, QStackedWidget, QWidget

from .action import Task
from .app import App, AppMessage, HotkeyMsg, ListMsg, SaleMsg, SaleScreen
from .config import STYLE_PATH
from .constants import APP_NAME, WINDOW_HEIGHT, WINDOW_WIDTH
from .hotkeys import Hotkey
from .modules.sales.controller import SaleController
from .modules.sales_list.controller import SalesListController
from .utils.loggers import get_logger
from .utils.ui_helpers import error

log = get_logger("receipts")


def load_qss() -> str:
    qss = ""
    if STYLE_PATH.exists():
        qss = STYLE_PATH.read_text(encoding="utf-8")
    return qss


class MainWindow(QMainWindow):
    """
    Qt runtime for App: forwards widget messages to App.update, re-renders
    the visible screen, then runs the returned Task on the next event-loop
    turn (so focus tasks see the freshly rendered widgets).
    """

    def __init__(self, app: App | None = None):
        super().__init__()
        self.app = app or App()
        self.setMinimumSize(640, 420)

        self.list_ctrl = SalesListController()
        self.sale_ctrl = SaleController()

        self.stack = QStackedWidget()
        self.stack.addWidget(self.list_ctrl.get_widget())
        self.stack.addWidget(self.sale_ctrl.get_widget())
        self.setCentralWidget(self.stack)

        self.list_ctrl.message.connect(lambda msg: self.dispatch(ListMsg(msg)))
        self.sale_ctrl.message.connect(self._on_sale_message)

        # Escape / Tab reach us before the focused widget handles them
        QApplication.instance().installEventFilter(self)

        self.render()

    # ---- message loop ----------------------------------------------------

    def _on_sale_message(self, msg):
        screen = self.app.screen
        if isinstance(screen, SaleScreen):
            self.dispatch(SaleMsg(screen.sale_id, msg))

    def dispatch(self, message: AppMessage) -> None:
        log.debug("dispatch %r", message)
        try:
            task = self.app.update(message)
        except Exception as e:
            log.exception("Failed to handle %r", message)
            self.render()
            error(self, "Error", str(e))
            return
        self.render()
        self.schedule(task)

    def schedule(self, task: Task) -> None:
        if task.is_none():
            return
        QTimer.singleShot(0, lambda: self._run_task(task))

    def _run_task(self, task: Task) -> None:
        try:
            messages = task.run()
        except RuntimeError:
            # widget deleted between scheduling and running
            log.exception("Task failed")
            return
        for msg in messages:
            self.dispatch(msg)

    def render(self) -> None:
        self.setWindowTitle(self.app.title())
        screen = self.app.screen
        if isinstance(screen, SaleScreen):
            sale = self.app.sale_for(screen.sale_id)
            self.sale_ctrl.render(sale, screen.mode, screen.sale_id)
            page = self.sale_ctrl.get_widget()
        else:
            self.list_ctrl.render(self.app.sorted_sales())
            page = self.list_ctrl.get_widget()
        if self.stack.currentWidget() is not page:
            self.stack.setCurrentWidget(page)

    # ---- hotkeys ---------------------------------------------------------

    def hotkey_for(self, event) -> Hotkey | None:
        key = event.key()
        if key == Qt.Key_Escape:
            return Hotkey.escape()
        if key == Qt.Key_Backtab:
            return Hotkey.tab(shift=True)
        if key == Qt.Key_Tab:
            return Hotkey.tab(shift=bool(event.modifiers() & Qt.ShiftModifier))
        return None

    def eventFilter(self, obj, event):
        if (
            event.type() == QEvent.KeyPress
            and isinstance(obj, QWidget)
            and obj.window() is self
            and isinstance(self.app.screen, SaleScreen)
        ):
            hotkey = self.hotkey_for(event)
            if hotkey is not None:
                self.dispatch(HotkeyMsg(hotkey))
                return True
        return super().eventFilter(obj, event)

    def _remove_filter(self):
        app = QApplication.instance()
        if app is not None:
            app.removeEventFilter(self)

    def closeEvent(self, event):
        self._remove_filter()
        super().closeEvent(event)


def main():
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)

    qss = load_qss()
    if qss:
        app.setStyleSheet(qss)

    win = MainWindow()
    win.resize(WINDOW_WIDTH, WINDOW_HEIGHT)
    screen = app.primaryScreen()
    if screen is not None:
        geo = win.frameGeometry()
        geo.moveCenter(screen.availableGeometry().center())
        win.move(geo.topLeft())
    win.show()
    log.info("%s started", APP_NAME)

    # Under dev_launcher.py the launcher owns the event loop
    if os.environ.get("__DEV_LAUNCHER__") != "1":
        sys.exit(app.exec())


if __name__ == "__main__":
    main()
