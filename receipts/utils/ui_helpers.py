from PySide6.QtWidgets import QApplication, QLineEdit, QMessageBox, QVBoxLayout, QWidget
from PySide6.QtCore import Qt

from ..action import Task


def wrap_center(w: QWidget) -> QWidget:
    host = QWidget()
    lay = QVBoxLayout(host)
    lay.addStretch(1)
    lay.addWidget(w, 0, Qt.AlignCenter)
    lay.addStretch(1)
    return host


def error(parent: QWidget, title: str, text: str):
    QMessageBox.critical(parent, title, text)


def sync_text(edit: QLineEdit, text: str) -> None:
    """Set `text` unless the user is typing in `edit` or it already matches."""
    if edit.hasFocus() or edit.text() == text:
        return
    edit.setText(text)


# ---- focus tasks (executed by the runtime after the next render) ----

def _focus_anchor() -> QWidget | None:
    return QApplication.focusWidget() or QApplication.activeWindow()


def focus_next() -> Task:
    def step():
        w = _focus_anchor()
        if w is not None:
            w.focusNextChild()

    return Task.effect(step)


def focus_previous() -> Task:
    def step():
        w = _focus_anchor()
        if w is not None:
            w.focusPreviousChild()

    return Task.effect(step)


def focus_named(object_name: str) -> Task:
    """Focus the widget with this objectName in the active window."""
    def step():
        active = QApplication.activeWindow()
        roots = [active] if active is not None else QApplication.topLevelWidgets()
        for root in roots:
            target = root.findChild(QWidget, object_name)
            if target is not None:
                target.setFocus(Qt.OtherFocusReason)
                return

    return Task.effect(step)
