from PySide6.QtCore import QObject, Signal
from PySide6.QtWidgets import QWidget


class BaseModule(QObject):
    """
    A screen: owns a widget, re-emits user input as `message`, and is
    brought up to date with `render(...)` after every update.
    """

    message = Signal(object)

    def get_widget(self) -> QWidget:
        raise NotImplementedError

    def render(self, *args, **kwargs) -> None:
        raise NotImplementedError
