import logging

from PySide6.QtWidgets import QStackedWidget, QWidget

from ..base_module import BaseModule
from ...widgets.receipt_preview import ReceiptPreview
from .edit import EditView
from .messages import Mode
from .sale import Sale
from .show import ShowView

_log = logging.getLogger(__name__)


class SaleController(BaseModule):
    """The sale screen: a read-only page and an edit page for one sale."""

    def __init__(self):
        super().__init__()
        self.view = QStackedWidget()
        self.show_view = ShowView()
        self.edit_view = EditView()
        self.view.addWidget(self.show_view)
        self.view.addWidget(self.edit_view)

        self._sale: Sale | None = None
        self._sale_id: int | None = None
        self.active_dialog = None  # receipt preview, kept alive while open

        self._wire()

    def get_widget(self) -> QWidget:
        return self.view

    def _wire(self):
        self.show_view.message.connect(self.message)
        self.edit_view.message.connect(self.message)
        self.show_view.printRequested.connect(self._print)

    # ---- rendering -------------------------------------------------------

    def render(self, sale: Sale, mode: Mode, sale_id: int | None = None) -> None:
        self._sale, self._sale_id = sale, sale_id
        page = self.edit_view if mode is Mode.EDIT else self.show_view
        page.render(sale)
        if self.view.currentWidget() is not page:
            self.view.setCurrentWidget(page)

    def current_mode(self) -> Mode:
        return Mode.EDIT if self.view.currentWidget() is self.edit_view else Mode.VIEW

    # ---- printing --------------------------------------------------------

    def _print(self):
        if self._sale is None:
            return
        _log.debug("Opening receipt preview for sale %s", self._sale_id)
        dlg = ReceiptPreview(self._sale, self._sale_id, parent=self.view)
        dlg.finished.connect(self._on_preview_closed)
        self.active_dialog = dlg
        dlg.show()

    def _on_preview_closed(self, _result: int):
        self.active_dialog = None
