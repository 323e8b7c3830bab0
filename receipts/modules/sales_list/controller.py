from PySide6.QtWidgets import QWidget

from ..base_module import BaseModule
from ..sales.sale import Sale
from .messages import NewSale, SelectSale
from .view import SalesListView


class SalesListController(BaseModule):
    def __init__(self):
        super().__init__()
        self.view = SalesListView()
        self._wire()

    def get_widget(self) -> QWidget:
        return self.view

    def _wire(self):
        self.view.btn_first_sale.clicked.connect(lambda: self.message.emit(NewSale()))
        self.view.btn_new.clicked.connect(lambda: self.message.emit(NewSale()))
        self.view.tbl.clicked.connect(self._on_row_clicked)
        self.view.tbl.activated.connect(self._on_row_clicked)

    def _on_row_clicked(self, index):
        if not index.isValid():
            return
        self.message.emit(SelectSale(self.view.model.sale_id_at(index.row())))

    def render(self, sales: list[tuple[int, Sale]]) -> None:
        """`sales` as (id, sale) pairs in display order."""
        self.view.model.replace(sales)
        self.view.tbl.resizeColumnsToContents()
        self.view.tbl.horizontalHeader().setStretchLastSection(True)
        self.view.show_empty(not sales)
