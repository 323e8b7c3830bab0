from PySide6.QtWidgets import QHBoxLayout, QPushButton, QStackedWidget, QVBoxLayout, QWidget

from ...utils.ui_helpers import wrap_center
from ...widgets.table_view import TableView
from .model import SalesTableModel


class SalesListView(QWidget):
    """Empty-state call to action, or a 'New Sale' toolbar over the sales table."""

    def __init__(self, parent=None):
        super().__init__(parent)
        root = QVBoxLayout(self)
        root.setContentsMargins(20, 20, 20, 20)

        self.pages = QStackedWidget()
        root.addWidget(self.pages, 1)

        # --- empty state ---
        self.btn_first_sale = QPushButton("Create your first sale →")
        self.empty_page = wrap_center(self.btn_first_sale)
        self.pages.addWidget(self.empty_page)

        # --- list ---
        self.list_page = QWidget()
        lv = QVBoxLayout(self.list_page)
        lv.setContentsMargins(0, 0, 0, 0)
        lv.setSpacing(20)
        bar = QHBoxLayout()
        bar.addStretch(1)
        self.btn_new = QPushButton("New Sale")
        self.btn_new.setObjectName("success")
        bar.addWidget(self.btn_new)
        lv.addLayout(bar)

        self.tbl = TableView()
        self.model = SalesTableModel([])
        self.tbl.setModel(self.model)
        lv.addWidget(self.tbl, 1)
        self.pages.addWidget(self.list_page)

    def show_empty(self, empty: bool):
        self.pages.setCurrentWidget(self.empty_page if empty else self.list_page)

    def is_empty_shown(self) -> bool:
        return self.pages.currentWidget() is self.empty_page
