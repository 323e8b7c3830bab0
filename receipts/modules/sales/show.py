"""A read-only view of a sale."""
from PySide6.QtCore import Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from ...widgets.table_view import TableView
from . import messages as m
from .model import SaleItemsModel
from .sale import Sale
from .totals import TotalsPanel


class ShowView(QWidget):
    message = Signal(object)
    printRequested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        root = QVBoxLayout(self)
        root.setContentsMargins(20, 20, 20, 20)
        root.setSpacing(20)

        # --- header: back, name, print, edit ---
        bar = QHBoxLayout()
        bar.setSpacing(10)
        self.btn_back = QPushButton("←")
        self.btn_back.setFixedWidth(40)
        self.lab_name = QLabel("")
        font = QFont()
        font.setPointSize(14)
        self.lab_name.setFont(font)
        self.btn_print = QPushButton("Print…")
        self.btn_edit = QPushButton("Edit")
        bar.addWidget(self.btn_back)
        bar.addWidget(self.lab_name)
        bar.addStretch(1)
        bar.addWidget(self.btn_print)
        bar.addWidget(self.btn_edit)
        root.addLayout(bar)

        # --- items ---
        self.tbl = TableView()
        self.model = SaleItemsModel([])
        self.tbl.setModel(self.model)
        root.addWidget(self.tbl, 1)

        self.totals = TotalsPanel(editable=False)
        root.addWidget(self.totals)

        self.btn_back.clicked.connect(lambda: self.message.emit(m.Back()))
        self.btn_edit.clicked.connect(lambda: self.message.emit(m.StartEdit()))
        self.btn_print.clicked.connect(self.printRequested)

    def render(self, sale: Sale) -> None:
        self.lab_name.setText(sale.name)
        self.model.replace(sale.items)
        self.tbl.resizeColumnsToContents()
        self.tbl.horizontalHeader().setStretchLastSection(True)
        self.totals.render(sale)
