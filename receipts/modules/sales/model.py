from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex

from ...utils.helpers import fmt_money
from .sale import SaleItem


class SaleItemsModel(QAbstractTableModel):
    HEADERS = ["Item Name", "Qty", "Price", "Tax Group", "Total"]
    _ALIGN = [
        Qt.AlignLeft | Qt.AlignVCenter,
        Qt.AlignCenter,
        Qt.AlignRight | Qt.AlignVCenter,
        Qt.AlignLeft | Qt.AlignVCenter,
        Qt.AlignRight | Qt.AlignVCenter,
    ]

    def __init__(self, rows: list[SaleItem] | None = None):
        super().__init__()
        self._rows = list(rows or [])

    def rowCount(self, parent=QModelIndex()):
        return len(self._rows)

    def columnCount(self, parent=QModelIndex()):
        return len(self.HEADERS)

    def data(self, idx, role=Qt.DisplayRole):
        if not idx.isValid():
            return None
        if role == Qt.TextAlignmentRole:
            return int(self._ALIGN[idx.column()])
        if role in (Qt.DisplayRole, Qt.EditRole):
            it = self._rows[idx.row()]
            m = [
                it.name,
                str(it.quantity_value()),
                fmt_money(it.price_value()),
                it.tax_group.label,
                fmt_money(it.line_total()),
            ]
            return m[idx.column()]
        return None

    def headerData(self, s, o, role=Qt.DisplayRole):
        if o == Qt.Horizontal and role == Qt.DisplayRole:
            return self.HEADERS[s]
        return super().headerData(s, o, role)

    def replace(self, rows: list[SaleItem]):
        self.beginResetModel()
        self._rows = list(rows)
        self.endResetModel()
