from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex

from ...utils.helpers import fmt_money
from ..sales.sale import Sale


class SalesTableModel(QAbstractTableModel):
    HEADERS = ["#", "Sale", "Items", "Total"]

    def __init__(self, rows: list[tuple[int, Sale]] | None = None):
        super().__init__()
        self._rows = list(rows or [])

    def rowCount(self, parent=QModelIndex()):
        return len(self._rows)

    def columnCount(self, parent=QModelIndex()):
        return len(self.HEADERS)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        sale_id, sale = self._rows[index.row()]
        c = index.column()
        if role == Qt.TextAlignmentRole and c in (0, 2, 3):
            return int(Qt.AlignRight | Qt.AlignVCenter)
        if role in (Qt.DisplayRole, Qt.EditRole):
            mapping = [
                sale_id,
                sale.name,
                len(sale.items),
                f"Total: {fmt_money(sale.calculate_total())}",
            ]
            return mapping[c] if c < len(mapping) else None
        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if orientation == Qt.Horizontal and role == Qt.DisplayRole:
            return self.HEADERS[section] if section < len(self.HEADERS) else None
        return super().headerData(section, orientation, role)

    def sale_id_at(self, row: int) -> int:
        return self._rows[row][0]

    def replace(self, rows: list[tuple[int, Sale]]):
        self.beginResetModel()
        self._rows = list(rows)
        self.endResetModel()
