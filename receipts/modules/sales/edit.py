"""Edit new and existing sales."""
from __future__ import annotations

from dataclasses import dataclass
from functools import partial

from PySide6.QtCore import QLocale, Qt, Signal
from PySide6.QtGui import QIntValidator
from PySide6.QtWidgets import (
    QAbstractItemView, QComboBox, QHBoxLayout, QHeaderView, QLabel, QLineEdit,
    QPushButton, QTableWidget, QVBoxLayout, QWidget,
)

from ...tax import TaxGroup
from ...utils.helpers import fmt_money
from ...utils.ui_helpers import sync_text
from . import messages as m
from .actions import form_id
from .sale import Sale, SaleItem
from .totals import TotalsPanel, amount_validator


@dataclass
class _ItemRow:
    """Widgets for one line item; looked up by item id."""
    name: QLineEdit
    quantity: QLineEdit
    price: QLineEdit
    tax_group: QComboBox
    total: QLabel
    remove: QPushButton


class EditView(QWidget):
    COLS = ["Item Name", "Qty", "Price", "Tax Group", "Total", ""]
    COL_NAME, COL_QTY, COL_PRICE, COL_TAX, COL_TOTAL, COL_REMOVE = range(6)

    message = Signal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._rows: dict[int, _ItemRow] = {}
        self._order: list[int] = []

        root = QVBoxLayout(self)
        root.setContentsMargins(20, 20, 20, 20)
        root.setSpacing(20)

        # --- header: name, cancel, save ---
        bar = QHBoxLayout()
        self.edt_name = QLineEdit()
        self.edt_name.setObjectName("sale-name")
        self.edt_name.setPlaceholderText("Sale Name")
        self.edt_name.setMaximumWidth(360)
        self.btn_cancel = QPushButton("Cancel")
        self.btn_cancel.setObjectName("danger")
        self.btn_save = QPushButton("Save")
        self.btn_save.setObjectName("success")
        bar.addSpacing(40)
        bar.addWidget(self.edt_name)
        bar.addStretch(1)
        bar.addWidget(self.btn_cancel)
        bar.addWidget(self.btn_save)
        root.addLayout(bar)

        # --- items ---
        self.btn_add_item = QPushButton("+ Add Item")
        add = QHBoxLayout()
        add.addWidget(self.btn_add_item)
        add.addStretch(1)
        root.addLayout(add)

        self.tbl = QTableWidget(0, len(self.COLS))
        self.tbl.setHorizontalHeaderLabels(self.COLS)
        self.tbl.verticalHeader().setVisible(False)
        self.tbl.setSelectionMode(QAbstractItemView.NoSelection)
        self.tbl.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.tbl.setFocusPolicy(Qt.NoFocus)
        header = self.tbl.horizontalHeader()
        header.setSectionResizeMode(self.COL_NAME, QHeaderView.Stretch)
        self.tbl.setColumnWidth(self.COL_QTY, 80)
        self.tbl.setColumnWidth(self.COL_PRICE, 100)
        self.tbl.setColumnWidth(self.COL_TAX, 140)
        self.tbl.setColumnWidth(self.COL_TOTAL, 100)
        self.tbl.setColumnWidth(self.COL_REMOVE, 30)
        root.addWidget(self.tbl, 1)

        self.totals = TotalsPanel(editable=True)
        root.addWidget(self.totals)

        # --- wiring ---
        self.edt_name.textEdited.connect(lambda text: self._emit(m.NameInput(text)))
        self.edt_name.returnPressed.connect(lambda: self._emit(m.NameSubmit()))
        self.btn_cancel.clicked.connect(lambda: self._emit(m.Cancel()))
        self.btn_save.clicked.connect(lambda: self._emit(m.Save()))
        self.btn_add_item.clicked.connect(lambda: self._emit(m.AddItem()))
        self.totals.serviceChargeEdited.connect(lambda text: self._emit(m.UpdateServiceCharge(text)))
        self.totals.gratuityEdited.connect(lambda text: self._emit(m.UpdateGratuity(text)))
        self.totals.submitted.connect(lambda: self._emit(m.Save()))

    def _emit(self, msg) -> None:
        self.message.emit(msg)

    # ---- public ----------------------------------------------------------

    def row_widgets(self, item_id: int) -> _ItemRow | None:
        return self._rows.get(item_id)

    def render(self, sale: Sale) -> None:
        sync_text(self.edt_name, sale.name)
        self._sync_rows(sale.items)
        for item in sale.items:
            self._render_row(self._rows[item.id], item)
        self.totals.render(sale)

    # ---- rows ------------------------------------------------------------

    def _sync_rows(self, items: list[SaleItem]) -> None:
        """Drop rows for removed items, append rows for new ones."""
        ids = [it.id for it in items]
        if ids == self._order:
            return
        keep = set(ids)
        for r in range(len(self._order) - 1, -1, -1):
            item_id = self._order[r]
            if item_id not in keep:
                self.tbl.removeRow(r)
                del self._order[r]
                del self._rows[item_id]
        if self._order != ids[:len(self._order)]:
            # out of order: rebuild from scratch
            self.tbl.setRowCount(0)
            self._order.clear()
            self._rows.clear()
        for item_id in ids[len(self._order):]:
            self._append_row(item_id)

    def _append_row(self, item_id: int) -> None:
        r = self.tbl.rowCount()
        self.tbl.insertRow(r)

        name = QLineEdit()
        name.setObjectName(form_id("name", item_id))
        name.setPlaceholderText("Item name")

        qty = QLineEdit()
        qty.setObjectName(form_id("quantity", item_id))
        qty.setPlaceholderText("Quantity")
        qty.setAlignment(Qt.AlignCenter)
        qv = QIntValidator(0, 2_147_483_647, qty)
        qv.setLocale(QLocale.c())
        qty.setValidator(qv)

        price = QLineEdit()
        price.setObjectName(form_id("price", item_id))
        price.setPlaceholderText("Price")
        price.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        price.setValidator(amount_validator(1e9, price))

        tax = QComboBox()
        tax.setObjectName(form_id("tax", item_id))
        for g in TaxGroup.ALL:
            tax.addItem(g.label, g.name)

        total = QLabel("")
        total.setAlignment(Qt.AlignRight | Qt.AlignVCenter)

        remove = QPushButton("×")
        remove.setObjectName("danger")
        remove.setFixedWidth(25)

        for col, w in (
            (self.COL_NAME, name), (self.COL_QTY, qty), (self.COL_PRICE, price),
            (self.COL_TAX, tax), (self.COL_TOTAL, total), (self.COL_REMOVE, remove),
        ):
            self.tbl.setCellWidget(r, col, w)

        name.textEdited.connect(partial(self._field_edited, item_id, m.ItemName))
        qty.textEdited.connect(partial(self._field_edited, item_id, m.ItemQuantity))
        price.textEdited.connect(partial(self._field_edited, item_id, m.ItemPrice))
        for w in (name, qty, price):
            w.returnPressed.connect(partial(self._submit_item, item_id))
        tax.activated.connect(partial(self._tax_changed, item_id, tax))
        remove.clicked.connect(partial(self._remove_item, item_id))

        self._rows[item_id] = _ItemRow(name, qty, price, tax, total, remove)
        self._order.append(item_id)

    def _render_row(self, row: _ItemRow, item: SaleItem) -> None:
        sync_text(row.name, item.name)
        sync_text(row.quantity, item.quantity_string())
        sync_text(row.price, item.price_string())
        idx = row.tax_group.findData(item.tax_group.name)
        if idx >= 0 and idx != row.tax_group.currentIndex():
            row.tax_group.setCurrentIndex(idx)
        row.total.setText(fmt_money(item.line_total()))

    # ---- slots -----------------------------------------------------------

    def _field_edited(self, item_id: int, kind, text: str) -> None:
        self._emit(m.UpdateItem(item_id, kind(text)))

    def _submit_item(self, item_id: int, *_) -> None:
        self._emit(m.SubmitItem(item_id))

    def _tax_changed(self, item_id: int, combo: QComboBox, index: int) -> None:
        key = combo.itemData(index)
        if key in TaxGroup.__members__:
            self._emit(m.UpdateItem(item_id, m.ItemTaxGroup(TaxGroup[key])))

    def _remove_item(self, item_id: int, *_) -> None:
        self._emit(m.RemoveItem(item_id))
