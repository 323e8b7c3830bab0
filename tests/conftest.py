# tests/conftest.py
# ---------------------------------------------------------------------
# Ground rules:
# - pytest-qt owns QApplication (use qapp/qtbot fixtures)
# - Run headless: QT_QPA_PLATFORM defaults to "offscreen"
# - Build sales in memory; nothing is persisted between tests
# - Silence benign Qt signal warnings
# ---------------------------------------------------------------------

from __future__ import annotations

import os
import re

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6 import QtCore

from receipts.app import App, HotkeyMsg, ListMsg, SaleMsg
from receipts.hotkeys import Hotkey
from receipts.modules.sales.messages import Save
from receipts.modules.sales_list.messages import NewSale
from receipts.modules.sales.sale import Sale, SaleItem
from receipts.tax import TaxGroup


# ---------- Qt: let pytest-qt own the app ----------
@pytest.fixture(scope="session")
def app(qapp):  # alias to match code that expects an `app` fixture
    return qapp


# ---------- Silence benign Qt warnings ----------
_BENIGN_QT_PATTERNS = [
    r"^QObject::connect: .* already connected",
    r"^QObject::disconnect: Unexpected null parameter",
    r"^QBasicTimer::stop: Failed\. Platform timer not running\.",
    r"^This plugin does not support",
]


@pytest.fixture(autouse=True, scope="session")
def _silence_benign_qt():
    """Filter common harmless Qt messages during tests."""
    rx = [re.compile(p) for p in _BENIGN_QT_PATTERNS]

    def handler(msg_type, context, message):
        text = str(message)
        for r in rx:
            if r.search(text):
                return
        print(text)

    original = QtCore.qInstallMessageHandler(handler)
    try:
        yield
    finally:
        QtCore.qInstallMessageHandler(original)


# ---------- Sales ----------
def _item(name="Item", price=None, quantity=None, tax_group=TaxGroup.FOOD) -> SaleItem:
    return SaleItem(name=name, price=price, quantity=quantity, tax_group=tax_group)


@pytest.fixture()
def make_item():
    return _item


@pytest.fixture()
def dinner() -> Sale:
    """
    Two food lines and one alcohol line:
      subtotal 2*12.50 + 1*8.00 + 3*6.00 = 51.00
      tax      (25.00 + 8.00)*0.08 + 18.00*0.10 = 4.44
    """
    return Sale(
        name="Table 4",
        items=[
            _item("Burger", 12.50, 2),
            _item("Salad", 8.00, 1),
            _item("Beer", 6.00, 3, TaxGroup.ALCOHOL),
        ],
    )


@pytest.fixture()
def state() -> App:
    return App()


@pytest.fixture()
def state_with_sale(state: App, dinner: Sale) -> App:
    """App holding `dinner` as sale #1, showing the list."""
    state.update(ListMsg(NewSale()))
    state.draft = (None, dinner)
    state.update(SaleMsg(None, Save()))
    state.update(HotkeyMsg(Hotkey.escape()))
    assert state.sales == {1: dinner}
    return state
