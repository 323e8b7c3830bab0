"""End-to-end flows through MainWindow with real widgets."""

import pytest
from PySide6.QtCore import Qt

import receipts.main as main_mod
from receipts.app import App, ListMsg, ListScreen, SaleScreen
from receipts.main import MainWindow
from receipts.modules.sales.messages import Mode
from receipts.modules.sales_list.messages import SelectSale


@pytest.fixture()
def window(qtbot):
    w = MainWindow(App())
    qtbot.addWidget(w)
    w.show()
    qtbot.waitExposed(w)
    return w


def _edit_view(window):
    return window.sale_ctrl.edit_view


def test_starts_on_empty_list(window):
    assert window.windowTitle() == "Receipts"
    assert window.stack.currentWidget() is window.list_ctrl.get_widget()
    assert window.list_ctrl.view.is_empty_shown()


def test_create_and_save_sale(qtbot, window):
    window.list_ctrl.view.btn_first_sale.click()
    assert window.app.screen == SaleScreen(Mode.EDIT, None)
    assert window.stack.currentWidget() is window.sale_ctrl.get_widget()
    assert window.sale_ctrl.current_mode() is Mode.EDIT
    assert window.windowTitle() == "Receipts • New Sale • Edit"

    edit = _edit_view(window)
    edit.edt_name.clear()
    qtbot.keyClicks(edit.edt_name, "Table 1")
    edit.btn_add_item.click()
    item_id = window.app.draft[1].items[0].id
    row = edit.row_widgets(item_id)
    qtbot.keyClicks(row.name, "Soup")
    qtbot.keyClicks(row.price, "10")
    qtbot.keyClicks(row.quantity, "2")
    assert edit.totals.lab_total.text() == "$21.60"

    edit.btn_save.click()
    assert window.app.screen == SaleScreen(Mode.VIEW, 1)
    assert window.sale_ctrl.current_mode() is Mode.VIEW
    assert window.windowTitle() == "Receipts • Table 1 (#1)"
    show = window.sale_ctrl.show_view
    assert show.lab_name.text() == "Table 1"
    assert show.model.rowCount() == 1
    assert show.totals.lab_total.text() == "$21.60"

    show.btn_back.click()
    assert window.app.screen == ListScreen()
    lst = window.list_ctrl.view
    assert not lst.is_empty_shown()
    assert lst.model.rowCount() == 1
    assert lst.model.index(0, 3).data() == "Total: $21.60"


def test_select_and_edit_existing_sale(window, state_with_sale):
    window.app = state_with_sale
    window.render()
    lst = window.list_ctrl.view
    lst.tbl.clicked.emit(lst.model.index(0, 1))
    assert window.app.screen == SaleScreen(Mode.VIEW, 1)

    window.sale_ctrl.show_view.btn_edit.click()
    assert window.app.screen == SaleScreen(Mode.EDIT, 1)
    assert _edit_view(window).tbl.rowCount() == 3
    assert window.windowTitle() == "Receipts • Table 4 (#1) • Edit"

    _edit_view(window).btn_cancel.click()
    assert window.app.screen == SaleScreen(Mode.VIEW, 1)


def test_escape_navigates_back(qtbot, window):
    window.list_ctrl.view.btn_first_sale.click()
    qtbot.keyClick(_edit_view(window).edt_name, Qt.Key_Escape)
    assert window.app.screen == SaleScreen(Mode.VIEW, None)
    qtbot.keyClick(window.sale_ctrl.show_view.btn_back, Qt.Key_Escape)
    assert window.app.screen == ListScreen()


def test_escape_ignored_on_list(qtbot, window):
    qtbot.keyClick(window.list_ctrl.view.btn_first_sale, Qt.Key_Escape)
    assert window.app.screen == ListScreen()


def test_errors_are_reported_not_raised(window, monkeypatch):
    shown = []
    monkeypatch.setattr(main_mod, "error", lambda parent, title, text: shown.append(text))
    window.dispatch(ListMsg(SelectSale(99)))
    assert shown == ["Sale #99 does not exist."]
    assert window.app.screen == ListScreen()

