"""Printable receipt rendering."""

from receipts.modules.sales.sale import Sale
from receipts.widgets.receipt_preview import ReceiptPreview, render_receipt_html


def test_receipt_lists_items_and_totals(dinner):
    dinner.service_charge_percent = 10.0
    dinner.gratuity_amount = 5.0
    html = render_receipt_html(dinner, 3)
    assert "Table 4" in html
    assert "Receipt #3" in html
    for text in ("Burger", "Salad", "Beer", "Alcohol (10%)"):
        assert text in html
    assert "$51.00" in html
    assert "$4.44" in html
    assert "10.0%" in html
    assert "$65.54" in html


def test_receipt_for_unsaved_untitled_sale():
    html = render_receipt_html(Sale(name=""))
    assert "Untitled sale" in html
    assert "Receipt #" not in html
    assert "No items" in html


def test_receipt_escapes_names(make_item):
    sale = Sale(name="<b>VIP</b>", items=[make_item("Fish & Chips", 9.0, 1)])
    html = render_receipt_html(sale, 1)
    assert "&lt;b&gt;VIP&lt;/b&gt;" in html
    assert "Fish &amp; Chips" in html


def test_preview_dialog_shows_receipt(qtbot, dinner):
    dlg = ReceiptPreview(dinner, 1)
    qtbot.addWidget(dlg)
    assert dlg.windowTitle() == "Receipt #1"
    text = dlg.web_view.toPlainText()
    assert "Burger" in text
    assert "$55.44" in text
