"""Display models behind the read-only sale table and the sales list."""

from PySide6.QtCore import Qt

from receipts.modules.sales.model import SaleItemsModel
from receipts.modules.sales.sale import Sale, SaleItem
from receipts.modules.sales_list.model import SalesTableModel
from receipts.tax import TaxGroup


def test_item_row_cells(dinner):
    model = SaleItemsModel(dinner.items)
    assert model.rowCount() == 3
    row = [model.index(2, c).data() for c in range(model.columnCount())]
    assert row == ["Beer", "3", "$6.00", "Alcohol (10%)", "$18.00"]
    assert model.headerData(1, Qt.Horizontal) == "Qty"


def test_large_quantities_show_every_digit():
    model = SaleItemsModel([
        SaleItem(name="Screws", price=0.01, quantity=1000000),
        SaleItem(name="Washers", price=0.01, quantity=1234567),
    ])
    assert model.index(0, 1).data() == "1000000"
    assert model.index(1, 1).data() == "1234567"
    assert model.index(1, 4).data() == "$12345.67"


def test_missing_quantity_shows_zero():
    model = SaleItemsModel([SaleItem(name="Tea", price=2.0, tax_group=TaxGroup.NON_TAXABLE)])
    assert model.index(0, 1).data() == "0"
    assert model.index(0, 4).data() == "$0.00"


def test_sales_list_total_cell(dinner):
    big = Sale(name="Banquet", items=[SaleItem(name="Buffet", price=1000.0, quantity=2)])
    model = SalesTableModel([(1, dinner), (2, big)])
    assert model.index(0, 1).data() == "Table 4"
    assert model.index(0, 2).data() == 3
    assert model.index(0, 3).data() == "Total: $55.44"
    # 2000.00 + 160.00 tax
    assert model.index(1, 3).data() == "Total: $2160.00"
    assert model.sale_id_at(1) == 2
