# receipts/modules/sales/sale.py
from __future__ import annotations

import copy
import itertools
from dataclasses import dataclass, field
from typing import Optional

from ...constants import DEFAULT_SALE_NAME
from ...tax import TaxGroup
from ...utils.validators import optional_count, optional_float

# Item ids are unique for the life of the process, across all sales.
_item_ids = itertools.count()


def _next_item_id() -> int:
    return next(_item_ids)


@dataclass
class SaleItem:
    id: int = field(default_factory=_next_item_id)
    name: str = ""
    price: Optional[float] = None
    quantity: Optional[int] = None
    tax_group: TaxGroup = TaxGroup.FOOD

    def price_value(self) -> float:
        return self.price if self.price is not None else 0.0

    def quantity_value(self) -> int:
        return self.quantity if self.quantity is not None else 0

    def line_total(self) -> float:
        return self.price_value() * self.quantity_value()

    def price_string(self) -> str:
        return "" if self.price is None else f"{self.price:.2f}"

    def quantity_string(self) -> str:
        return "" if self.quantity is None else str(self.quantity)

    def set_price_text(self, text: str) -> None:
        self.price = optional_float(text)

    def set_quantity_text(self, text: str) -> None:
        self.quantity = optional_count(text)


@dataclass
class Sale:
    items: list[SaleItem] = field(default_factory=list)
    service_charge_percent: Optional[float] = None
    gratuity_amount: Optional[float] = None
    name: str = DEFAULT_SALE_NAME

    # ---- totals ----------------------------------------------------------

    def calculate_subtotal(self) -> float:
        return sum((it.line_total() for it in self.items), 0.0)

    def calculate_tax(self) -> float:
        return sum((it.line_total() * it.tax_group.rate for it in self.items), 0.0)

    def calculate_service_charge(self) -> float:
        if self.service_charge_percent is None:
            return 0.0
        return self.calculate_subtotal() * (self.service_charge_percent / 100.0)

    def gratuity_value(self) -> float:
        return self.gratuity_amount if self.gratuity_amount is not None else 0.0

    def calculate_total(self) -> float:
        return (
            self.calculate_subtotal()
            + self.calculate_tax()
            + self.calculate_service_charge()
            + self.gratuity_value()
        )

    # ---- items -----------------------------------------------------------

    def add_item(self) -> SaleItem:
        item = SaleItem()
        self.items.append(item)
        return item

    def find_item(self, item_id: int) -> SaleItem | None:
        for it in self.items:
            if it.id == item_id:
                return it
        return None

    def remove_item(self, item_id: int) -> bool:
        before = len(self.items)
        self.items = [it for it in self.items if it.id != item_id]
        return len(self.items) != before

    def is_last_item(self, item_id: int) -> bool:
        return bool(self.items) and self.items[-1].id == item_id

    def copy(self) -> "Sale":
        """Independent copy; item ids are preserved."""
        return copy.deepcopy(self)
