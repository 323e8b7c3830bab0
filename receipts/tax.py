# receipts/tax.py
from __future__ import annotations

from enum import Enum


class TaxGroup(Enum):
    """Tax bucket of a line item. Value is (label, rate)."""

    FOOD = ("Food (8%)", 0.08)
    ALCOHOL = ("Alcohol (10%)", 0.10)
    NON_TAXABLE = ("Non-taxable", 0.0)
    OTHER = ("Other (8%)", 0.08)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def rate(self) -> float:
        return self.value[1]

    def __str__(self) -> str:
        return self.label


# Display order for pickers
TaxGroup.ALL = (TaxGroup.FOOD, TaxGroup.ALCOHOL, TaxGroup.NON_TAXABLE, TaxGroup.OTHER)
