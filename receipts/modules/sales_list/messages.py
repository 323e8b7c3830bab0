# receipts/modules/sales_list/messages.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NewSale:
    pass


@dataclass(frozen=True)
class SelectSale:
    sale_id: int


Message = Union[NewSale, SelectSale]
