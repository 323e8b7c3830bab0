# receipts/modules/sales/messages.py
"""
Messages emitted by the sale screen, and the operations its update
function hands up to the application.

View mode emits Back and StartEdit. Edit mode emits everything else
(plus Back). Text inputs carry the raw text; parsing happens in update.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ...tax import TaxGroup


class Mode(Enum):
    VIEW = "view"
    EDIT = "edit"


class Operation(Enum):
    BACK = "back"
    SAVE = "save"
    START_EDIT = "start_edit"
    CANCEL = "cancel"


# ---- shared / view mode ----

@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class StartEdit:
    pass


# ---- edit mode: sale header & footer ----

@dataclass(frozen=True)
class NameInput:
    value: str


@dataclass(frozen=True)
class NameSubmit:
    pass


@dataclass(frozen=True)
class UpdateServiceCharge:
    value: str


@dataclass(frozen=True)
class UpdateGratuity:
    value: str


@dataclass(frozen=True)
class Save:
    pass


@dataclass(frozen=True)
class Cancel:
    pass


# ---- edit mode: items ----

@dataclass(frozen=True)
class ItemName:
    value: str


@dataclass(frozen=True)
class ItemQuantity:
    value: str


@dataclass(frozen=True)
class ItemPrice:
    value: str


@dataclass(frozen=True)
class ItemTaxGroup:
    value: TaxGroup


Field = Union[ItemName, ItemQuantity, ItemPrice, ItemTaxGroup]


@dataclass(frozen=True)
class AddItem:
    pass


@dataclass(frozen=True)
class RemoveItem:
    item_id: int


@dataclass(frozen=True)
class UpdateItem:
    item_id: int
    field: Field


@dataclass(frozen=True)
class SubmitItem:
    item_id: int


Message = Union[
    Back, StartEdit, NameInput, NameSubmit, AddItem, RemoveItem, UpdateItem,
    SubmitItem, UpdateServiceCharge, UpdateGratuity, Save, Cancel,
]
