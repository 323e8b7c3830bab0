# receipts/modules/sales/actions.py
"""
State transitions for a single sale.

`update` applies a sale-screen message to the sale and returns an Action:
edits happen in place, while navigation and persistence requests come back
as an Operation for the application to perform.
"""
from __future__ import annotations

import logging

from ...action import Action
from ...hotkeys import Hotkey, Key
from ...utils.ui_helpers import focus_named, focus_next, focus_previous
from ...utils.validators import non_empty, try_parse_float
from . import messages as m
from .messages import Mode, Operation
from .sale import Sale, SaleItem

_log = logging.getLogger(__name__)

# Messages that only ask the parent to do something.
_OPERATIONS = {
    m.Back: Operation.BACK,
    m.StartEdit: Operation.START_EDIT,
    m.Save: Operation.SAVE,
    m.Cancel: Operation.CANCEL,
}


def form_id(field: str, item_id: int) -> str:
    """objectName of an item's input, e.g. 'price-3'."""
    return f"{field}-{item_id}"


def _focus_item(item: SaleItem) -> Action:
    return Action.from_task(focus_named(form_id("name", item.id)))


def _apply_field(item: SaleItem, field: m.Field) -> None:
    if isinstance(field, m.ItemName):
        item.name = field.value
    elif isinstance(field, m.ItemPrice):
        item.set_price_text(field.value)
    elif isinstance(field, m.ItemQuantity):
        item.set_quantity_text(field.value)
    elif isinstance(field, m.ItemTaxGroup):
        item.tax_group = field.value
    else:
        raise TypeError(f"Unknown item field: {field!r}")


def _amount_from_text(text: str, current: float | None) -> float | None:
    """Empty reads as 0; negative or unparsable keeps the current value."""
    if not non_empty(text):
        return 0.0
    ok, val = try_parse_float(text)
    if not ok or val < 0:
        _log.debug("Ignoring amount input %r", text)
        return current
    return val


def update(sale: Sale, message: m.Message) -> Action:
    op = _OPERATIONS.get(type(message))
    if op is not None:
        return Action.from_operation(op)

    if isinstance(message, m.NameInput):
        sale.name = message.value
        return Action.none()

    if isinstance(message, m.NameSubmit):
        return Action.from_task(focus_next())

    if isinstance(message, m.AddItem):
        return _focus_item(sale.add_item())

    if isinstance(message, m.RemoveItem):
        sale.remove_item(message.item_id)
        return Action.none()

    if isinstance(message, m.UpdateItem):
        item = sale.find_item(message.item_id)
        if item is not None:
            _apply_field(item, message.field)
        return Action.none()

    if isinstance(message, m.SubmitItem):
        if sale.is_last_item(message.item_id):
            return _focus_item(sale.add_item())
        return Action.from_task(focus_next())

    if isinstance(message, m.UpdateServiceCharge):
        sale.service_charge_percent = _amount_from_text(message.value, sale.service_charge_percent)
        return Action.none()

    if isinstance(message, m.UpdateGratuity):
        sale.gratuity_amount = _amount_from_text(message.value, sale.gratuity_amount)
        return Action.none()

    raise TypeError(f"Unknown sale message: {message!r}")


def handle_hotkey(sale: Sale, mode: Mode, hotkey: Hotkey) -> Action:
    if hotkey.key is Key.ESCAPE:
        return Action.from_operation(Operation.BACK)
    if mode is Mode.EDIT:
        return edit_hotkey(hotkey)
    return Action.none()


def edit_hotkey(hotkey: Hotkey) -> Action:
    """Tab walks the edit form forward, Shift+Tab backward."""
    if hotkey.key is Key.TAB:
        return Action.from_task(focus_previous() if hotkey.shift else focus_next())
    return Action.none()
