# receipts/app.py
"""
Application state and navigation.

The App keeps every sale in memory, plus a single *draft* used while
editing. Screens:

  ListScreen                 all sales
  SaleScreen(VIEW, id)       read-only sale, or its draft when one exists
  SaleScreen(EDIT, id)       editing the draft for `id` (None: new sale)

`update` is the only entry point for messages. Child updates return an
Action; its operation is performed here and its task is chained after any
task the operation produced. The runtime (main.MainWindow) renders and then
executes the returned Task.
"""
from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Optional, Union

from .action import Action, Task
from .constants import APP_NAME, FIRST_SALE_ID, TITLE_SEPARATOR, UNTITLED_SALE_NAME
from .hotkeys import Hotkey
from .modules.sales import actions as sale_actions
from .modules.sales.messages import Message as SaleMessage, Mode, Operation
from .modules.sales.sale import Sale
from .modules.sales_list.messages import Message as ListMessage, NewSale, SelectSale
from .utils.ui_helpers import focus_next

_log = logging.getLogger(__name__)


class UnknownSaleError(LookupError):
    """A screen or operation refers to a sale id that is not stored."""

    def __init__(self, sale_id):
        super().__init__(f"Sale #{sale_id} does not exist.")
        self.sale_id = sale_id


# ---- screens ----

@dataclass(frozen=True)
class ListScreen:
    pass


@dataclass(frozen=True)
class SaleScreen:
    mode: Mode
    sale_id: Optional[int] = None


Screen = Union[ListScreen, SaleScreen]


# ---- top-level messages ----

@dataclass(frozen=True)
class ListMsg:
    message: ListMessage


@dataclass(frozen=True)
class SaleMsg:
    sale_id: Optional[int]
    message: SaleMessage


@dataclass(frozen=True)
class HotkeyMsg:
    hotkey: Hotkey


AppMessage = Union[ListMsg, SaleMsg, HotkeyMsg]


@dataclass(frozen=True)
class SaleOperation:
    sale_id: Optional[int]
    operation: Operation


class App:
    def __init__(self):
        self.screen: Screen = ListScreen()
        self.sales: dict[int, Sale] = {}
        self.draft: tuple[Optional[int], Sale] = (None, Sale())
        self._ids = itertools.count(FIRST_SALE_ID)

    # ---- lookups ---------------------------------------------------------

    def stored_sale(self, sale_id: int) -> Sale:
        try:
            return self.sales[sale_id]
        except KeyError:
            raise UnknownSaleError(sale_id) from None

    def sale_for(self, sale_id: Optional[int]) -> Sale:
        """
        The sale a screen shows: the draft when it belongs to `sale_id`
        (including unsaved edits after leaving edit mode), otherwise the
        stored record.
        """
        draft_id, draft = self.draft
        if sale_id is None or draft_id == sale_id:
            return draft
        return self.stored_sale(sale_id)

    def current_sale(self) -> Sale | None:
        if isinstance(self.screen, SaleScreen):
            return self.sale_for(self.screen.sale_id)
        return None

    def sorted_sales(self) -> list[tuple[int, Sale]]:
        return sorted(self.sales.items())

    def title(self) -> str:
        screen = self.screen
        if not isinstance(screen, SaleScreen):
            return APP_NAME
        sale = self.sale_for(screen.sale_id)
        name = sale.name or UNTITLED_SALE_NAME
        if screen.sale_id is not None:
            name = f"{name} (#{screen.sale_id})"
        parts = [APP_NAME, name]
        if screen.mode is Mode.EDIT:
            parts.append("Edit")
        return TITLE_SEPARATOR.join(parts)

    # ---- update ----------------------------------------------------------

    def update(self, message: AppMessage) -> Task:
        if isinstance(message, ListMsg):
            return self._update_list(message.message)
        if isinstance(message, HotkeyMsg):
            return self._update_hotkey(message.hotkey)
        if isinstance(message, SaleMsg):
            sale = self.sale_for(message.sale_id)
            action = sale_actions.update(sale, message.message)
            return self._apply(message.sale_id, action)
        raise TypeError(f"Unknown message: {message!r}")

    def _update_list(self, message: ListMessage) -> Task:
        if isinstance(message, NewSale):
            self.draft = (None, Sale())
            self.screen = SaleScreen(Mode.EDIT, None)
            _log.debug("Started a new sale")
            return focus_next()
        if isinstance(message, SelectSale):
            self.stored_sale(message.sale_id)
            self.screen = SaleScreen(Mode.VIEW, message.sale_id)
            return Task.none()
        raise TypeError(f"Unknown list message: {message!r}")

    def _update_hotkey(self, hotkey: Hotkey) -> Task:
        screen = self.screen
        if not isinstance(screen, SaleScreen):
            return Task.none()
        sale = self.sale_for(screen.sale_id)
        action = sale_actions.handle_hotkey(sale, screen.mode, hotkey)
        return self._apply(screen.sale_id, action)

    def _apply(self, sale_id: Optional[int], action: Action) -> Task:
        action = action.map_operation(lambda op: SaleOperation(sale_id, op)).map(
            lambda msg: SaleMsg(sale_id, msg)
        )
        op_task = self.perform(action.operation) if action.operation is not None else Task.none()
        return op_task.chain(action.task)

    # ---- operations ------------------------------------------------------

    def perform(self, operation: SaleOperation) -> Task:
        sale_id, op = operation.sale_id, operation.operation
        _log.debug("Performing %s for sale %s", op.name, sale_id)

        if op is Operation.BACK:
            screen = self.screen
            if isinstance(screen, SaleScreen):
                if screen.mode is Mode.EDIT:
                    self.screen = SaleScreen(Mode.VIEW, sale_id)
                else:
                    self.screen = ListScreen()
        elif op is Operation.SAVE:
            self.screen = SaleScreen(Mode.VIEW, self._save_draft())
        elif op is Operation.START_EDIT:
            if sale_id is not None:
                self.draft = (sale_id, self.stored_sale(sale_id).copy())
            self.screen = SaleScreen(Mode.EDIT, sale_id)
        elif op is Operation.CANCEL:
            if sale_id is not None:
                self.draft = (sale_id, self.stored_sale(sale_id).copy())
            else:
                self.draft = (None, Sale())
            self.screen = SaleScreen(Mode.VIEW, sale_id)
        else:
            raise ValueError(f"Unknown operation: {op!r}")
        return Task.none()

    def _save_draft(self) -> int:
        draft_id, draft = self.draft
        if draft_id is not None:
            self.stored_sale(draft_id)
            self.sales[draft_id] = draft.copy()
            _log.info("Updated sale #%s (%s)", draft_id, draft.name)
            return draft_id
        new_id = next(self._ids)
        self.sales[new_id] = draft
        self.draft = (None, Sale())
        _log.info("Created sale #%s (%s)", new_id, draft.name)
        return new_id
