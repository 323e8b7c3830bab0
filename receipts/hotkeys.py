# receipts/hotkeys.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Key(Enum):
    ESCAPE = "escape"
    TAB = "tab"


@dataclass(frozen=True)
class Hotkey:
    """A keyboard shortcut routed through update rather than Qt's defaults."""

    key: Key
    shift: bool = False

    @classmethod
    def escape(cls) -> "Hotkey":
        return cls(Key.ESCAPE)

    @classmethod
    def tab(cls, shift: bool = False) -> "Hotkey":
        return cls(Key.TAB, shift)
