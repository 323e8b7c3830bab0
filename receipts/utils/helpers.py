# utils/helpers.py
from typing import Optional, Union

from ..constants import CURRENCY_SYMBOL

NumberLike = Union[float, int, str]


def fmt_money(v: NumberLike, places: int = 2, *, symbol: str = CURRENCY_SYMBOL) -> str:
    """
    Format a number as money: currency symbol and a fixed number of decimals,
    e.g. "$1234.50". Negative amounts put the sign before the symbol.

    Raises ValueError if `v` is not a number.
    """
    x = float(v)
    sign = "-" if x < 0 and round(abs(x), places) != 0 else ""
    return f"{sign}{symbol}{abs(x):.{places}f}"


def fmt_percent(v: Optional[float], places: int = 1) -> str:
    """Percent with a fixed number of decimals; missing values read as 0."""
    return f"{(v or 0.0):.{places}f}%"
