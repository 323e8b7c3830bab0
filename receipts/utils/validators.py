# utils/validators.py
from typing import Optional


def non_empty(text: str) -> bool:
    """
    True if `text` is not None/empty after stripping whitespace.
    """
    return bool(text and str(text).strip())


# ---- Numeric parsing & validators ----

def try_parse_float(x):
    """
    Best-effort parse to float.

    Returns:
        (ok: bool, value: float|None)

    ok == False means parsing failed and value is None. NaN and infinity
    are treated as failures.
    """
    try:
        val = float(str(x).strip())
    except (TypeError, ValueError):
        return False, None
    if val != val or val in (float("inf"), float("-inf")):
        return False, None
    return True, val


def try_parse_count(x):
    """
    Best-effort parse to a non-negative integer ("3", " 12 ").

    Returns (ok, value) like try_parse_float. Decimals and negatives fail.
    """
    try:
        val = int(str(x).strip())
    except (TypeError, ValueError):
        return False, None
    if val < 0:
        return False, None
    return True, val


def optional_float(text: str) -> Optional[float]:
    """Empty or unparsable text -> None, otherwise the parsed float."""
    if not non_empty(text):
        return None
    ok, val = try_parse_float(text)
    return val if ok else None


def optional_count(text: str) -> Optional[int]:
    """Empty, unparsable or negative text -> None, otherwise the integer."""
    if not non_empty(text):
        return None
    ok, val = try_parse_count(text)
    return val if ok else None
