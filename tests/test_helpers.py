import pytest

from receipts.utils.helpers import fmt_money, fmt_percent
from receipts.utils.validators import (
    optional_count,
    optional_float,
    try_parse_count,
    try_parse_float,
)


def test_fmt_money():
    assert fmt_money(0) == "$0.00"
    assert fmt_money(1234.5) == "$1234.50"
    assert fmt_money("7") == "$7.00"
    assert fmt_money(-3.456) == "-$3.46"
    assert fmt_money(-0.001) == "$0.00"


def test_fmt_money_rejects_non_numbers():
    with pytest.raises(ValueError):
        fmt_money("abc")


def test_fmt_percent():
    assert fmt_percent(None) == "0.0%"
    assert fmt_percent(12.5) == "12.5%"


def test_float_parsing():
    assert try_parse_float(" 2.50 ") == (True, 2.5)
    assert try_parse_float("nan") == (False, None)
    assert try_parse_float("") == (False, None)


def test_count_parsing():
    assert try_parse_count("4") == (True, 4)
    assert try_parse_count("-1") == (False, None)
    assert try_parse_count("1.5") == (False, None)


def test_optional_parsers():
    assert optional_float("") is None
    assert optional_float("   ") is None
    assert optional_float("abc") is None
    assert optional_float("9.99") == pytest.approx(9.99)
    assert optional_count("") is None
    assert optional_count("-2") is None
    assert optional_count("12") == 12
