#tests/test_utils.py
from smartmoney.utils import format_duration, money, round_half_up, to_number


def test_to_number_parses_form_values():
    assert to_number("1200") == 1200.0
    assert to_number(" 19.99 ") == 19.99
    assert to_number(7) == 7.0
    assert to_number("") is None
    assert to_number(None) is None
    assert to_number("abc") is None
    assert to_number("nan") is None
    assert to_number(True) is None


def test_round_half_up_matches_ui_rounding():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(2.4) == 2
    assert round_half_up(-0.5) == 0


def test_money():
    assert money(1234.56) == "$1,235"


def test_format_duration():
    assert format_duration(0) == "0 months"
    assert format_duration(1) == "1 month"
    assert format_duration(12) == "1 year"
    assert format_duration(27) == "2 years, 3 months"
    assert format_duration(13) == "1 year, 1 month"
