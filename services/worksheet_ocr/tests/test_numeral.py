from decimal import Decimal

import pytest

from worksheet_ocr.models import ParsedLine
from worksheet_ocr.numeral import find_embedded_value, has_trailing_value, parse_line, to_decimal


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("Cash 1,234.50", ParsedLine(label="Cash", value="1234.50")),
        ("Miscellaneous Supplies", ParsedLine(label="Miscellaneous Supplies", value="")),
        ("Rent expense: $2,000", ParsedLine(label="Rent expense", value="2000")),
        ("Drawings (500)", ParsedLine(label="Drawings", value="-500")),
        ("Wages 1200  ", ParsedLine(label="Wages", value="1200")),
    ],
)
def test_parse_line(line, expected):
    assert parse_line(line) == expected


def test_has_trailing_value():
    assert has_trailing_value("Total Assets 500")
    assert not has_trailing_value("Total Profit Statement")
    assert not has_trailing_value("2024 Budget")


def test_find_embedded_value_prefers_last_amount():
    assert find_embedded_value("Accounts Receivab1e 4,200") == "4200"
    assert find_embedded_value("Cash (petty) 1,250.75") == "1250.75"
    assert find_embedded_value("Cash") == ""


def test_to_decimal():
    assert to_decimal("1,200.50") == Decimal("1200.50")
    assert to_decimal("-500") == Decimal("-500")
    assert to_decimal("") is None
    assert to_decimal(None) is None
    assert to_decimal("n/a") is None


def test_find_embedded_value_keeps_parenthesized_sign():
    assert find_embedded_value("Drawings (500)") == "-500"
    assert find_embedded_value("Accumulated Depreciation (1,000)") == "-1000"
    assert find_embedded_value("Note (12 months) 300") == "300"
