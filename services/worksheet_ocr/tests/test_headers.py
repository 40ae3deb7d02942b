import pytest

from worksheet_ocr.headers import is_section_header


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("ASSETS", True),
        ("123 Cash", False),
        ("Cash on hand", False),
        ("Total Profit Statement", True),
        ("sales revenue", True),
        ("BALANCE SHEET", True),
        ("Total Assets 500", False),
        ("Rent expense", False),
    ],
)
def test_is_section_header(line, expected):
    assert is_section_header(line) is expected


def test_long_lines_are_never_headers():
    line = "STATEMENT OF ASSETS " * 3
    assert len(line.strip()) >= 50
    assert is_section_header(line) is False


def test_thresholds_are_configurable():
    assert is_section_header("CURRENT ASSETS", max_length=10) is False
    assert is_section_header("Mostly Caps Here", caps_ratio=0.1) is True


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("Income Statement 2024", True),
        ("BALANCE SHEET 2024", True),
        ("Total Assets 500", False),
        ("Total Assets $2,024", False),
        ("Total Assets (2024)", False),
    ],
)
def test_trailing_reporting_year_does_not_block_header(line, expected):
    assert is_section_header(line) is expected
