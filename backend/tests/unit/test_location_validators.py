"""Unit tests: location request field helpers."""
import pytest

from utils.location_validators import coerce_page, get_positive_int, get_str, normalize_code, total_pages

pytestmark = pytest.mark.unit


def test_get_str_treats_empty_as_missing():
    """get_str returns None for None and the empty string; whitespace is kept as given."""
    assert get_str(None) is None
    assert get_str("") is None
    assert get_str("   ") == "   "
    assert get_str("Depot") == "Depot"


@pytest.mark.parametrize("value,expected", [
    (5, 5),
    ("12", 12),
    (" 7 ", 7),
    (0, None),
    (-3, None),
    ("-3", None),
    ("abc", None),
    ("12abc", None),
    ("", None),
    (None, None),
    (True, None),
])
def test_get_positive_int(value, expected):
    """get_positive_int accepts ints and digit strings >= 1 only."""
    assert get_positive_int(value) == expected


def test_normalize_code_uppercases_only():
    """normalize_code upper-cases without trimming."""
    assert normalize_code("nyc-01") == "NYC-01"
    assert normalize_code(" nyc ") == " NYC "


def test_coerce_page_defaults_and_offset():
    """coerce_page falls back to page 1 / limit 10 and computes the offset."""
    assert coerce_page(None, None) == (1, 10, 0)
    assert coerce_page("3", "20") == (3, 20, 40)
    assert coerce_page(0, "x") == (1, 10, 0)


def test_total_pages_is_ceiling():
    """total_pages is ceil(total / limit), 0 for no rows."""
    assert total_pages(0, 10) == 0
    assert total_pages(10, 10) == 1
    assert total_pages(11, 10) == 2
    assert total_pages(1, 3) == 1
