"""Normalise and validate loosely-typed location request fields."""
import math
from typing import Any

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def get_str(value: Any) -> str | None:
    """Return the string value; None and the empty string are treated as missing."""
    if value is None:
        return None
    s = str(value)
    return s if s else None


def get_positive_int(value: Any) -> int | None:
    """Parse a positive integer from an int or a string of digits; None if missing or invalid."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 1 else None
    s = str(value).strip()
    if not s.isdigit():
        return None
    n = int(s)
    return n if n >= 1 else None


def normalize_code(code: str) -> str:
    """Location codes are compared and stored upper-cased."""
    return code.upper()


def coerce_page(page: Any, limit: Any) -> tuple[int, int, int]:
    """Return (page, limit, offset); invalid or non-positive values fall back to the defaults."""
    page_num = get_positive_int(page) or DEFAULT_PAGE
    limit_num = get_positive_int(limit) or DEFAULT_LIMIT
    return page_num, limit_num, (page_num - 1) * limit_num


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed for total rows at limit rows per page (0 when there are no rows)."""
    return math.ceil(total / limit)
