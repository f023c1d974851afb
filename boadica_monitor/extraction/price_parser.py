"""
Price Parser

Recognizes BoaDica price lines ("R$ 1.234,56") and converts Brazilian
formatted price text to numbers.
"""

import re
from typing import Optional

# Whole-line price: currency symbol, whitespace, digits with optional
# thousands dots and an optional decimal comma part
PRICE_LINE_PATTERN = re.compile(r'R\$\s+(?:\d{1,3}(?:\.\d{3})+|\d+)(?:,\d+)?')

# Header range: "De R$ 89,90 a R$ 129,90"
PRICE_RANGE_PATTERN = re.compile(r'De\s+R\$\s+([\d.,]+)\s+a\s+R\$\s+([\d.,]+)')


def is_price_line(line: str) -> bool:
    """Return True if the whole line is a single currency amount."""
    return PRICE_LINE_PATTERN.fullmatch(line) is not None


def parse_price_strict(text: str) -> Optional[float]:
    """
    Parse Brazilian formatted price text.

    Keeps digits, commas and periods; periods are thousands separators and
    the first comma is the decimal separator.

    Returns:
        Parsed value, or None if nothing parseable remains
    """
    number = re.sub(r'[^\d,.]', '', text or '')
    number = number.replace('.', '').replace(',', '.', 1)
    try:
        return float(number)
    except ValueError:
        return None


def parse_price(text: str) -> float:
    """
    Parse price text, returning 0.0 when it cannot be parsed.

    Examples:
        "R$ 1.234,56" -> 1234.56
        "R$ abc"      -> 0.0
    """
    value = parse_price_strict(text)
    return value if value is not None else 0.0
