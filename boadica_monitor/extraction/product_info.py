"""
Product Info

Reads product-level details from the rendered page text: the product name
shown above the "De R$ X a R$ Y" range, the range itself, and the product
id embedded in the page URL.
"""

import re
from urllib.parse import urlparse

from ..common.constants import PRICE_RANGE_FALLBACK, PRODUCT_NAME_FALLBACK
from ..models import PriceRange
from .price_parser import PRICE_RANGE_PATTERN

PRODUCT_ID_PATTERN = re.compile(r'p(\d+)')


def extract_product_name(text: str) -> str:
    """
    Extract the product name ("Brand / Model") from page text.

    The name is the first line containing '/' directly followed by the
    "De R$ ..." price range line.

    Returns:
        Product name, or "Produto não identificado" when not found
    """
    lines = [line.strip() for line in (text or '').splitlines()]

    for current, following in zip(lines, lines[1:]):
        if '/' in current and 'De R$' in following:
            return current

    return PRODUCT_NAME_FALLBACK


def extract_price_range(text: str) -> PriceRange:
    """
    Extract the advertised price range ("De R$ 89,90 a R$ 129,90").

    Returns:
        PriceRange with "R$ ..." texts, or "N/A" for both when absent
    """
    match = PRICE_RANGE_PATTERN.search(text or '')
    if not match:
        return PriceRange(minimum=PRICE_RANGE_FALLBACK, maximum=PRICE_RANGE_FALLBACK)

    return PriceRange(minimum=f"R$ {match.group(1)}", maximum=f"R$ {match.group(2)}")


def product_id_from_url(url: str) -> str:
    """
    Get the BoaDica product id from a product URL.

    Example:
        "https://boadica.com.br/produtos/p144528" -> "144528"
    """
    path = urlparse(url or '').path or (url or '')
    last_segment = path.rstrip('/').rsplit('/', 1)[-1]

    # Saved snapshots are named after the page, e.g. "p144528.txt"
    match = PRODUCT_ID_PATTERN.match(last_segment) or PRODUCT_ID_PATTERN.search(path)
    return match.group(1) if match else ''
