"""
Offer Extractor

Extracts per-store offers from the rendered text of a BoaDica product page.

The page lists each store as a block of short lines (name, address, phone)
followed by an isolated price line. Extraction walks the lines once; for
every price line it looks back a fixed number of lines to recover the store
block and keeps the offer only if an address was found.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from ..common.constants import LOOKBACK_WINDOW
from ..models import Offer
from .price_parser import is_price_line, parse_price
from .store_rules import collect_store_context

logger = logging.getLogger(__name__)


def split_lines(text: str) -> List[str]:
    """Split page text into trimmed, non-empty lines."""
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def is_own_store(store_name: str, own_store_patterns: Iterable[str]) -> bool:
    """Return True if store_name contains any pattern, ignoring case."""
    lowered = store_name.lower()
    return any(pattern.lower() in lowered for pattern in own_store_patterns)


class OfferExtractor:
    """
    Extracts offers from rendered product page text.

    Holds only configuration; every call to extract() works on its own
    locals, so one instance can be shared between threads.

    Usage:
        extractor = OfferExtractor(["TI e CIA Centro", "TI e CIA Itaipu"])
        offers = extractor.extract(page_text)
    """

    def __init__(self, own_store_patterns: Iterable[str] = (), lookback: int = LOOKBACK_WINDOW):
        self.own_store_patterns = tuple(own_store_patterns)
        self.lookback = lookback

    def extract(self, text: str) -> List[Offer]:
        """
        Extract offers sorted by price (cheapest first, ties in page order).

        Args:
            text: Visible page text, newline-delimited in page order

        Returns:
            List of offers; empty when nothing valid was found
        """
        lines = split_lines(text)
        offers: List[Offer] = []

        for index, line in enumerate(lines):
            if not is_price_line(line):
                continue

            context = collect_store_context(lines, index, self.lookback)
            if context is None:
                logger.debug("No store address above price line %d (%s)", index, line)
                continue

            store_name = context.resolved_name()
            if not store_name:
                logger.debug("No store name for price line %d (%s)", index, line)
                continue

            offers.append(Offer(
                store_name=store_name,
                address=context.address,
                phone=context.phone,
                price_text=line,
                price_value=parse_price(line),
                is_own_store=is_own_store(store_name, self.own_store_patterns),
            ))

        offers.sort(key=lambda offer: offer.price_value)
        return offers


def extract_offers(text: str, own_store_patterns: Iterable[str]) -> List[Offer]:
    """Extract offers from page text, flagging the given own stores."""
    return OfferExtractor(own_store_patterns).extract(text)
