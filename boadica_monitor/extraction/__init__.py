"""
Offer extraction from rendered BoaDica page text.

Modules:
    offer_extractor - OfferExtractor and extract_offers()
    store_rules     - Ordered rules recovering store name/address/phone
    price_parser    - Price line detection and price text parsing
    product_info    - Product name, price range and product id
    competitiveness - evaluate_competitiveness()
"""

from .competitiveness import evaluate_competitiveness
from .offer_extractor import OfferExtractor, extract_offers, is_own_store, split_lines
from .price_parser import is_price_line, parse_price, parse_price_strict
from .product_info import extract_price_range, extract_product_name, product_id_from_url
from .store_rules import STORE_RULES, StoreContext, StoreRule, collect_store_context

__all__ = [
    # Offers
    'OfferExtractor',
    'extract_offers',
    'is_own_store',
    'split_lines',
    'evaluate_competitiveness',
    # Prices
    'is_price_line',
    'parse_price',
    'parse_price_strict',
    # Product info
    'extract_product_name',
    'extract_price_range',
    'product_id_from_url',
    # Store rules
    'STORE_RULES',
    'StoreContext',
    'StoreRule',
    'collect_store_context',
]
