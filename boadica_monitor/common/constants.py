"""
Shared constants for the project.

This module contains application-wide constants that should have a single source of truth.
"""

# Store metadata renders within this many lines above its price line
LOOKBACK_WINDOW = 10

# Header that opens a new price-comparison block on the product page
SECTION_HEADER_PREFIX = "Preços para"

# Layout artifact rendered next to some store blocks
BOX_TOKEN = "BOX"

# Store name lines are short; longer lines are descriptions or banners
MAX_STORE_NAME_LENGTH = 50

PRODUCT_NAME_FALLBACK = "Produto não identificado"
PRICE_RANGE_FALLBACK = "N/A"
