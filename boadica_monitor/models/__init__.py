"""
Data models for offer extraction.

This module contains pure data classes with no business logic.
"""

from .offer import (
    CompetitivenessVerdict,
    Offer,
    PriceAlert,
    PriceRange,
    ProductSnapshot,
)

__all__ = ['Offer', 'CompetitivenessVerdict', 'PriceRange', 'ProductSnapshot', 'PriceAlert']
