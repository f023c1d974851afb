"""
Offer data models.

Pure data classes for the offers extracted from a BoaDica product page
and the records derived from them. No business logic - only data
structure definitions and field validation.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass
class Offer:
    """A single store's advertised price for a product."""
    store_name: str
    address: str
    price_text: str             # Matched currency token, e.g. "R$ 1.234,56"
    price_value: float          # 0.0 when the price text could not be parsed
    phone: str = ""
    is_own_store: bool = False

    def __post_init__(self):
        """Validate required fields after initialization."""
        if not self.address:
            raise ValueError("Offer address is required")
        if self.price_value < 0:
            raise ValueError(f"Offer price must be >= 0 (got {self.price_value})")

    def to_row(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CompetitivenessVerdict:
    """Operator's best price compared with the market's best price."""
    own_best_price: float
    market_best_price: float
    is_losing: bool
    gap: float = 0.0
    gap_percent: float = 0.0


@dataclass
class PriceRange:
    """The "De R$ X a R$ Y" range shown in the product header."""
    minimum: str
    maximum: str


@dataclass
class ProductSnapshot:
    """
    One product's offers as seen in a single monitor run.

    Offers are kept in the order returned by extraction (cheapest first).
    """
    product_id: str
    name: str
    url: str
    price_range: PriceRange
    offers: List[Offer] = field(default_factory=list)

    @property
    def own_offers(self) -> List[Offer]:
        return [offer for offer in self.offers if offer.is_own_store]

    @property
    def has_own_stores(self) -> bool:
        return any(offer.is_own_store for offer in self.offers)


@dataclass
class PriceAlert:
    """Raised when a competitor is strictly cheaper than the operator."""
    product_id: str
    product_name: str
    own_price: float
    best_price: float
    gap: float
    gap_percent: float
    own_stores: str             # Own store names joined with ", "
    created_at: str = ""        # ISO timestamp, set by the monitor run

    def to_row(self) -> Dict[str, Any]:
        return asdict(self)
