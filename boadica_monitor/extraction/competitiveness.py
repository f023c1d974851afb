"""
Competitiveness

Compares the operator's best offer with the best offer on the market.
"""

from __future__ import annotations

from typing import List, Optional

from ..models import CompetitivenessVerdict, Offer


def evaluate_competitiveness(offers: List[Offer]) -> Optional[CompetitivenessVerdict]:
    """
    Decide whether a competitor undercuts the operator's best price.

    The market best includes the operator's own offers, so matching the
    cheapest competitor is not losing.

    Args:
        offers: Offers from extract_offers()

    Returns:
        Verdict, or None when none of the offers is an own store
    """
    own_prices = [offer.price_value for offer in offers if offer.is_own_store]
    if not own_prices:
        return None

    own_best = min(own_prices)
    market_best = min(offer.price_value for offer in offers)

    if own_best <= market_best:
        return CompetitivenessVerdict(
            own_best_price=own_best,
            market_best_price=market_best,
            is_losing=False,
        )

    gap = own_best - market_best
    # A zero market price comes from an unparseable price text
    gap_percent = gap / market_best * 100 if market_best else 0.0

    return CompetitivenessVerdict(
        own_best_price=own_best,
        market_best_price=market_best,
        is_losing=True,
        gap=gap,
        gap_percent=gap_percent,
    )
