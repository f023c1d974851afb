"""
Price Monitor

Runs offer extraction over every monitored product and raises an alert
whenever a competitor is cheaper than the operator's best offer.

WORKFLOW:
1. Get the visible page text for each product (fetcher or saved snapshot)
2. Extract product name, price range and offers
3. Evaluate competitiveness for products listing an own store
4. Collect snapshots and alerts for reporting/export

Products are processed one at a time with a delay between them.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable, List, Optional

import requests

from ..extraction import (
    OfferExtractor,
    evaluate_competitiveness,
    extract_price_range,
    extract_product_name,
    product_id_from_url,
)
from ..models import CompetitivenessVerdict, PriceAlert, ProductSnapshot

logger = logging.getLogger(__name__)

TextProvider = Callable[[str], str]


@dataclass
class MonitorRunSummary:
    """Counters for one monitor run."""
    processed: int = 0
    with_own_stores: int = 0
    alerts: int = 0
    failed: int = 0
    elapsed_seconds: float = 0.0


def build_alert(snapshot: ProductSnapshot, verdict: CompetitivenessVerdict) -> PriceAlert:
    """Create the alert record for a product the operator is losing on."""
    return PriceAlert(
        product_id=snapshot.product_id,
        product_name=snapshot.name,
        own_price=verdict.own_best_price,
        best_price=verdict.market_best_price,
        gap=verdict.gap,
        gap_percent=verdict.gap_percent,
        own_stores=", ".join(offer.store_name for offer in snapshot.own_offers),
        created_at=datetime.now().isoformat(timespec="seconds"),
    )


class PriceMonitor:
    """
    Monitor BoaDica prices for the operator's stores.

    Attributes:
        extractor: OfferExtractor configured with own-store patterns
        text_provider: Callable returning page text for a product source
        snapshots: Snapshots collected by the last run
        alerts: Alerts raised by the last run
    """

    def __init__(
        self,
        own_store_patterns: Iterable[str],
        text_provider: TextProvider,
        delay: float = 0.0,
    ):
        self.extractor = OfferExtractor(own_store_patterns)
        self.text_provider = text_provider
        self.delay = delay

        self.snapshots: list[ProductSnapshot] = []
        self.alerts: list[PriceAlert] = []

    def build_snapshot(self, source: str, text: str) -> ProductSnapshot:
        """Extract a product snapshot from already obtained page text."""
        return ProductSnapshot(
            product_id=product_id_from_url(source),
            name=extract_product_name(text),
            url=source,
            price_range=extract_price_range(text),
            offers=self.extractor.extract(text),
        )

    def check_product(self, source: str) -> tuple[ProductSnapshot | None, PriceAlert | None]:
        """
        Check a single product.

        Args:
            source: Product URL or snapshot path, passed to the text provider

        Returns:
            Tuple of (snapshot, alert); snapshot is None when no offers were found

        Raises:
            requests.RequestException, OSError, UnicodeDecodeError: When the page
                text is unavailable or not valid UTF-8
        """
        text = self.text_provider(source)
        snapshot = self.build_snapshot(source, text)

        if not snapshot.offers:
            logger.warning("No offers found for %s", source)
            return None, None

        logger.info("%s: %d offers (%s)", snapshot.name, len(snapshot.offers), source)

        verdict = evaluate_competitiveness(snapshot.offers)
        if verdict is None or not verdict.is_losing:
            return snapshot, None

        alert = build_alert(snapshot, verdict)
        logger.warning(
            "Undercut on %s: own %.2f vs best %.2f (+%.1f%%)",
            snapshot.name, alert.own_price, alert.best_price, alert.gap_percent,
        )
        return snapshot, alert

    def run(
        self,
        sources: List[str],
        progress_callback: Optional[Callable[[int, int], None]] = None,
    ) -> MonitorRunSummary:
        """
        Check every product in order.

        Products whose page cannot be obtained or decoded are logged and skipped.

        Args:
            sources: Product URLs or snapshot paths
            progress_callback: Optional callback(current, total)

        Returns:
            Run summary counters
        """
        summary = MonitorRunSummary()
        started = time.monotonic()
        self.snapshots = []
        self.alerts = []
        total = len(sources)

        logger.info("Checking %d products on BoaDica...", total)

        for i, source in enumerate(sources, 1):
            if progress_callback:
                progress_callback(i, total)

            try:
                snapshot, alert = self.check_product(source)
            except (requests.RequestException, OSError, UnicodeDecodeError) as e:
                logger.error("Could not read %s: %s", source, e)
                summary.failed += 1
                snapshot, alert = None, None

            if snapshot is not None:
                self.snapshots.append(snapshot)
                summary.processed += 1
                if snapshot.has_own_stores:
                    summary.with_own_stores += 1
            if alert is not None:
                self.alerts.append(alert)
                summary.alerts += 1

            if self.delay and i < total:
                time.sleep(self.delay)

        summary.elapsed_seconds = round(time.monotonic() - started, 2)
        logger.info(
            "Done: %d processed, %d with own stores, %d alerts, %d failed (%.2fs)",
            summary.processed, summary.with_own_stores, summary.alerts,
            summary.failed, summary.elapsed_seconds,
        )
        return summary
