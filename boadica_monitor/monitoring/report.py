"""
Reports and Exports

Human-readable run report plus CSV/JSON exports of offers and alerts.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import List

from ..common.csv_utils import write_csv
from ..models import PriceAlert, ProductSnapshot

OFFER_FIELDNAMES = [
    "product_id", "product_name", "store_name", "address", "phone",
    "price_text", "price_value", "is_own_store",
]

ALERT_FIELDNAMES = [
    "product_id", "product_name", "own_price", "best_price", "gap",
    "gap_percent", "own_stores", "created_at",
]


def sort_alerts(alerts: List[PriceAlert]) -> List[PriceAlert]:
    """Largest gap first."""
    return sorted(alerts, key=lambda alert: -alert.gap)


def generate_report(snapshots: List[ProductSnapshot], alerts: List[PriceAlert]) -> str:
    """Generate human-readable price report."""
    now = datetime.now().strftime("%Y-%m-%d %H:%M")
    with_own = [s for s in snapshots if s.has_own_stores]

    lines = [
        "=" * 80,
        f"BOADICA PRICE REPORT - {now}",
        "=" * 80,
        "",
        f"Products with offers: {len(snapshots)}",
        f"Products listing own stores: {len(with_own)}",
        f"Alerts: {len(alerts)}",
        "",
    ]

    if not alerts:
        lines.append("✓ No competitor is cheaper than our stores!")
        lines.append("")
        return "\n".join(lines)

    lines.append("-" * 80)
    lines.append(f"UNDERCUT ({len(alerts)} products)")
    lines.append("-" * 80)
    for a in sort_alerts(alerts):
        lines.append(
            f"  [{a.product_id}] {a.product_name[:60]}"
            f"\n    R$ {a.own_price:.2f} → R$ {a.best_price:.2f}"
            f" (gap R$ {a.gap:.2f}, {a.gap_percent:.1f}%) - {a.own_stores}"
        )
    lines.append("")

    lines.append("=" * 80)
    return "\n".join(lines)


def offer_rows(snapshots: List[ProductSnapshot]) -> List[dict]:
    rows = []
    for snapshot in snapshots:
        for offer in snapshot.offers:
            row = offer.to_row()
            row["product_id"] = snapshot.product_id
            row["product_name"] = snapshot.name
            rows.append(row)
    return rows


def export_offers_csv(path: str | Path, snapshots: List[ProductSnapshot]) -> int:
    """Write one row per offer. Returns number of rows written."""
    return write_csv(path, offer_rows(snapshots), fieldnames=OFFER_FIELDNAMES)


def export_alerts_csv(path: str | Path, alerts: List[PriceAlert]) -> int:
    """Append alerts to the alert log. Returns number of rows written."""
    rows = [alert.to_row() for alert in sort_alerts(alerts)]
    return write_csv(path, rows, fieldnames=ALERT_FIELDNAMES, append=True)


def alerts_to_json(alerts: List[PriceAlert]) -> str:
    return json.dumps([asdict(alert) for alert in sort_alerts(alerts)], indent=2, ensure_ascii=False)
