#!/usr/bin/env python3
"""
BoaDica Price Monitor

Checks monitored products on BoaDica and reports where a competitor is
cheaper than our own stores (TI e CIA).

WORKFLOW:
1. Load own-store patterns and product URLs from config/boadica.yaml
2. Read each product page (live fetch or saved snapshots)
3. Extract store offers and compare our best price with the market
4. Print the report; optionally export offers/alerts

Usage:
    # Check all configured products
    python3 scripts/price_monitor.py

    # Check specific products
    python3 scripts/price_monitor.py --url https://boadica.com.br/produtos/p144528

    # Offline: saved page text or HTML
    python3 scripts/price_monitor.py --text-file snapshots/p144528.txt

    # Export offers and append alerts
    python3 scripts/price_monitor.py --offers-csv output/offers.csv --alerts-csv output/alerts.csv

SETUP:
    Optional .env in the project root:
    - BOADICA_CONFIG_DIR: Alternative config directory
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from boadica_monitor.common.config_loader import (
    load_monitor_settings,
    load_monitored_products,
    load_own_stores,
)
from boadica_monitor.common.log_config import setup_logging
from boadica_monitor.fetching import PageTextFetcher, read_text_snapshot
from boadica_monitor.monitoring import (
    PriceMonitor,
    alerts_to_json,
    export_alerts_csv,
    export_offers_csv,
    generate_report,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Monitor BoaDica prices against our own stores"
    )
    parser.add_argument(
        "--config-dir",
        help="Directory holding boadica.yaml (default: ./config)",
    )
    sources = parser.add_mutually_exclusive_group()
    sources.add_argument(
        "--url",
        action="append",
        default=[],
        help="Product URL to check (repeatable or comma-separated)",
    )
    sources.add_argument(
        "--text-file",
        action="append",
        default=[],
        help="Saved page text/HTML to check instead of fetching (repeatable)",
    )
    parser.add_argument(
        "--own-store",
        action="append",
        default=[],
        help="Own-store name pattern, overrides config (repeatable)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        help="Delay between products in seconds (default: from config)",
    )
    parser.add_argument("--output", help="Save report to file")
    parser.add_argument("--offers-csv", help="Write all offers to CSV")
    parser.add_argument("--alerts-csv", help="Append alerts to CSV")
    parser.add_argument("--alerts-json", help="Write alerts to JSON")
    parser.add_argument("--log-file", help="Also write log records to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Warnings only")
    return parser


def split_values(values: list[str]) -> list[str]:
    """Flatten repeated and comma-separated option values."""
    return [v.strip() for value in values for v in value.split(",") if v.strip()]


def main(argv: list[str] | None = None) -> int:
    load_dotenv(Path(__file__).parent.parent / ".env")

    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)

    config_dir = Path(args.config_dir) if args.config_dir else None
    settings = load_monitor_settings(config_dir)
    own_stores = split_values(args.own_store) or load_own_stores(config_dir)
    delay = args.delay if args.delay is not None else float(settings["delay"])

    if not own_stores:
        logger.warning("No own stores configured; no alerts can be raised")

    if args.text_file:
        sources = args.text_file
    else:
        sources = split_values(args.url) or load_monitored_products(config_dir)

    if not sources:
        logger.error("No products to check. Provide --url, --text-file or config products")
        return 2

    fetcher = None
    if args.text_file:
        text_provider = read_text_snapshot
        delay = 0.0
    else:
        fetcher = PageTextFetcher(
            user_agent=settings["user_agent"],
            timeout=float(settings["timeout"]),
        )
        text_provider = fetcher.fetch_text

    monitor = PriceMonitor(own_stores, text_provider, delay=delay)
    try:
        monitor.run(sources)
    finally:
        if fetcher is not None:
            fetcher.close()

    report = generate_report(monitor.snapshots, monitor.alerts)
    print(report)

    if args.output:
        Path(args.output).write_text(report, encoding="utf-8")
        logger.info("Report saved to %s", args.output)

    if args.offers_csv:
        count = export_offers_csv(args.offers_csv, monitor.snapshots)
        logger.info("Wrote %d offers to %s", count, args.offers_csv)

    if args.alerts_csv and monitor.alerts:
        count = export_alerts_csv(args.alerts_csv, monitor.alerts)
        logger.info("Appended %d alerts to %s", count, args.alerts_csv)

    if args.alerts_json:
        Path(args.alerts_json).write_text(alerts_to_json(monitor.alerts), encoding="utf-8")
        logger.info("Alerts saved to %s", args.alerts_json)

    # Exit with code based on alerts
    return 1 if monitor.alerts else 0


if __name__ == "__main__":
    sys.exit(main())
