"""
Monitor runs and their outputs.

Modules:
    price_monitor - PriceMonitor (sequential run over monitored products)
    report        - Text report, CSV and JSON exports
"""

from .price_monitor import MonitorRunSummary, PriceMonitor, build_alert
from .report import (
    alerts_to_json,
    export_alerts_csv,
    export_offers_csv,
    generate_report,
)

__all__ = [
    'PriceMonitor',
    'MonitorRunSummary',
    'build_alert',
    'generate_report',
    'export_offers_csv',
    'export_alerts_csv',
    'alerts_to_json',
]
