"""Tests for the price report and exports."""

import json

import pytest

from boadica_monitor.common.csv_utils import read_csv
from boadica_monitor.models import PriceAlert, PriceRange, ProductSnapshot
from boadica_monitor.monitoring.report import (
    alerts_to_json,
    export_alerts_csv,
    export_offers_csv,
    generate_report,
)


@pytest.fixture
def snapshot(make_offer):
    return ProductSnapshot(
        product_id="144528",
        name="Kingston / SSD A400 480GB SATA",
        url="https://boadica.com.br/produtos/p144528",
        price_range=PriceRange("R$ 189,90", "R$ 249,90"),
        offers=[
            make_offer("Mega Byte", 189.90),
            make_offer("TI e CIA Centro", 209.90, is_own_store=True, phone="(21) 2719-5555"),
        ],
    )


@pytest.fixture
def alerts():
    return [
        PriceAlert("1", "Mouse", 40.0, 35.0, 5.0, 14.29, "TI e CIA Centro"),
        PriceAlert("144528", "Kingston / SSD A400", 209.90, 189.90, 20.0, 10.53, "TI e CIA Centro"),
    ]


class TestGenerateReport:
    def test_no_alerts(self, snapshot):
        report = generate_report([snapshot], [])

        assert "Products with offers: 1" in report
        assert "Products listing own stores: 1" in report
        assert "No competitor is cheaper" in report

    def test_alerts_sorted_by_gap(self, snapshot, alerts):
        report = generate_report([snapshot], alerts)

        assert "UNDERCUT (2 products)" in report
        assert report.index("[144528]") < report.index("[1] Mouse")
        assert "R$ 209.90 → R$ 189.90" in report
        assert "10.5%" in report


class TestExports:
    def test_offers_csv(self, tmp_path, snapshot):
        path = tmp_path / "offers.csv"

        count = export_offers_csv(path, [snapshot])

        rows = list(read_csv(path))
        assert count == 2
        assert rows[0]["product_id"] == "144528"
        assert rows[0]["store_name"] == "Mega Byte"
        assert rows[1]["is_own_store"] == "True"
        assert rows[1]["phone"] == "(21) 2719-5555"

    def test_alerts_csv_appends(self, tmp_path, alerts):
        path = tmp_path / "alerts.csv"

        export_alerts_csv(path, alerts[:1])
        export_alerts_csv(path, alerts[1:])

        rows = list(read_csv(path))
        assert [r["product_id"] for r in rows] == ["1", "144528"]

    def test_alerts_json(self, alerts):
        data = json.loads(alerts_to_json(alerts))

        assert [a["product_id"] for a in data] == ["144528", "1"]
        assert data[0]["own_stores"] == "TI e CIA Centro"
