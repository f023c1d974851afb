"""
End-to-end tests for scripts/price_monitor.py using saved page snapshots.
"""

import importlib.util
import logging
from pathlib import Path

import pytest

from boadica_monitor.common.csv_utils import read_csv

SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "price_monitor.py"


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("price_monitor_script", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("boadica_monitor")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.WARNING)


class TestSplitValues:
    def test_flattens_commas(self, script):
        assert script.split_values(["a, b", "c", " "]) == ["a", "b", "c"]


class TestMainWithSnapshots:
    def test_alert_exit_code_and_exports(self, script, config_dir, fixtures_dir, tmp_path, capsys):
        offers_csv = tmp_path / "offers.csv"
        alerts_csv = tmp_path / "alerts.csv"
        alerts_json = tmp_path / "alerts.json"

        exit_code = script.main([
            "--config-dir", str(config_dir),
            "--text-file", str(fixtures_dir / "p144528.txt"),
            "--text-file", str(fixtures_dir / "p200001.html"),
            "--offers-csv", str(offers_csv),
            "--alerts-csv", str(alerts_csv),
            "--alerts-json", str(alerts_json),
            "--quiet",
        ])

        assert exit_code == 1
        assert "UNDERCUT (1 products)" in capsys.readouterr().out
        assert len(list(read_csv(offers_csv))) == 6
        assert [r["product_id"] for r in read_csv(alerts_csv)] == ["144528"]
        assert alerts_json.exists()

    def test_no_alerts_exit_zero(self, script, config_dir, fixtures_dir, tmp_path):
        report_path = tmp_path / "report.txt"

        exit_code = script.main([
            "--config-dir", str(config_dir),
            "--text-file", str(fixtures_dir / "p200001.html"),
            "--output", str(report_path),
            "--quiet",
        ])

        assert exit_code == 0
        assert "No competitor is cheaper" in report_path.read_text(encoding="utf-8")

    def test_own_store_override(self, script, config_dir, fixtures_dir):
        exit_code = script.main([
            "--config-dir", str(config_dir),
            "--text-file", str(fixtures_dir / "p144528.txt"),
            "--own-store", "Mega Byte",
            "--quiet",
        ])

        # Mega Byte is the cheapest store on this page
        assert exit_code == 0

    def test_no_products(self, script, tmp_path):
        (tmp_path / "boadica.yaml").write_text("own_stores: [TI e CIA]\n", encoding="utf-8")

        assert script.main(["--config-dir", str(tmp_path), "--quiet"]) == 2


class TestArguments:
    def test_url_and_text_file_are_exclusive(self, script, capsys):
        with pytest.raises(SystemExit) as excinfo:
            script.build_parser().parse_args(
                ["--url", "https://boadica.com.br/produtos/p144528", "--text-file", "p144528.txt"]
            )

        assert excinfo.value.code == 2
        assert "not allowed with argument" in capsys.readouterr().err
