"""Shared test fixtures."""

from pathlib import Path

import pytest

from boadica_monitor.models import Offer

FIXTURES_DIR = Path(__file__).parent / "fixtures"

OWN_STORES = ["TI e CIA Centro", "TI e CIA Itaipu"]


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def own_stores():
    return list(OWN_STORES)


@pytest.fixture
def product_page_text():
    """Rendered text of a product page with four store offers."""
    return (FIXTURES_DIR / "p144528.txt").read_text(encoding="utf-8")


@pytest.fixture
def product_page_html():
    """Static HTML of a product page with two store offers."""
    return (FIXTURES_DIR / "p200001.html").read_text(encoding="utf-8")


@pytest.fixture
def make_offer():
    """Factory for offers with sensible defaults."""
    def _make(store_name="Concorrente", price=100.0, is_own_store=False, **kwargs):
        defaults = {
            "address": "Rua A, 1 - Centro - RJ",
            "price_text": f"R$ {price:.2f}".replace(".", ","),
            "phone": "",
        }
        defaults.update(kwargs)
        return Offer(
            store_name=store_name,
            price_value=price,
            is_own_store=is_own_store,
            **defaults,
        )
    return _make


@pytest.fixture
def config_dir(tmp_path):
    """Temporary config directory with a complete boadica.yaml."""
    (tmp_path / "boadica.yaml").write_text(
        "own_stores:\n"
        "  - TI e CIA Centro\n"
        "  - TI e CIA Itaipu\n"
        "products:\n"
        "  - https://boadica.com.br/produtos/p144528\n"
        "  - https://boadica.com.br/produtos/p200001\n"
        "settings:\n"
        "  delay: 0\n"
        "  timeout: 5\n",
        encoding="utf-8",
    )
    return tmp_path
