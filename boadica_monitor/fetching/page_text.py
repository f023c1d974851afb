"""
Page Text Providers

Turn a product page into the newline-delimited visible text the offer
extractor reads. Lines keep document order, top to bottom.

- PageTextFetcher fetches a page over HTTP (static HTML, no JavaScript)
- read_text_snapshot loads a saved page (.txt as-is, .html rendered)
"""

from __future__ import annotations

import logging
from pathlib import Path

import requests
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

_INVISIBLE_TAGS = ["script", "style", "noscript", "template", "head"]


def html_to_text(html: str) -> str:
    """
    Render an HTML document to visible text, one text node per line.

    Args:
        html: HTML document

    Returns:
        Trimmed, non-empty text lines joined with newlines
    """
    if not html:
        return ""

    soup = BeautifulSoup(html, "lxml")
    for element in soup(_INVISIBLE_TAGS):
        element.decompose()

    root = soup.body or soup
    lines = (line.strip() for line in root.get_text("\n").splitlines())
    return "\n".join(line for line in lines if line)


def read_text_snapshot(path: str | Path) -> str:
    """Load a saved page; HTML files are rendered to text first."""
    path = Path(path)
    content = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".html", ".htm"):
        return html_to_text(content)
    return content


class PageTextFetcher:
    """
    Fetches product pages and returns their visible text.

    Usage:
        with PageTextFetcher(timeout=10) as fetcher:
            text = fetcher.fetch_text("https://boadica.com.br/produtos/p144528")
    """

    DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10,
        session: requests.Session | None = None,
    ):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "pt-BR,pt;q=0.9,en;q=0.8",
        })

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self):
        self.session.close()

    def fetch_html(self, url: str) -> str:
        """
        Fetch raw page HTML.

        Raises:
            requests.RequestException: On connection errors or HTTP error status
        """
        logger.debug("GET %s", url)
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.text

    def fetch_text(self, url: str) -> str:
        """Fetch a page and return its visible text."""
        return html_to_text(self.fetch_html(url))

    def __call__(self, url: str) -> str:
        return self.fetch_text(url)
