"""Page text providers for the offer extractor."""

from .page_text import PageTextFetcher, html_to_text, read_text_snapshot

__all__ = ['PageTextFetcher', 'html_to_text', 'read_text_snapshot']
