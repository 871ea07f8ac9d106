"""Truncate HTML fragments to a visible-character budget."""

from html_substring.services.html_truncate import (
    HtmlSubstringError,
    count_visible,
    truncate_html,
)

__version__ = "0.1.0"

__all__ = ["HtmlSubstringError", "count_visible", "truncate_html", "__version__"]
