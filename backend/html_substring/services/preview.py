"""Preview helper: truncate HTML, falling back to escaped text on bad markup."""

import html
import logging

from html_substring.services.html_truncate import HtmlSubstringError, Suffix, Truncator

logger = logging.getLogger(__name__)


def _truncate(
    source: str, length: int, break_words: bool, suffix: Suffix
) -> tuple[str, Truncator]:
    truncator = Truncator(source, length, break_words=break_words)
    return truncator.run(suffix), truncator


def preview_html(
    source: str,
    length: int,
    *,
    break_words: bool = True,
    suffix: Suffix = None,
    strict: bool = False,
) -> dict:
    """Build a shortened preview of an HTML fragment.

    Malformed markup raises HtmlSubstringError when ``strict``; otherwise
    the source is escaped and truncated as plain text, which cannot fail.

    Returns dict with:
        html: str
        truncated: bool
        visible_chars: int
        fallback: bool (escaped-text path was used)
    """
    fallback = False
    try:
        result, truncator = _truncate(source, length, break_words, suffix)
    except HtmlSubstringError as exc:
        if strict:
            raise
        logger.warning("Malformed markup, previewing as text: %s", exc)
        fallback = True
        escaped = html.escape(source, quote=False)
        result, truncator = _truncate(escaped, length, break_words, suffix)

    return {
        "html": result,
        "truncated": truncator.truncated,
        "visible_chars": truncator.current,
        "fallback": fallback,
    }
