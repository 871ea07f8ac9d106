"""Preview endpoints: truncated HTML snippets and visible-length counts."""

import logging

from fastapi import APIRouter, HTTPException

from html_substring.api.schemas import CountOut, CountRequest, PreviewOut, PreviewRequest
from html_substring.core.config import settings
from html_substring.services.html_truncate import HtmlSubstringError, count_visible
from html_substring.services.preview import preview_html

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/preview", tags=["preview"])


@router.post("", response_model=PreviewOut)
async def create_preview(req: PreviewRequest):
    """Truncate an HTML fragment; omitted options use configured defaults."""
    break_words = (
        settings.PREVIEW_BREAK_WORDS if req.break_words is None else req.break_words
    )
    suffix = settings.PREVIEW_SUFFIX if req.suffix is None else req.suffix
    try:
        return preview_html(
            req.html,
            req.length,
            break_words=break_words,
            suffix=suffix,
            strict=req.strict,
        )
    except HtmlSubstringError as exc:
        logger.info("Rejected strict preview: %s", exc)
        raise HTTPException(422, str(exc))


@router.post("/count", response_model=CountOut)
async def count_preview_chars(req: CountRequest):
    try:
        return {"visible_chars": count_visible(req.html)}
    except HtmlSubstringError as exc:
        raise HTTPException(422, str(exc))
