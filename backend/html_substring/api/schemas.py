from pydantic import BaseModel, Field

from html_substring.core.config import settings


# --- Preview ---
class PreviewRequest(BaseModel):
    html: str
    length: int = Field(
        default=settings.PREVIEW_DEFAULT_LENGTH,
        ge=0,
        le=settings.PREVIEW_MAX_LENGTH,
    )
    break_words: bool | None = None
    suffix: str | None = None
    strict: bool = False

class PreviewOut(BaseModel):
    html: str
    truncated: bool
    visible_chars: int
    fallback: bool


# --- Count ---
class CountRequest(BaseModel):
    html: str

class CountOut(BaseModel):
    visible_chars: int
