from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from html_substring import __version__
from html_substring.api.preview import router as preview_router
from html_substring.core.config import settings

app = FastAPI(
    title=settings.APP_NAME,
    description="Truncate HTML fragments to a visible-character budget",
    version=__version__,
    debug=settings.DEBUG,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(preview_router)


@app.get("/health")
async def health_check():
    return {"status": "ok", "version": __version__}
