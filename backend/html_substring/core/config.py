from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "HTML Substring API"
    DEBUG: bool = False

    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    # Preview defaults (visible characters)
    PREVIEW_DEFAULT_LENGTH: int = 200
    PREVIEW_MAX_LENGTH: int = 10_000
    PREVIEW_BREAK_WORDS: bool = True
    PREVIEW_SUFFIX: str = "…"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
