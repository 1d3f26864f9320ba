"""Application configuration helpers."""

from dataclasses import dataclass, field
import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv


load_dotenv()

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_MODEL = "gemini-1.5-flash"
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "https://localhost:3000",
    "https://127.0.0.1:3000",
]


@dataclass
class Settings:
    """Holds runtime configuration loaded from the environment."""

    gemini_api_key: Optional[str] = field(default=None, repr=False)
    gemini_model: str = DEFAULT_MODEL
    gemini_base_url: str = DEFAULT_BASE_URL
    gemini_auth_header: bool = False
    request_timeout: Optional[float] = None
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}.") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache settings so every module shares the same values."""

    origins = os.getenv("CORS_ORIGINS")
    return Settings(
        gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
        gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        gemini_base_url=os.getenv("GEMINI_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        gemini_auth_header=_env_flag("GEMINI_AUTH_HEADER"),
        request_timeout=_env_float("GEMINI_REQUEST_TIMEOUT"),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()]
        if origins
        else list(DEFAULT_CORS_ORIGINS),
    )
