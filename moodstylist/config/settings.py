"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def _load_env_file(path: str = ".env") -> None:
    """Populate os.environ from the provided .env file if it exists."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


@dataclass(frozen=True, slots=True)
class Settings:
    """Centralised project settings based on OS environment variables."""

    environment: str = "dev"
    log_level: str = "INFO"

    gateway_api_key: str = ""
    gateway_base_url: str = "https://ai.gateway.lovable.dev/v1"
    gateway_text_model: str = "google/gemini-2.5-flash"
    gateway_image_model: str = "google/gemini-2.5-flash-image"
    gateway_timeout: float = 120.0

    telegram_bot_token: str = ""
    stylist_api_url: str = "http://localhost:8000/generate-outfit"
    wizard_transition_delay: float = 0.3


def _build_settings() -> Settings:
    _load_env_file()

    return Settings(
        environment=os.getenv("ENVIRONMENT", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        gateway_api_key=os.getenv("AI_GATEWAY_API_KEY", os.getenv("LOVABLE_API_KEY", "")),
        gateway_base_url=os.getenv("AI_GATEWAY_BASE_URL", "https://ai.gateway.lovable.dev/v1"),
        gateway_text_model=os.getenv("AI_GATEWAY_TEXT_MODEL", "google/gemini-2.5-flash"),
        gateway_image_model=os.getenv("AI_GATEWAY_IMAGE_MODEL", "google/gemini-2.5-flash-image"),
        gateway_timeout=float(os.getenv("AI_GATEWAY_TIMEOUT", "120")),
        telegram_bot_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
        stylist_api_url=os.getenv("STYLIST_API_URL", "http://localhost:8000/generate-outfit"),
        wizard_transition_delay=float(os.getenv("WIZARD_TRANSITION_DELAY", "0.3")),
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance to avoid re-reading configuration."""

    return _build_settings()
