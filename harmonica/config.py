# harmonica/config.py
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Project root: .../harp-chords
BASE_DIR = Path(__file__).resolve().parents[1]

_VALID_TUNINGS = {"richter", "paddy-richter", "natural-minor", "country", "melody-maker"}
_VALID_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """
    Engine settings.

    Reads from:
    - environment variables
    - .env in project root

    Out-of-range values are clamped rather than rejected, so a bad .env never
    stops the host application from building layouts.
    """

    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # ---- Pitch ----
    # Concert pitch for A4 (support alias A4_HZ)
    reference_hz: float = Field(
        default=440.0,
        validation_alias=AliasChoices("REFERENCE_HZ", "A4_HZ"),
    )

    # ---- Defaults ----
    default_tuning: str = Field(default="richter", validation_alias="DEFAULT_TUNING")

    # Build all 60 key/tuning layouts when the default engine is created
    precompute_harmonicas: bool = Field(default=False, validation_alias="PRECOMPUTE_HARMONICAS")

    # ---- Logging ----
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    def model_post_init(self, __context) -> None:
        # Reference pitch sanity: historical pitch ranges roughly 415-466
        if self.reference_hz <= 0:
            self.reference_hz = 440.0
        self.reference_hz = float(min(max(self.reference_hz, 400.0), 480.0))

        tuning = (self.default_tuning or "").strip().lower().replace("_", "-")
        self.default_tuning = tuning if tuning in _VALID_TUNINGS else "richter"

        level = (self.log_level or "").strip().upper()
        self.log_level = level if level in _VALID_LEVELS else "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Host-side helper; library modules only create loggers."""
    s = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, s.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
