"""Minimal configuration for the risk survey app.

Only parameters that the current codebase uses are kept.
• SCORE_URL          – full URL of the external scoring endpoint.
• SCORE_TIMEOUT_SEC  – seconds to wait for the scoring service.
• LOG_LEVEL          – root logging level for the Streamlit entry point.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv  # type: ignore

# Load variables from .env if present
load_dotenv()


@dataclass(frozen=True)
class AppSettings:
    """Immutable container for runtime parameters."""

    # --- Scoring service --------------------------------------------------
    score_url: str = os.getenv("SCORE_URL", "http://localhost:8000/score")
    score_timeout_sec: float = float(os.getenv("SCORE_TIMEOUT_SEC", "10"))

    # --- Logging ------------------------------------------------------------
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


# Singleton used by most callers
SETTINGS = AppSettings()


def update_from_kwargs(**overrides) -> AppSettings:
    """Return a new AppSettings with supplied overrides."""

    return AppSettings(
        score_url=overrides.get("score_url", SETTINGS.score_url),
        score_timeout_sec=float(overrides.get("score_timeout_sec", SETTINGS.score_timeout_sec)),
        log_level=overrides.get("log_level", SETTINGS.log_level),
    )
