from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Sequence


class ScoringError(Exception):
    """Raised when the scoring service cannot produce usable predictions."""


class ScoringClient(ABC):
    """Abstract interface for the external risk scoring service."""

    @abstractmethod
    def score(self, rows: Sequence[Sequence[float]]) -> List[Any]:  # noqa: D401
        """Send *rows* (a numeric matrix) and return one prediction per row."""


# ---------------------------------------------------------------------------
# Factory helper
# ---------------------------------------------------------------------------

def get_client(url: str | None = None, timeout: float | None = None) -> "ScoringClient":
    """Return the HTTP scoring client, defaulting to the configured endpoint."""

    from .rest import HttpScoringClient

    return HttpScoringClient(url=url, timeout=timeout)
