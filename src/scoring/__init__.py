from .base import ScoringClient, ScoringError, get_client  # noqa: F401
from .rest import HttpScoringClient  # noqa: F401

__all__ = [
    "ScoringClient",
    "ScoringError",
    "HttpScoringClient",
    "get_client",
]
