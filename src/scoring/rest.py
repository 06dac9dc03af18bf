"""REST client for the cardiovascular risk scoring service.

The service takes a numeric matrix and answers with one binary class per row:

    POST /score   {"data": [[v0, ..., v18]]}   ->   {"predictions": [0 | 1]}

Every transport, status or payload problem is raised as :class:`ScoringError`
so callers only need to handle one exception type.
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Sequence

import requests

from src.config.settings import SETTINGS
from .base import ScoringClient, ScoringError

logger = logging.getLogger(__name__)


class HttpScoringClient(ScoringClient):
    """Scoring client talking JSON over HTTP."""

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        """Initialize the client.

        Args:
            url: Full URL of the scoring endpoint (defaults to ``SCORE_URL``)
            timeout: Request timeout in seconds (defaults to ``SCORE_TIMEOUT_SEC``)
            session: Optional pre-configured ``requests.Session``
        """
        self.url = url or SETTINGS.score_url
        self.timeout = timeout if timeout is not None else SETTINGS.score_timeout_sec
        self._session = session or requests.Session()

        if not self.url:
            raise ScoringError("Scoring service URL is required")

    def score(self, rows: Sequence[Sequence[float]]) -> List[Any]:
        payload = {"data": [list(row) for row in rows]}
        headers = {"Content-Type": "application/json"}

        try:
            body = json.dumps(payload, allow_nan=False)
        except ValueError as exc:
            raise ScoringError(f"Feature values are not valid JSON numbers: {payload}") from exc

        logger.info("Sending request: %s", body)

        try:
            response = self._session.post(self.url, data=body, headers=headers, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ScoringError(f"Scoring request failed: {exc}") from exc

        if not 200 <= response.status_code < 300:
            raise ScoringError(f"Scoring failed: {response.status_code} - {response.text}")

        try:
            result = response.json()
        except ValueError as exc:
            raise ScoringError(f"Scoring response is not JSON: {response.text!r}") from exc

        logger.info("Response from model: %s", result)

        predictions = result.get("predictions") if isinstance(result, dict) else None
        if not isinstance(predictions, list) or not predictions:
            raise ScoringError(f"No predictions in response: {result}")

        return predictions
