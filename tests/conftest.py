from typing import Any, List, Sequence

import pytest

from src.helpers.form_state import SurveyResponse, empty_response, update_field
from src.scoring.base import ScoringClient, ScoringError


class FakeScoringClient(ScoringClient):
    """Records every call and answers with a canned response."""

    def __init__(self, predictions: List[Any] | None = None, error: Exception | None = None):
        self.predictions = predictions if predictions is not None else [0]
        self.error = error
        self.calls: List[Sequence[Sequence[float]]] = []

    def score(self, rows):
        self.calls.append(rows)
        if self.error is not None:
            raise self.error
        return self.predictions


@pytest.fixture
def valid_response() -> SurveyResponse:
    values = {
        "General_Health": "2",
        "Checkup": "4",
        "Exercise": True,
        "Age_Category": "5",
        "Height_cm": "170",
        "Weight_kg": "70",
        "Alcohol_Consumption": "2",
        "Fruit_Consumption": "10",
        "Green_Vegetables_Consumption": "10",
        "FriedPotato_Consumption": "1",
        "Sex_Female": True,
    }
    state = empty_response()
    for name, value in values.items():
        state = update_field(state, name, value)
    return state


@pytest.fixture
def fake_client() -> FakeScoringClient:
    return FakeScoringClient()


@pytest.fixture
def failing_client() -> FakeScoringClient:
    return FakeScoringClient(error=ScoringError("connection refused"))
