"""Business logic for turning a survey snapshot into a risk prediction.

The pipeline runs strictly in this order:

1. validate every input (selections, height/weight, consumption fields);
2. derive BMI from the validated height and weight;
3. assemble the 19-value feature vector in model order;
4. send it to the scoring service and map ``predictions[0]`` to a message.

Validation errors surface as :class:`InvalidInput` before anything is sent.
Scoring failures never reach the UI as exceptions; they become the fixed
failure message instead.
"""
from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from src.helpers.form_state import SurveyResponse
from src.helpers.survey_fields import (
    BODY_ERROR_MESSAGE,
    BOOLEAN_FIELDS,
    CATEGORICAL_FIELDS,
    CONSUMPTION_FIELDS,
    DISCLAIMER,
    FAILURE_MESSAGE,
    FEATURE_ORDER,
    HIGH_RISK_MESSAGE,
    LOW_RISK_MESSAGE,
    consumption_error_message,
    selection_error_message,
)
from src.scoring.base import ScoringClient

logger = logging.getLogger(__name__)

FeatureVector = Tuple[float, ...]


class InvalidInput(ValueError):
    """A form value failed validation; ``str(exc)`` is the user-facing message."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field


class SubmissionInProgress(RuntimeError):
    """Raised when a submission is attempted while another one is running."""


@dataclass(frozen=True)
class PredictionResult:
    message: str
    is_high_risk: Optional[bool] = None
    feature_vector: Optional[FeatureVector] = None
    disclaimer: str = DISCLAIMER

    @property
    def failed(self) -> bool:
        return self.is_high_risk is None


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def parse_non_negative(text: Any) -> Optional[float]:
    """Return *text* as a non-negative finite float, or ``None`` if it is not one.

    Empty and whitespace-only strings are rejected. There is no upper bound.
    """
    if text is None:
        return None
    raw = str(text).strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


def validate_response(state: SurveyResponse) -> Dict[str, float]:
    """Check every input of *state* and return the parsed numeric entries.

    Raises :class:`InvalidInput` on the first failing rule. Selections are
    checked first, then height and weight, then the consumption fields in
    form order.
    """
    for name in CATEGORICAL_FIELDS:
        if parse_non_negative(getattr(state, name)) is None:
            raise InvalidInput(selection_error_message(name), field=name)

    height = parse_non_negative(state.Height_cm)
    weight = parse_non_negative(state.Weight_kg)
    # Zero height would divide by zero in the BMI formula.
    if height is None or weight is None or height == 0:
        raise InvalidInput(BODY_ERROR_MESSAGE, field="Height_cm" if not height else "Weight_kg")

    parsed = {"Height_cm": height, "Weight_kg": weight}
    for name in CONSUMPTION_FIELDS:
        value = parse_non_negative(getattr(state, name))
        if value is None:
            raise InvalidInput(consumption_error_message(name), field=name)
        parsed[name] = value
    return parsed


# ---------------------------------------------------------------------------
# Feature engineering
# ---------------------------------------------------------------------------

def compute_bmi(height_cm: float, weight_kg: float) -> float:
    """Body-mass index rounded to two decimals."""
    height_m = height_cm / 100
    return round(weight_kg / (height_m * height_m), 2)


def _to_int(value: Any) -> int:
    # Truncates the float value: "0.2" becomes 0, but "1e3" becomes 1000
    # where a leading-digits parser would stop at 1.
    return int(float(str(value).strip()))


def build_feature_vector(state: SurveyResponse) -> FeatureVector:
    """Validate *state* and return the model-ordered feature vector."""
    numbers = validate_response(state)

    # Tiny heights underflow to a zero denominator; huge weights overflow to inf.
    height_m = numbers["Height_cm"] / 100
    if height_m * height_m == 0:
        raise InvalidInput(BODY_ERROR_MESSAGE, field="Height_cm")
    bmi = compute_bmi(numbers["Height_cm"], numbers["Weight_kg"])
    if not math.isfinite(bmi):
        raise InvalidInput(BODY_ERROR_MESSAGE, field="Weight_kg")

    vector: List[float] = []
    for name in FEATURE_ORDER:
        if name == "BMI":
            vector.append(bmi)
        elif name in BOOLEAN_FIELDS:
            vector.append(1 if getattr(state, name) else 0)
        else:
            vector.append(_to_int(getattr(state, name)))
    return tuple(vector)


def interpret_predictions(predictions: List[Any], vector: FeatureVector | None = None) -> PredictionResult:
    """Map the service answer to a display result. Only index 0 is consulted."""
    first = predictions[0]
    # JSON ``true`` is not a positive class; only the number 1 is.
    high = not isinstance(first, bool) and first == 1
    return PredictionResult(
        message=HIGH_RISK_MESSAGE if high else LOW_RISK_MESSAGE,
        is_high_risk=high,
        feature_vector=vector,
    )


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

class SubmissionPipeline:
    """Validate, build and score one survey snapshot at a time."""

    def __init__(self, client: ScoringClient):
        self.client = client
        self._in_flight = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._in_flight.locked()

    def submit(self, state: SurveyResponse) -> PredictionResult:
        """Run the whole pipeline for *state*.

        Raises :class:`InvalidInput` when validation fails (nothing is sent)
        and :class:`SubmissionInProgress` when a previous submission has not
        finished yet. Any scoring failure is returned as a failed result.
        """
        vector = build_feature_vector(state)

        if not self._in_flight.acquire(blocking=False):
            raise SubmissionInProgress("A prediction request is already in progress.")
        try:
            predictions = self.client.score([vector])
            result = interpret_predictions(predictions, vector)
        except Exception:
            logger.exception("Scoring failed for vector %s", list(vector))
            result = PredictionResult(message=FAILURE_MESSAGE, feature_vector=vector)
        finally:
            self._in_flight.release()

        logger.info("Prediction result: %s", result.message)
        return result


__all__ = [
    "InvalidInput",
    "SubmissionInProgress",
    "PredictionResult",
    "parse_non_negative",
    "validate_response",
    "compute_bmi",
    "build_feature_vector",
    "interpret_predictions",
    "SubmissionPipeline",
]
