"""Static catalogue of the survey: field order, option codes and wording.

Everything here is plain data so both the UI and the submission pipeline can
import it without pulling in Streamlit.
"""
from __future__ import annotations

from typing import Dict, List, Tuple

# ---------------------------------------------------------------------------
# Field groups
# ---------------------------------------------------------------------------

CATEGORICAL_FIELDS: Tuple[str, ...] = ("General_Health", "Checkup", "Age_Category")

BOOLEAN_FIELDS: Tuple[str, ...] = (
    "Exercise",
    "Skin_Cancer",
    "Other_Cancer",
    "Depression",
    "Diabetes",
    "Arthritis",
    "Smoking_History",
    "Sex_Female",
    "Sex_Male",
)

BODY_FIELDS: Tuple[str, ...] = ("Height_cm", "Weight_kg")

CONSUMPTION_FIELDS: Tuple[str, ...] = (
    "Alcohol_Consumption",
    "Fruit_Consumption",
    "Green_Vegetables_Consumption",
    "FriedPotato_Consumption",
)

NUMERIC_FIELDS: Tuple[str, ...] = BODY_FIELDS + CONSUMPTION_FIELDS

# Order the scoring model was trained on. BMI is derived, never entered.
FEATURE_ORDER: Tuple[str, ...] = (
    "General_Health",
    "Checkup",
    "Exercise",
    "Skin_Cancer",
    "Other_Cancer",
    "Depression",
    "Diabetes",
    "Arthritis",
    "Age_Category",
    "Height_cm",
    "Weight_kg",
    "BMI",
    "Smoking_History",
    "Alcohol_Consumption",
    "Fruit_Consumption",
    "Green_Vegetables_Consumption",
    "FriedPotato_Consumption",
    "Sex_Female",
    "Sex_Male",
)

# Editable fields, i.e. everything except BMI.
FORM_FIELDS: Tuple[str, ...] = tuple(f for f in FEATURE_ORDER if f != "BMI")

# ---------------------------------------------------------------------------
# Select options: (code sent to the model, label shown to the user)
# ---------------------------------------------------------------------------

GENERAL_HEALTH_OPTIONS: List[Tuple[str, str]] = [
    ("0", "Poor"),
    ("1", "Fair"),
    ("2", "Good"),
    ("3", "Very Good"),
    ("4", "Excellent"),
]

CHECKUP_OPTIONS: List[Tuple[str, str]] = [
    ("4", "Within the past year"),
    ("2", "Within the past 2 years"),
    ("1", "Within the past 5 years"),
    ("0.2", "5 or more years ago"),
    ("0", "Never"),
]

AGE_CATEGORY_OPTIONS: List[Tuple[str, str]] = [
    ("0", "18-24"),
    ("1", "25-29"),
    ("2", "30-34"),
    ("3", "35-39"),
    ("4", "40-44"),
    ("5", "45-49"),
    ("6", "50-54"),
    ("7", "55-59"),
    ("8", "60-64"),
    ("9", "65-69"),
    ("10", "70-74"),
    ("11", "75-79"),
    ("12", "80+"),
]

SELECT_OPTIONS: Dict[str, List[Tuple[str, str]]] = {
    "General_Health": GENERAL_HEALTH_OPTIONS,
    "Checkup": CHECKUP_OPTIONS,
    "Age_Category": AGE_CATEGORY_OPTIONS,
}

# ---------------------------------------------------------------------------
# Wording
# ---------------------------------------------------------------------------

FIELD_LABELS: Dict[str, str] = {
    "General_Health": "General Health",
    "Checkup": "Checkup",
    "Exercise": "Do you exercise regularly?",
    "Skin_Cancer": "Did you ever have skin cancer?",
    "Other_Cancer": "Did you ever have any other type of cancer?",
    "Depression": "Did you ever have depression?",
    "Diabetes": "Do you have diabetes?",
    "Arthritis": "Do you have arthritis?",
    "Age_Category": "Age Category",
    "Height_cm": "Height (cm)",
    "Weight_kg": "Weight (kg)",
    "Smoking_History": "Smoking History",
    "Alcohol_Consumption": "How many times a month do you consume Alcohol?",
    "Fruit_Consumption": "How many times a month do you consume Fruit?",
    "Green_Vegetables_Consumption": "How many times a month do you consume Vegetables?",
    "FriedPotato_Consumption": "How many times a month do you consume Fried Potatoes?",
}

PAGE_TITLE = "Cardiovascular Diseases Risk Predictor"
RESULT_TITLE = "Prediction Result"

HIGH_RISK_MESSAGE = "You have a higher risk of cardiovascular diseases."
LOW_RISK_MESSAGE = "You are at lower risk for cardiovascular diseases."
FAILURE_MESSAGE = "Failed to get a prediction."
DISCLAIMER = (
    "Disclaimer: This prediction is based on a machine learning model and is "
    "not entirely accurate."
)

BODY_ERROR_MESSAGE = "Height and Weight must be numeric and positive values."


def consumption_error_message(field: str) -> str:
    return f"{field} must be a positive numeric value."


def selection_error_message(field: str) -> str:
    return f"{field} must be selected."

