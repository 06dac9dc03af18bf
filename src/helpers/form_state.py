"""Survey form state and its reducer.

The UI never mutates a snapshot in place. Every widget change goes through
:func:`update_field`, which returns a new :class:`SurveyResponse`. Values are
stored exactly as the widgets produce them (raw text for selects and numeric
entries, booleans for checkboxes and the sex radio) and are only validated at
submission time.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Union

from src.helpers.survey_fields import BOOLEAN_FIELDS, FORM_FIELDS

FieldValue = Union[str, bool]

# Radio pair: selecting one side always clears the other.
_EXCLUSIVE_PAIRS = {
    "Sex_Female": "Sex_Male",
    "Sex_Male": "Sex_Female",
}


@dataclass(frozen=True)
class SurveyResponse:
    """One immutable snapshot of the form."""

    General_Health: str = ""
    Checkup: str = ""
    Exercise: bool = False
    Skin_Cancer: bool = False
    Other_Cancer: bool = False
    Depression: bool = False
    Diabetes: bool = False
    Arthritis: bool = False
    Age_Category: str = ""
    Height_cm: str = ""
    Weight_kg: str = ""
    Smoking_History: bool = False
    Alcohol_Consumption: str = ""
    Fruit_Consumption: str = ""
    Green_Vegetables_Consumption: str = ""
    FriedPotato_Consumption: str = ""
    Sex_Female: bool = False
    Sex_Male: bool = False

    def as_dict(self) -> Dict[str, Any]:
        """Return ``{field: value}`` in form order."""
        raw = asdict(self)
        return {name: raw[name] for name in FORM_FIELDS}


_FIELD_NAMES = frozenset(f.name for f in fields(SurveyResponse))


def empty_response() -> SurveyResponse:
    return SurveyResponse()


def update_field(state: SurveyResponse, name: str, value: FieldValue) -> SurveyResponse:
    """Return a copy of *state* with *name* set to *value*.

    Boolean fields coerce *value* with ``bool``; every other field keeps the
    raw text (``None`` becomes ``""``). Unknown field names raise ``KeyError``.
    """
    if name not in _FIELD_NAMES:
        raise KeyError(f"Unknown survey field: {name}")

    if name in BOOLEAN_FIELDS:
        flag = bool(value)
        changes: Dict[str, FieldValue] = {name: flag}
        partner = _EXCLUSIVE_PAIRS.get(name)
        if partner and flag:
            changes[partner] = False
        return replace(state, **changes)

    text = "" if value is None else str(value)
    return replace(state, **{name: text})
