import dataclasses

import pytest

from src.helpers.form_state import SurveyResponse, empty_response, update_field
from src.helpers.survey_fields import FORM_FIELDS


def test_empty_response_defaults():
    state = empty_response()
    assert state.General_Health == ""
    assert state.Height_cm == ""
    assert state.Exercise is False
    assert list(state.as_dict()) == list(FORM_FIELDS)


def test_update_returns_new_snapshot():
    state = empty_response()
    updated = update_field(state, "Height_cm", "170")

    assert updated is not state
    assert updated.Height_cm == "170"
    assert state.Height_cm == ""


def test_snapshot_is_immutable():
    state = empty_response()
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.Height_cm = "170"  # type: ignore[misc]


def test_text_fields_keep_raw_input():
    state = update_field(empty_response(), "Alcohol_Consumption", "  -3 ")
    state = update_field(state, "Fruit_Consumption", "lots")
    assert state.Alcohol_Consumption == "  -3 "
    assert state.Fruit_Consumption == "lots"


def test_boolean_fields_store_booleans():
    state = update_field(empty_response(), "Exercise", True)
    assert state.Exercise is True
    state = update_field(state, "Exercise", False)
    assert state.Exercise is False


def test_sex_options_are_mutually_exclusive():
    state = update_field(empty_response(), "Sex_Female", True)
    assert (state.Sex_Female, state.Sex_Male) == (True, False)

    state = update_field(state, "Sex_Male", True)
    assert (state.Sex_Female, state.Sex_Male) == (False, True)

    state = update_field(state, "Sex_Female", True)
    assert (state.Sex_Female, state.Sex_Male) == (True, False)


@pytest.mark.parametrize("sequence", [
    ["Sex_Female", "Sex_Male", "Sex_Male", "Sex_Female"],
    ["Sex_Male", "Sex_Male", "Sex_Female"],
])
def test_sex_flags_never_both_true(sequence):
    state = empty_response()
    for name in sequence:
        state = update_field(state, name, True)
        assert not (state.Sex_Female and state.Sex_Male)


def test_unknown_field_raises():
    with pytest.raises(KeyError):
        update_field(empty_response(), "BMI", "22")


def test_none_text_becomes_empty():
    state = update_field(SurveyResponse(Checkup="4"), "Checkup", None)
    assert state.Checkup == ""
