"""Streamlit UI for the cardiovascular risk survey.

This module contains the UI-only logic: widgets, alerts and the result
dialog. Form state lives in ``st.session_state.survey`` and is only ever
replaced through `helpers.form_state.update_field`; validation, BMI and
scoring are delegated to `helpers.submission`.
"""
from __future__ import annotations

import logging

import pandas as pd
import streamlit as st

from src.helpers import survey_fields as sf
from src.helpers.form_state import empty_response, update_field
from src.helpers.submission import (
    InvalidInput,
    PredictionResult,
    SubmissionInProgress,
    SubmissionPipeline,
)
from src.scoring import get_client

logger = logging.getLogger(__name__)

SEX_CHOICES = ("Female", "Male")


def _widget_key(name: str) -> str:
    return f"w_{name}"


def _initialize_form_session() -> None:
    """Initialize form session state."""
    if "survey" not in st.session_state:
        st.session_state.survey = empty_response()
    if "pipeline" not in st.session_state:
        st.session_state.pipeline = SubmissionPipeline(get_client())


# ---------------------------------------------------------------------------
# Widget callbacks
# ---------------------------------------------------------------------------

def _on_field_change(name: str) -> None:
    value = st.session_state[_widget_key(name)]
    st.session_state.survey = update_field(st.session_state.survey, name, value)


def _on_sex_change() -> None:
    choice = st.session_state[_widget_key("Sex")]
    if choice is None:
        return
    field = "Sex_Female" if choice == "Female" else "Sex_Male"
    st.session_state.survey = update_field(st.session_state.survey, field, True)


# ---------------------------------------------------------------------------
# Widgets
# ---------------------------------------------------------------------------

def _select(name: str) -> None:
    options = sf.SELECT_OPTIONS[name]
    labels = dict(options)
    st.selectbox(
        sf.FIELD_LABELS[name],
        [""] + [code for code, _ in options],
        format_func=lambda code: labels.get(code, "Select an option"),
        key=_widget_key(name),
        on_change=_on_field_change,
        args=(name,),
    )


def _checkbox(name: str) -> None:
    st.checkbox(
        sf.FIELD_LABELS[name],
        key=_widget_key(name),
        on_change=_on_field_change,
        args=(name,),
    )


def _number_entry(name: str) -> None:
    st.text_input(
        sf.FIELD_LABELS[name],
        key=_widget_key(name),
        on_change=_on_field_change,
        args=(name,),
    )


@st.dialog(sf.RESULT_TITLE)
def _result_dialog(result: PredictionResult) -> None:
    st.write(result.message)
    st.caption(result.disclaimer)

    if result.feature_vector is not None:
        with st.expander("Submitted features"):
            df = pd.DataFrame([result.feature_vector], columns=list(sf.FEATURE_ORDER))
            st.dataframe(df.T.rename(columns={0: "value"}))

    if st.button("Close", key="close_result"):
        st.rerun()


def render_risk_form() -> None:
    """Render the survey form, handle Submit and show the result dialog."""

    _initialize_form_session()

    st.title(sf.PAGE_TITLE)

    _select("General_Health")
    _select("Checkup")

    for name in ("Exercise", "Skin_Cancer", "Other_Cancer", "Depression", "Diabetes", "Arthritis"):
        _checkbox(name)

    _select("Age_Category")

    _number_entry("Height_cm")
    _number_entry("Weight_kg")

    _checkbox("Smoking_History")

    for name in sf.CONSUMPTION_FIELDS:
        _number_entry(name)

    st.radio(
        "Sex",
        SEX_CHOICES,
        index=None,
        horizontal=True,
        key=_widget_key("Sex"),
        on_change=_on_sex_change,
    )

    if not st.button("Submit", type="primary", key="submit"):
        return

    pipeline: SubmissionPipeline = st.session_state.pipeline
    try:
        with st.spinner("Getting prediction..."):
            result = pipeline.submit(st.session_state.survey)
    except InvalidInput as exc:
        logger.info("Submission rejected: %s", exc)
        st.error(str(exc))
        return
    except SubmissionInProgress as exc:
        st.warning(str(exc))
        return

    # The result is not kept in session state, so dismissing the dialog discards it.
    _result_dialog(result)
