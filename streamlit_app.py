import logging

import streamlit as st

from src.config.settings import SETTINGS
from src.helpers.survey_fields import PAGE_TITLE
from src.ui.risk_form import render_risk_form

logging.basicConfig(level=getattr(logging, SETTINGS.log_level.upper(), logging.INFO))
# Quiet noisy third-party loggers
logging.getLogger("urllib3").setLevel(logging.WARNING)


def main():
    st.set_page_config(
        page_title=PAGE_TITLE,
        page_icon="❤️",
        layout="centered",
    )

    render_risk_form()


if __name__ == "__main__":
    main()
