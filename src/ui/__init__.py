"""Streamlit presentation layer for the risk survey.

Modules here only draw widgets and react to user interaction; validation,
feature building and scoring live in the `helpers` and `scoring` packages.
"""
