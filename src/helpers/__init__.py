"""Side-effect-free survey logic: field catalogue, form reducer, submission.

Callable from the Streamlit UI or from tests without a running app.
"""
