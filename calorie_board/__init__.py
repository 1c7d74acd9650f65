"""Calorie Board: a calorie list view and an interactive form on Streamlit."""

__version__ = "0.1.0"
