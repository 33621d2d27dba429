"""Streamlit app for the Daily Research Summary dashboard."""
