"""Streamlit components for the research summary dashboard.

This package contains the modular Streamlit components used by app/main.py.
"""

from .controls import render_controls
from .export import render_export
from .group_list import NO_MATCHES_MESSAGE, render_notes_table, render_sector_groups

__all__ = [
    "NO_MATCHES_MESSAGE",
    "render_controls",
    "render_export",
    "render_notes_table",
    "render_sector_groups",
]
