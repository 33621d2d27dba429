"""
Export component for the research summary dashboard.

This module renders the JSON download of the currently filtered notes.
"""

from typing import Sequence

import streamlit as st

from src.export import EXPORT_FILENAME, EXPORT_MIME, serialize_notes
from src.notes import ResearchNote


def render_export(
    filtered_notes: Sequence[ResearchNote],
    filename: str = EXPORT_FILENAME,
    indent: int = 2,
) -> None:
    """Render the "Export Summary" download button for the filtered notes."""
    st.download_button(
        label="Export Summary",
        data=serialize_notes(filtered_notes, indent=indent),
        file_name=filename,
        mime=EXPORT_MIME,
        key="rs.export.download",
        help=f"Download {len(filtered_notes)} note(s) as {filename}",
    )
