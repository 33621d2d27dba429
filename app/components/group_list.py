"""Sector group list for the research summary dashboard.

This module renders one section per sector with a card for each note.
"""

from typing import Sequence

import streamlit as st

from src.grouping import group_by_sector, sector_label
from src.notes import ResearchNote, notes_to_frame
from src.utils.logging_utils import get_logger

logger = get_logger(__name__)

CARDS_PER_ROW = 2
NO_MATCHES_MESSAGE = "No notes match the current filters."


def _render_note_card(note: ResearchNote) -> None:
    with st.container(border=True):
        st.caption(f"Sector: {sector_label(note)} | Date: {note.date}")
        st.markdown(f"#### {note.topic}")
        st.markdown(note.notes)
        st.caption(f"Source: {note.analyst}")


def render_sector_groups(filtered_notes: Sequence[ResearchNote], expanded: bool) -> None:
    """Render sector headers, and note cards when the groups are expanded.

    Args:
        filtered_notes: Notes that passed the current filters
        expanded: Whether group bodies are shown

    """
    groups = group_by_sector(filtered_notes)
    logger.debug(f"Rendering {len(groups)} sector groups (expanded={expanded})")

    for sector, items in groups.items():
        st.subheader(sector, divider="gray")
        if not expanded:
            continue
        for start in range(0, len(items), CARDS_PER_ROW):
            row = items[start : start + CARDS_PER_ROW]
            for column, note in zip(st.columns(CARDS_PER_ROW), row):
                with column:
                    _render_note_card(note)


def render_notes_table(filtered_notes: Sequence[ResearchNote]) -> None:
    """Render the filtered notes as a single table."""
    st.dataframe(notes_to_frame(filtered_notes), hide_index=True)
