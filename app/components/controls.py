"""Filter controls for the research summary dashboard.

This module renders the search box, analyst selector and date selector.
"""

from typing import Any, Sequence

import streamlit as st

from src.filtering import ALL, NoteFilters, analyst_options, unique_dates
from src.notes import ResearchNote
from src.utils.logging_utils import get_logger
from src.utils.state_utils import (
    ANALYST_KEY,
    DATE_KEY,
    SEARCH_KEY,
    get_filters_state,
    reset_filters,
)

logger = get_logger(__name__)


def render_controls(notes: Sequence[ResearchNote]) -> tuple[NoteFilters, Any]:
    """Render the filter row.

    Args:
        notes: All notes, used to build the analyst and date choices

    Returns:
        Tuple of (current_filters, export_slot) where export_slot is the
        column reserved for the export button

    """
    state = st.session_state
    if SEARCH_KEY not in state:
        reset_filters(state)

    analysts = dict(analyst_options(notes))
    dates = [ALL] + unique_dates(notes)

    # Drop selections that no longer exist in the loaded notes
    if state.get(ANALYST_KEY) not in analysts:
        logger.info(f"Analyst selection {state.get(ANALYST_KEY)!r} not available, resetting")
        state[ANALYST_KEY] = ALL
    if state.get(DATE_KEY) not in dates:
        logger.info(f"Date selection {state.get(DATE_KEY)!r} not available, resetting")
        state[DATE_KEY] = ALL

    search_col, analyst_col, date_col, export_col = st.columns([3, 1, 1, 1])

    with search_col:
        st.text_input(
            "Search",
            key=SEARCH_KEY,
            placeholder="Search by company, sector, or keyword",
            label_visibility="collapsed",
        )

    with analyst_col:
        st.selectbox(
            "Analyst",
            list(analysts),
            key=ANALYST_KEY,
            format_func=lambda value: analysts[value],
            label_visibility="collapsed",
        )

    with date_col:
        st.selectbox(
            "Date",
            dates,
            key=DATE_KEY,
            format_func=lambda value: "All Dates" if value == ALL else value,
            label_visibility="collapsed",
        )

    return get_filters_state(state).to_filters(), export_col
