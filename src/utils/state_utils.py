"""
Session state utilities for the research summary dashboard.

This module provides typed helpers for managing namespaced session state keys
without importing Streamlit directly. It accepts dict-like objects for flexibility.
"""

from dataclasses import dataclass
from typing import Any

from src.filtering import ALL, NoteFilters

SEARCH_KEY = "rs.filters.search"
ANALYST_KEY = "rs.filters.analyst"
DATE_KEY = "rs.filters.date"
EXPANDED_KEY = "rs.view.expanded"


@dataclass
class FiltersState:
    """Filter selection state."""

    search: str = ""
    analyst: str = ALL
    date: str = ALL

    def to_filters(self) -> NoteFilters:
        return NoteFilters(search=self.search, analyst=self.analyst, date=self.date)


@dataclass
class ViewState:
    """Group expansion state shared by every sector group."""

    expanded: bool = True


def get_filters_state(state: Any) -> FiltersState:
    """Get filters state from session state."""
    return FiltersState(
        search=state.get(SEARCH_KEY, ""),
        analyst=state.get(ANALYST_KEY, ALL),
        date=state.get(DATE_KEY, ALL),
    )


def set_filters_state(state: Any, filters_state: FiltersState) -> None:
    """Set filters state in session state."""
    state[SEARCH_KEY] = filters_state.search
    state[ANALYST_KEY] = filters_state.analyst
    state[DATE_KEY] = filters_state.date


def reset_filters(state: Any) -> None:
    """Restore the default filter selection."""
    set_filters_state(state, FiltersState())


def get_view_state(state: Any) -> ViewState:
    """Get view state from session state."""
    return ViewState(expanded=bool(state.get(EXPANDED_KEY, True)))


def set_view_state(state: Any, view_state: ViewState) -> None:
    """Set view state in session state."""
    state[EXPANDED_KEY] = view_state.expanded


def toggle_expanded(state: Any) -> bool:
    """Flip the expand/collapse flag for all groups and return the new value."""
    view_state = get_view_state(state)
    view_state.expanded = not view_state.expanded
    set_view_state(state, view_state)
    return view_state.expanded


def expand_toggle_label(expanded: bool) -> str:
    return "Collapse All" if expanded else "Expand All"
