"""Filtering utilities for research notes.

Filters combine three predicates with AND:
- free-text search across topic, notes, company and sector
- analyst selection, compared on the normalized analyst name
- exact date selection
"""

from dataclasses import dataclass
from typing import Iterable, Sequence

from src.notes import ResearchNote
from src.utils.logging_utils import get_logger

logger = get_logger(__name__)

ALL = "all"


@dataclass(frozen=True)
class NoteFilters:
    """Current filter selection."""

    search: str = ""
    analyst: str = ALL
    date: str = ALL


def normalize_analyst(name: str) -> str:
    """Lowercase an analyst name and drop its first space ("Person 1" -> "person1")."""
    return name.lower().replace(" ", "", 1)


def matches_search(note: ResearchNote, query: str) -> bool:
    """Case-insensitive substring match over topic, notes, company and sector."""
    needle = query.lower()
    if needle in note.topic.lower() or needle in note.notes.lower():
        return True
    if note.company and needle in note.company.lower():
        return True
    return bool(note.sector and needle in note.sector.lower())


def matches_analyst(note: ResearchNote, analyst: str) -> bool:
    return analyst == ALL or normalize_analyst(note.analyst) == analyst


def matches_date(note: ResearchNote, date: str) -> bool:
    return date == ALL or note.date == date


def filter_notes(notes: Iterable[ResearchNote], filters: NoteFilters) -> list[ResearchNote]:
    """Return the notes matching every active filter, preserving input order."""
    notes = list(notes)
    filtered = [
        note
        for note in notes
        if matches_analyst(note, filters.analyst)
        and matches_search(note, filters.search)
        and matches_date(note, filters.date)
    ]
    logger.debug(
        f"Filtered {len(notes)} notes to {len(filtered)} "
        f"(search={filters.search!r}, analyst={filters.analyst}, date={filters.date})",
    )
    return filtered


def unique_dates(notes: Iterable[ResearchNote]) -> list[str]:
    """Distinct note dates in first-seen order."""
    return list(dict.fromkeys(note.date for note in notes))


def analyst_options(notes: Sequence[ResearchNote]) -> list[tuple[str, str]]:
    """Build (value, label) pairs for the analyst selector.

    The first entry is the "All Analysts" choice; each distinct normalized
    analyst follows in first-seen order, labelled with its display name.
    """
    options: dict[str, str] = {ALL: "All Analysts"}
    for note in notes:
        options.setdefault(normalize_analyst(note.analyst), note.analyst)
    return list(options.items())
