"""Sector grouping for research notes."""

from typing import Iterable

from src.notes import ResearchNote

OTHER_SECTOR = "Other"
MISSING_LABEL = "N/A"


def group_by_sector(notes: Iterable[ResearchNote]) -> dict[str, list[ResearchNote]]:
    """Bucket notes by sector, keeping buckets in first-seen order.

    Notes without a sector land in the "Other" bucket.
    """
    groups: dict[str, list[ResearchNote]] = {}
    for note in notes:
        groups.setdefault(note.sector or OTHER_SECTOR, []).append(note)
    return groups


def sector_label(note: ResearchNote) -> str:
    """Sector text shown on a note card."""
    return note.sector or MISSING_LABEL
