"""JSON export of the filtered research notes."""

import json
from pathlib import Path
from typing import Iterable

from src.notes import NotesLoadError, ResearchNote
from src.utils.logging_utils import get_logger
from src.utils.path_utils import ensure_directory_exists

logger = get_logger(__name__)

EXPORT_FILENAME = "research-summary.json"
EXPORT_MIME = "application/json"


def serialize_notes(notes: Iterable[ResearchNote], indent: int = 2) -> str:
    """Serialize notes to indented JSON array text."""
    return json.dumps([note.to_dict() for note in notes], indent=indent, ensure_ascii=False)


def parse_export(text: str) -> list[ResearchNote]:
    """Parse exported JSON text back into notes.

    Raises:
        NotesLoadError: If the text is not a JSON array of valid notes

    """
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise NotesLoadError(f"export is not valid JSON ({e})") from e
    if not isinstance(doc, list):
        raise NotesLoadError("export must be a JSON array")
    return [ResearchNote.from_dict(record) for record in doc]


def write_export(notes: Iterable[ResearchNote], path: str, indent: int = 2) -> Path:
    """Write the serialized notes to a file and return its path."""
    notes = list(notes)
    out_path = Path(path)
    if out_path.parent != Path("."):
        ensure_directory_exists(str(out_path.parent))
    out_path.write_text(serialize_notes(notes, indent=indent) + "\n", encoding="utf-8")
    logger.info(f"Exported {len(notes)} notes to {out_path}")
    return out_path
