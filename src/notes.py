"""Research note records and loaders.

Notes are immutable. The dashboard ships with a built-in sample set and can
optionally read notes from a JSON, YAML or CSV file.
"""

import datetime
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

import pandas as pd
import yaml

from src.utils.io_utils import detect_file_format
from src.utils.logging_utils import get_logger

logger = get_logger(__name__)

NOTE_FIELDS = ("topic", "notes", "company", "sector", "analyst", "date")
REQUIRED_FIELDS = ("topic", "notes", "analyst", "date")


class NotesLoadError(ValueError):
    """Raised when a notes file cannot be read or holds invalid records."""


@dataclass(frozen=True)
class ResearchNote:
    """One analyst observation about a company/sector/topic on a given date."""

    topic: str
    notes: str
    analyst: str
    date: str
    company: Optional[str] = None
    sector: Optional[str] = None

    def to_dict(self) -> dict[str, str]:
        """Return the note as a dict in field order, omitting missing optional fields."""
        record: dict[str, str] = {}
        for name in NOTE_FIELDS:
            value = getattr(self, name)
            if value is not None:
                record[name] = value
        return record

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "ResearchNote":
        """Build a note from a mapping, normalizing blanks and the date.

        Raises:
            NotesLoadError: If a required field is missing or the date is invalid

        """
        missing = [name for name in REQUIRED_FIELDS if _blank_to_none(record.get(name)) is None]
        if missing:
            raise NotesLoadError(f"missing required field(s): {', '.join(missing)}")

        return cls(
            topic=str(record["topic"]),
            notes=str(record["notes"]),
            analyst=str(record["analyst"]),
            date=normalize_date(record["date"]),
            company=_blank_to_none(record.get("company")),
            sector=_blank_to_none(record.get("sector")),
        )


SAMPLE_NOTES: tuple[ResearchNote, ...] = (
    ResearchNote(
        topic="India-UK Free Trade Agreement (FTA)",
        notes=(
            "The trade deal, once implemented, may make imports from the UK more "
            "affordable and improve access to auto and medical equipment..."
        ),
        company="Bajaj Auto",
        sector="Pharmaceuticals",
        analyst="Person 1",
        date="2025-05-25",
    ),
    ResearchNote(
        topic="JSW Infrastructure Expansion",
        notes="JSW plans to invest in three new ports with a projected capacity of 200 MTPA by 2030.",
        company="JSW Infrastructure",
        sector="Logistics",
        analyst="Person 2",
        date="2025-05-25",
    ),
    ResearchNote(
        topic="Maruti Suzuki EV Plans",
        notes="Maruti is set to launch its first EV model in 2026 targeting urban markets initially.",
        company="Maruti Suzuki",
        sector="Automobile",
        analyst="Person 1",
        date="2025-05-24",
    ),
)


def _blank_to_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, float) and pd.isna(value):
        return None
    text = str(value)
    return text if text.strip() else None


def normalize_date(value: Any) -> str:
    """Normalize a date-like value to a YYYY-MM-DD string.

    Accepts date/datetime objects, date strings, and YYYYMMDD integers.

    Raises:
        NotesLoadError: If the value cannot be parsed as a date

    """
    if isinstance(value, bool) or not isinstance(value, (str, int, datetime.date)):
        raise NotesLoadError(f"invalid date {value!r}")
    try:
        if isinstance(value, int):
            parsed = pd.to_datetime(str(value), format="%Y%m%d", errors="raise")
        else:
            parsed = pd.to_datetime(value, errors="raise")
    except (ValueError, TypeError) as e:
        raise NotesLoadError(f"invalid date {value!r}") from e
    if pd.isna(parsed):
        raise NotesLoadError(f"invalid date {value!r}")
    return str(parsed.strftime("%Y-%m-%d"))


def _records_from_document(doc: Any) -> list[Any]:
    if isinstance(doc, Mapping) and "notes" in doc:
        doc = doc["notes"]
    if not isinstance(doc, list):
        raise NotesLoadError("expected a list of notes or a mapping with a 'notes' list")
    return doc


def _read_records(path: str, fmt: str) -> list[Any]:
    if fmt == "csv":
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        return df.to_dict(orient="records")

    with open(path, encoding="utf-8") as f:
        if fmt == "json":
            doc = json.load(f)
        else:
            doc = yaml.safe_load(f)
    return _records_from_document(doc)


def load_notes(path: str) -> list[ResearchNote]:
    """Load research notes from a JSON, YAML or CSV file.

    Args:
        path: Path to the notes file

    Returns:
        Notes in file order

    Raises:
        NotesLoadError: If the file is missing, unsupported, malformed, or holds
            an invalid record

    """
    fmt = detect_file_format(path)
    if fmt == "unsupported":
        raise NotesLoadError(f"{path}: unsupported notes file format")
    if not Path(path).exists():
        raise NotesLoadError(f"{path}: file not found")

    try:
        records = _read_records(path, fmt)
    except NotesLoadError as e:
        raise NotesLoadError(f"{path}: {e}") from e
    except (ValueError, yaml.YAMLError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise NotesLoadError(f"{path}: could not parse {fmt} ({e})") from e
    except OSError as e:
        raise NotesLoadError(f"{path}: could not read file ({e})") from e

    notes = []
    for index, record in enumerate(records, start=1):
        if not isinstance(record, Mapping):
            raise NotesLoadError(f"{path}: record {index} is not a mapping")
        try:
            notes.append(ResearchNote.from_dict(record))
        except NotesLoadError as e:
            raise NotesLoadError(f"{path}: record {index}: {e}") from e

    logger.info(f"Loaded {len(notes)} notes from {path}")
    return notes


def notes_to_frame(notes: Iterable[ResearchNote]) -> pd.DataFrame:
    """Convert notes to a DataFrame with one column per note field."""
    rows = [{name: getattr(note, name) for name in NOTE_FIELDS} for note in notes]
    return pd.DataFrame(rows, columns=list(NOTE_FIELDS))
