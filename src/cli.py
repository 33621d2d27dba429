#!/usr/bin/env python3
"""Export the filtered research summary without the dashboard.

Usage:
    # Export every built-in note
    python -m src.cli

    # Person 1's notes mentioning EV, printed to stdout
    python -m src.cli --analyst "Person 1" --search EV --output -

    # Notes for one day from a custom notes file
    python -m src.cli --notes data/notes.csv --date 2025-05-25 --output out/summary.json

Exit codes:
    0 = Export written
    1 = Export file could not be written
    2 = Invalid arguments or unreadable notes file
"""

import argparse
import sys
from typing import Optional

from src.export import EXPORT_FILENAME, serialize_notes, write_export
from src.filtering import ALL, NoteFilters, filter_notes, normalize_analyst
from src.notes import SAMPLE_NOTES, NotesLoadError, load_notes, normalize_date
from src.utils.io_utils import get_notes_path, load_settings
from src.utils.logging_utils import DEFAULT_FORMAT, get_logger, setup_logging
from src.utils.path_utils import get_config_path

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="research-summary",
        description="Export the filtered research summary as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--notes", help="Notes file (.json, .yaml, .csv); defaults to the configured source")
    parser.add_argument("--search", default="", help="Case-insensitive text to match in topic, notes, company or sector")
    parser.add_argument("--analyst", default=ALL, help="Analyst name or normalized value (e.g. 'Person 1' or person1)")
    parser.add_argument("--date", default=ALL, help="Exact note date (YYYY-MM-DD)")
    parser.add_argument("--output", default=None, help=f"Output file (default: {EXPORT_FILENAME}); '-' for stdout")
    parser.add_argument("--config", default=None, help="Settings YAML file")
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(str(args.config or get_config_path()))
    log_settings = settings.get("logging", {})
    setup_logging(
        log_settings.get("level", "INFO"),
        log_file=None,
        log_format=log_settings.get("format", DEFAULT_FORMAT),
    )

    try:
        notes_path = args.notes or get_notes_path(settings)
        notes = load_notes(notes_path) if notes_path else list(SAMPLE_NOTES)

        analyst = args.analyst if args.analyst == ALL else normalize_analyst(args.analyst)
        date = args.date if args.date == ALL else normalize_date(args.date)
        filtered = filter_notes(notes, NoteFilters(search=args.search, analyst=analyst, date=date))
    except NotesLoadError as e:
        logger.error(f"Export failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    export_settings = settings.get("export", {})
    indent = int(export_settings.get("indent", 2))
    output = args.output or export_settings.get("filename", EXPORT_FILENAME)

    if output == "-":
        sys.stdout.write(serialize_notes(filtered, indent=indent) + "\n")
    else:
        try:
            path = write_export(filtered, output, indent=indent)
        except OSError as e:
            logger.error(f"Export failed: {e}")
            print(f"Error: could not write {output} ({e})", file=sys.stderr)
            sys.exit(1)
        print(f"Wrote {len(filtered)} notes to {path}", file=sys.stderr)
    sys.exit(0)


if __name__ == "__main__":
    main()
