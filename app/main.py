"""Streamlit GUI for the Daily Research Summary dashboard.

This app provides an interactive interface for:
- Browsing research notes grouped by sector
- Filtering by free-text search, analyst and date
- Expanding or collapsing every sector group at once
- Exporting the filtered notes as research-summary.json

## How to Run
```bash
python run_streamlit.py
```

## Notes Source
- **Default**: the built-in sample notes
- **File**: `data.notes_path` in `config/settings.yaml`, or the `RS_NOTES_PATH`
  environment variable (.json, .yaml or .csv)
"""

from typing import Optional

import streamlit as st

from app.components import (
    NO_MATCHES_MESSAGE,
    render_controls,
    render_export,
    render_notes_table,
    render_sector_groups,
)
from src.export import EXPORT_FILENAME
from src.filtering import filter_notes
from src.notes import SAMPLE_NOTES, NotesLoadError, ResearchNote, load_notes
from src.utils.io_utils import get_notes_path, load_settings
from src.utils.logging_utils import DEFAULT_FORMAT, get_logger, setup_logging
from src.utils.path_utils import get_config_path
from src.utils.state_utils import (
    expand_toggle_label,
    get_view_state,
    toggle_expanded,
)


@st.cache_data(show_spinner=False)
def load_dashboard_notes(notes_path: Optional[str]) -> list[ResearchNote]:
    """Load notes from the configured file, or the built-in sample when unset."""
    if not notes_path:
        return list(SAMPLE_NOTES)
    return load_notes(notes_path)


def main() -> None:
    """Main application entry point."""
    settings = load_settings(str(get_config_path()))
    log_settings = settings.get("logging", {})
    setup_logging(
        log_settings.get("level", "INFO"),
        log_settings.get("file"),
        log_settings.get("format", DEFAULT_FORMAT),
    )
    logger = get_logger(__name__)

    app_settings = settings.get("app", {})
    st.set_page_config(
        page_title=app_settings.get("title", "Daily Research Summary"),
        page_icon=app_settings.get("page_icon"),
        layout=app_settings.get("layout", "wide"),
    )

    st.title(app_settings.get("title", "Daily Research Summary"))

    notes_path = get_notes_path(settings)
    try:
        notes = load_dashboard_notes(notes_path)
    except NotesLoadError as e:
        logger.error(f"Failed to load notes: {e}")
        st.error(f"Failed to load notes: {e}. Showing the built-in sample notes instead.")
        notes = list(SAMPLE_NOTES)

    filters, export_slot = render_controls(notes)
    filtered = filter_notes(notes, filters)

    export_settings = settings.get("export", {})
    with export_slot:
        render_export(
            filtered,
            filename=export_settings.get("filename", EXPORT_FILENAME),
            indent=int(export_settings.get("indent", 2)),
        )

    view_state = get_view_state(st.session_state)
    caption_col, table_col, toggle_col = st.columns([4, 1, 1])
    with caption_col:
        st.caption(f"Showing {len(filtered)} of {len(notes)} notes")
    with table_col:
        show_table = st.checkbox("Show as table", key="rs.view.table")
    with toggle_col:
        st.button(
            expand_toggle_label(view_state.expanded),
            key="rs.view.toggle",
            on_click=toggle_expanded,
            args=(st.session_state,),
        )

    if not filtered:
        st.info(NO_MATCHES_MESSAGE)
    elif show_table:
        render_notes_table(filtered)
    else:
        render_sector_groups(filtered, view_state.expanded)


if __name__ == "__main__":
    main()
