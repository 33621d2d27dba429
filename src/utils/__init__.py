"""Utility modules for the research summary dashboard.
"""

from .io_utils import detect_file_format, get_notes_path, load_settings, reload_settings
from .logging_utils import get_logger, setup_logging
from .path_utils import ensure_directory_exists, get_config_path, get_project_root

__all__ = [
    # Settings and IO
    "detect_file_format",
    "get_notes_path",
    "load_settings",
    "reload_settings",
    # Logging
    "get_logger",
    "setup_logging",
    # Paths
    "ensure_directory_exists",
    "get_config_path",
    "get_project_root",
]
