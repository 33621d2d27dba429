#!/usr/bin/env python3
"""Wrapper script to run the research summary dashboard with interrupt handling.
"""

import logging
import os
import signal
import subprocess
import sys

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

APP_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "app", "main.py")


def signal_handler(signum: int, frame: object) -> None:
    """Handle interrupt signals gracefully."""
    logger.info(f"Received signal {signum}, shutting down gracefully...")
    sys.exit(0)


def build_command(python_executable: str, extra_args: list[str]) -> list[str]:
    """Build the streamlit command line for the dashboard."""
    return [python_executable, "-m", "streamlit", "run", APP_PATH, *extra_args]


def main() -> None:
    """Run the Streamlit dashboard with enhanced error handling."""
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        python_executable = sys.executable
        if ".venv" not in python_executable and "venv" not in python_executable:
            venv_python = os.path.join(os.getcwd(), ".venv", "bin", "python")
            if os.path.exists(venv_python):
                python_executable = venv_python
                logger.info(f"Using virtual environment Python: {python_executable}")

        cmd = build_command(python_executable, sys.argv[1:])
        logger.info("Starting research summary dashboard...")
        logger.info(f"Command: {' '.join(cmd)}")

        process = subprocess.run(cmd, check=False)

        if process.returncode == 0:
            logger.info("Dashboard exited successfully")
        else:
            logger.warning(f"Dashboard exited with code {process.returncode}")
            sys.exit(process.returncode)

    except KeyboardInterrupt:
        logger.info("Received KeyboardInterrupt, shutting down gracefully...")
        sys.exit(0)
    except OSError as e:
        logger.error(f"Error running Streamlit: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
