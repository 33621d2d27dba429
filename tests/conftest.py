from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Callable

import numpy as np
import pytest
import yaml
from hypothesis import settings

from src.notes import SAMPLE_NOTES, ResearchNote
from src.utils.io_utils import NOTES_PATH_ENV


def pytest_configure(config: pytest.Config) -> None:
    config.option.xfail_strict = False
    config.addinivalue_line("markers", "hypothesis: property-based tests")
    config.addinivalue_line("markers", "ui: Streamlit AppTest checks")


# ---- Deterministic Testing Configuration ---------------------

# Global deterministic seed
DETERMINISTIC_SEED = 42


@pytest.fixture(autouse=True)
def set_deterministic_seed():
    """Set deterministic seed for all tests"""
    random.seed(DETERMINISTIC_SEED)
    np.random.seed(DETERMINISTIC_SEED)
    yield
    # Reset after test
    random.seed()
    np.random.seed()


@pytest.fixture(autouse=True)
def clear_notes_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's RS_NOTES_PATH from leaking into tests."""
    monkeypatch.delenv(NOTES_PATH_ENV, raising=False)


# ---- Data fixtures ----------------------------------------------


@pytest.fixture
def sample_notes() -> list[ResearchNote]:
    return list(SAMPLE_NOTES)


@pytest.fixture
def write_notes_file(tmp_path: Path) -> Callable[[str, object], Path]:
    """Write a notes document to tmp_path in the format implied by the name."""

    def _write(name: str, content: object) -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        elif path.suffix == ".json":
            path.write_text(json.dumps(content), encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(content, sort_keys=False), encoding="utf-8")
        return path

    return _write


# Hypothesis settings for all property-based tests
settings.register_profile("deterministic",
    deadline=None,
    max_examples=200,
    derandomize=False,
    database=None
)
settings.load_profile("deterministic")
