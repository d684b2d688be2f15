from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for the reference transcript and configuration dictionaries.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def example_transcript_path() -> Path:
    """Path to the 23-line reference transcript."""
    return FIXTURES_DIR / "example_transcript.txt"


@pytest.fixture
def example_transcript(example_transcript_path: Path) -> str:
    """
    Return the reference transcript.

    Root '/' holds b.txt and c.dat plus directories 'a' (94853, with 'e'
    at 584) and 'd' (24933642); the root total is 48381165.
    """
    return example_transcript_path.read_text(encoding="utf-8")


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """Return a valid, complete configuration dictionary for testing."""
    return {
        "input_path": "-",
        "parts": "all",
        "small_dir_threshold": 100000,
        "disk_capacity": 70000000,
        "required_free_space": 30000000,
        "strict_root": True,
        "show_tree": False,
    }


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the stored configuration file at a temporary location."""
    config_path = tmp_path / "config" / "config.json"
    monkeypatch.setenv("NOSPACE_CONFIG", str(config_path))
    return config_path
