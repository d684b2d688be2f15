from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path resolution for persistent application data
and the transcript reader used by the CLI. The parser itself never touches
the filesystem; this module is the only place transcripts are loaded from.
"""

import os
import sys
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "NoSpace"
UNIX_APP_DIR_NAME = ".nospace"
STDIN_MARKER = "-"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/NoSpace
    - Linux/Mac: ~/.nospace

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). The stdin marker is returned untouched.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path, or the stdin marker.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    if p == STDIN_MARKER:
        return p
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))

# -----------------------------------------------------------------------------
# TRANSCRIPT I/O
# -----------------------------------------------------------------------------

def read_transcript(path: str) -> str:
    """
    Load a transcript as text.

    Args:
        path: File path, or '-' to read standard input.

    Returns:
        str: Full transcript content.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the content is not valid UTF-8.
    """
    if path == STDIN_MARKER:
        return sys.stdin.read()

    with open(path, "r", encoding="utf-8") as f:
        return f.read()
