from __future__ import annotations

"""
Domain Constants.

Centralizes the transcript grammar tokens and the reference numbers used
by the disk-usage queries.
"""

from typing import Tuple

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# QUERY DEFAULTS
# -----------------------------------------------------------------------------
SMALL_DIRECTORY_THRESHOLD = 100000
DISK_CAPACITY = 70000000
REQUIRED_FREE_SPACE = 30000000

PART_CHOICES: Tuple[str, ...] = ("1", "2", "all")

# -----------------------------------------------------------------------------
# TRANSCRIPT GRAMMAR
# -----------------------------------------------------------------------------
ROOT_NAME = "/"
ROOT_COMMAND = "$ cd /"
CD_PREFIX = "$ cd "
CD_PARENT = "$ cd .."
LS_COMMAND = "$ ls"
DIR_PREFIX = "dir"

# Deepest `$ cd` nesting accepted; parser and size queries use one frame per level
MAX_NESTING_DEPTH = 400
