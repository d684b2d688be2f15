from __future__ import annotations

"""
Query entry points.

Each function parses the transcript and answers one question about the
reconstructed tree. Parse errors propagate to the caller unchanged.
"""

from typing import Optional

from nospace.core.aggregator import (
    smallest_directory_at_least,
    space_to_free,
    sum_small_directories,
)
from nospace.core.parser import parse_transcript
from nospace.domain.constants import (
    DISK_CAPACITY,
    REQUIRED_FREE_SPACE,
    SMALL_DIRECTORY_THRESHOLD,
)


def solve_part_one(
        transcript: str,
        threshold: int = SMALL_DIRECTORY_THRESHOLD,
        *,
        strict_root: bool = True,
) -> Optional[int]:
    """Sum of the totals of every directory smaller than threshold."""
    root = parse_transcript(transcript, strict_root=strict_root)
    return sum_small_directories(root, threshold)


def solve_part_two(
        transcript: str,
        disk_capacity: int = DISK_CAPACITY,
        required_free_space: int = REQUIRED_FREE_SPACE,
        *,
        strict_root: bool = True,
) -> Optional[int]:
    """Size of the smallest directory whose deletion frees enough space."""
    root = parse_transcript(transcript, strict_root=strict_root)
    deficit = space_to_free(root, disk_capacity, required_free_space)
    return smallest_directory_at_least(root, deficit)
