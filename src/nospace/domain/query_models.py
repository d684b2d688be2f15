from __future__ import annotations

"""
Query Domain Data Models.

Defines the result object and factory functions used to hand query
outcomes from the engine to the interface layer (CLI).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class QueryResult:
    """
    Unified result object of a complete query run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: Source of the transcript ('-' for stdin).
        parts: Requested parts selector ('1', '2' or 'all').
        part_one: Sum of small directory sizes, if computed.
        part_two: Size of the directory to delete, if computed.
        root_size: Total size of the reconstructed root directory.
        space_to_free: Deficit used by the second query.
        deletion_candidate: Path of the directory chosen by the second query.
        timings_ms: Elapsed milliseconds per executed stage.
        tree_lines: Rendered tree, when requested.
        summary: Extra execution metadata.
    """
    ok: bool
    error: str

    input_path: str
    parts: str

    part_one: Optional[int] = None
    part_two: Optional[int] = None

    root_size: int = 0
    space_to_free: int = 0
    deletion_candidate: str = ""

    timings_ms: Dict[str, float] = field(default_factory=dict)
    tree_lines: List[str] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        summary_extra: Optional[Dict[str, Any]] = None
) -> QueryResult:
    """
    Create a failed query result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        QueryResult: An immutable error result object.
    """
    return QueryResult(
        ok=False,
        error=error,
        input_path=cfg.get("input_path", ""),
        parts=cfg.get("parts", "all"),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        part_one: Optional[int] = None,
        part_two: Optional[int] = None,
        root_size: int = 0,
        space_to_free: int = 0,
        deletion_candidate: str = "",
        timings_ms: Optional[Dict[str, float]] = None,
        tree_lines: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> QueryResult:
    """
    Create a successful query result instance.

    Args:
        cfg: Final configuration used during execution.
        part_one: Answer of the small-directory query.
        part_two: Answer of the deletion query.
        root_size: Total size of the root directory.
        space_to_free: Deficit the deletion query searched for.
        deletion_candidate: Path of the directory to delete.
        timings_ms: Stage timings in milliseconds.
        tree_lines: Rendered tree content.
        summary_extra: Final execution metrics.

    Returns:
        QueryResult: An immutable success result object.
    """
    return QueryResult(
        ok=True,
        error="",
        input_path=cfg.get("input_path", ""),
        parts=cfg.get("parts", "all"),
        part_one=part_one,
        part_two=part_two,
        root_size=root_size,
        space_to_free=space_to_free,
        deletion_candidate=deletion_candidate,
        timings_ms=timings_ms or {},
        tree_lines=tree_lines or [],
        summary=summary_extra or {},
    )
