from __future__ import annotations

"""
Core query orchestration.

This module coordinates a full run:
1. Validates the configuration.
2. Parses the transcript once into a read-only tree.
3. Runs the requested queries against that shared tree.
4. Times every stage and packs the answers into a QueryResult.
"""

import logging
import time
from typing import Any, Dict, List, Optional

from nospace.core.aggregator import (
    find_deletion_candidate,
    iter_directories,
    space_to_free,
    sum_small_directories,
    total_size,
)
from nospace.core.parser import parse_transcript
from nospace.core.tree_renderer import render_tree
from nospace.core.validator import validate_config
from nospace.domain.errors import TranscriptError
from nospace.domain.query_models import (
    QueryResult,
    create_error_result,
    create_success_result,
)

logger = logging.getLogger(__name__)


def run_queries(transcript: str, config: Optional[Dict[str, Any]] = None) -> QueryResult:
    """
    Execute the configured queries against a transcript.

    Transcript errors are reported through the result instead of raised.

    Args:
        transcript: Raw transcript content.
        config: The configuration dictionary (raw or partial).

    Returns:
        QueryResult: Object containing status, answers and timings.
    """
    logger.info("Query execution started.")

    # -------------------------------------------------------------------------
    # 1) Config
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config if config is not None else {}, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    parts = cfg["parts"]
    timings: Dict[str, float] = {}

    # -------------------------------------------------------------------------
    # 2) Parse
    # -------------------------------------------------------------------------
    started = time.perf_counter()
    try:
        root = parse_transcript(transcript, strict_root=cfg["strict_root"])
    except TranscriptError as e:
        msg = f"Transcript rejected: {e}"
        logger.error(msg)
        return create_error_result(msg, cfg, summary_extra={"error_type": type(e).__name__})
    timings["parse"] = _elapsed_ms(started)

    root_size = total_size(root)
    logger.debug(f"Parsed tree rooted at '{root.name}' with total size {root_size}.")

    # -------------------------------------------------------------------------
    # 3) Queries
    # -------------------------------------------------------------------------
    part_one: Optional[int] = None
    part_two: Optional[int] = None
    deficit = 0
    candidate_path = ""

    if parts in ("1", "all"):
        started = time.perf_counter()
        part_one = sum_small_directories(root, cfg["small_dir_threshold"])
        timings["part_one"] = _elapsed_ms(started)
        logger.info(f"Part 1 answer: {part_one}")

    if parts in ("2", "all"):
        started = time.perf_counter()
        deficit = space_to_free(root, cfg["disk_capacity"], cfg["required_free_space"])
        candidate = find_deletion_candidate(root, deficit)
        timings["part_two"] = _elapsed_ms(started)
        if candidate is None:
            logger.warning(f"No directory frees at least {deficit} bytes.")
        else:
            candidate_path, part_two = candidate
            logger.info(f"Part 2 answer: {part_two} ({candidate_path})")

    # -------------------------------------------------------------------------
    # 4) Assemble
    # -------------------------------------------------------------------------
    tree_lines: List[str] = render_tree(root) if cfg["show_tree"] else []

    summary = {
        "directories": sum(1 for _ in iter_directories(root)),
        "files": sum(len(d.files) for _, d in iter_directories(root)),
        "warnings": list(warnings),
    }

    return create_success_result(
        cfg,
        part_one=part_one,
        part_two=part_two,
        root_size=root_size,
        space_to_free=deficit,
        deletion_candidate=candidate_path,
        timings_ms=timings,
        tree_lines=tree_lines,
        summary_extra=summary,
    )


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000.0, 3)
