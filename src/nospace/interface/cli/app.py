from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of configuration
sources (defaults, stored file, CLI overrides), transcript loading, query
execution and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from nospace.core.engine import run_queries
from nospace.core.validator import validate_config
from nospace.domain.config import get_default_config, load_config
from nospace.domain.query_models import QueryResult
from nospace.infra.fs import normalize_path, read_transcript
from nospace.infra.logging import LoggingConfig, configure_logging, get_logger
from nospace.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INPUT_ERROR = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration
    base_conf = get_default_config() if args.use_defaults else load_config()

    # 4. Merge command-line overrides and validate
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(base_conf, overrides)
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 5. Transcript loading
    input_path = normalize_path(clean_conf["input_path"], "-")
    clean_conf["input_path"] = input_path
    try:
        transcript = read_transcript(input_path)
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Cannot read transcript '{input_path}': {e}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    # 6. Query execution
    logger.info(f"Reading transcript from: {input_path}")
    try:
        result = run_queries(transcript, clean_conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        msg = f"Query execution failed: {e}"
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FAILURE

    # 7. Output rendering
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return EXIT_OK if result.ok else EXIT_FAILURE

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge override values into the base configuration.

    Only known keys with a non-None value are taken over.
    """
    out = dict(base)
    for k in get_default_config():
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: QueryResult) -> None:
    """Print the result as plain text on stdout (errors on stderr)."""
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.tree_lines:
        print("\n".join(result.tree_lines))
        print()

    timings = result.timings_ms

    if result.parts in ("1", "all"):
        print(f"Part 1: {result.part_one} ({timings.get('part_one', 0.0):.3f} ms)")

    if result.parts in ("2", "all"):
        if result.part_two is None:
            print(f"Part 2: no directory frees at least {result.space_to_free} bytes")
        else:
            print(f"Part 2: {result.part_two} ({timings.get('part_two', 0.0):.3f} ms)")
            print(f"  delete: {result.deletion_candidate}")
            print(f"  space to free: {result.space_to_free}")


if __name__ == "__main__":
    sys.exit(main())
