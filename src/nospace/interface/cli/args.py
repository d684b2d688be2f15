from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed argparse
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from nospace.domain.constants import PART_CHOICES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the nospace CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="nospace",
        description=(
            "Rebuild a directory tree from a shell session transcript and "
            "report disk usage answers."
        ),
    )

    # --- Input ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Transcript file to read ('-' for stdin).",
    )
    p.add_argument(
        "--part",
        dest="parts",
        choices=PART_CHOICES,
        default=None,
        help="Which query to run: 1, 2 or all.",
    )

    # --- Query parameters ---
    p.add_argument(
        "--threshold",
        dest="small_dir_threshold",
        type=int,
        default=None,
        help="Directories strictly below this size count as small.",
    )
    p.add_argument(
        "--capacity",
        dest="disk_capacity",
        type=int,
        default=None,
        help="Total disk capacity in bytes.",
    )
    p.add_argument(
        "--required",
        dest="required_free_space",
        type=int,
        default=None,
        help="Free space the disk must end up with, in bytes.",
    )

    # --- Parsing behavior ---
    p.add_argument(
        "--lenient",
        action="store_true",
        help="Ignore '$ cd ..' at the root level instead of failing.",
    )

    # --- Output ---
    p.add_argument(
        "--tree",
        action="store_true",
        help="Print the reconstructed tree before the answers.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit the full result as JSON.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the stored configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Unset options map to None and are skipped by the merge step.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["parts"] = args.parts

    overrides["small_dir_threshold"] = args.small_dir_threshold
    overrides["disk_capacity"] = args.disk_capacity
    overrides["required_free_space"] = args.required_free_space

    if args.lenient:
        overrides["strict_root"] = False
    if args.tree:
        overrides["show_tree"] = True

    return overrides
