from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. Handling of boolean flags (store_true).
3. Merge of overrides over a base configuration.
"""

import pytest

from nospace.interface.cli.app import _merge_config
from nospace.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_value_arguments_mapping():
    args = parse_args([
        "-i", "session.txt",
        "--part", "2",
        "--threshold", "500",
        "--capacity", "1000",
        "--required", "300",
    ])

    overrides = args_to_overrides(args)

    assert overrides["input_path"] == "session.txt"
    assert overrides["parts"] == "2"
    assert overrides["small_dir_threshold"] == 500
    assert overrides["disk_capacity"] == 1000
    assert overrides["required_free_space"] == 300


def test_cli_flags_mapping():
    overrides = args_to_overrides(parse_args(["--lenient", "--tree"]))

    assert overrides["strict_root"] is False
    assert overrides["show_tree"] is True


def test_cli_defaults_are_none_in_overrides():
    overrides = args_to_overrides(parse_args([]))

    assert overrides["input_path"] is None
    assert overrides["parts"] is None
    assert "strict_root" not in overrides
    assert "show_tree" not in overrides


def test_cli_rejects_unknown_part():
    with pytest.raises(SystemExit):
        parse_args(["--part", "3"])


def test_merge_skips_none_and_unknown_keys(mock_config_dict):
    merged = _merge_config(mock_config_dict, {"parts": None, "small_dir_threshold": 7, "bogus": 1})

    assert merged["parts"] == "all"
    assert merged["small_dir_threshold"] == 7
    assert "bogus" not in merged
