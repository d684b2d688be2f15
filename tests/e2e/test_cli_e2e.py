from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script via subprocess and validates exit codes,
stdout/stderr content and JSON output.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "nospace" / "main.py"


def run_cli(
        args: List[str],
        home: Path,
        stdin: Optional[str] = None,
) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process.

    HOME and NOSPACE_CONFIG point into a temporary directory so that no
    stored configuration leaks into the run.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["NOSPACE_CONFIG"] = str(home / "config.json")

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        input=stdin,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_cli_answers_both_parts(example_transcript_path, tmp_path):
    proc = run_cli(["-i", str(example_transcript_path)], tmp_path)

    assert proc.returncode == 0, proc.stderr
    assert "Part 1: 95437" in proc.stdout
    assert "Part 2: 24933642" in proc.stdout
    assert "delete: /d" in proc.stdout


def test_cli_reads_stdin(example_transcript, tmp_path):
    proc = run_cli(["--part", "1"], tmp_path, stdin=example_transcript)

    assert proc.returncode == 0, proc.stderr
    assert "Part 1: 95437" in proc.stdout
    assert "Part 2" not in proc.stdout


def test_cli_json_output(example_transcript_path, tmp_path):
    proc = run_cli(["-i", str(example_transcript_path), "--json", "--tree"], tmp_path)

    assert proc.returncode == 0, proc.stderr
    payload = json.loads(proc.stdout)
    assert payload["ok"] is True
    assert payload["part_one"] == 95437
    assert payload["part_two"] == 24933642
    assert payload["tree_lines"][0] == "/ (dir, size=48381165)"


def test_cli_custom_threshold(example_transcript_path, tmp_path):
    proc = run_cli(["-i", str(example_transcript_path), "--part", "1", "--threshold", "1000"], tmp_path)

    assert proc.returncode == 0, proc.stderr
    assert "Part 1: 584" in proc.stdout


def test_cli_malformed_transcript_exit_code(tmp_path):
    bad = tmp_path / "bad.txt"
    bad.write_text("$ cd /\n$ ls\nxyz file\n", encoding="utf-8")

    proc = run_cli(["-i", str(bad)], tmp_path)

    assert proc.returncode == 1
    assert "ERROR" in proc.stderr
    assert "invalid size token" in proc.stderr


def test_cli_missing_input_exit_code(tmp_path):
    proc = run_cli(["-i", str(tmp_path / "nope.txt")], tmp_path)

    assert proc.returncode == 2
    assert "Cannot read transcript" in proc.stderr


def test_cli_non_utf8_input_exit_code(tmp_path):
    bad = tmp_path / "latin1.txt"
    bad.write_bytes(b"$ cd /\n$ ls\n10 caf\xe9.txt\n")

    proc = run_cli(["-i", str(bad)], tmp_path)

    assert proc.returncode == 2
    assert "Cannot read transcript" in proc.stderr
    assert "Traceback" not in proc.stderr


def test_cli_dump_config(tmp_path):
    proc = run_cli(["--dump-config", "--threshold", "42"], tmp_path)

    assert proc.returncode == 0, proc.stderr
    config = json.loads(proc.stdout)
    assert config["small_dir_threshold"] == 42
    assert config["disk_capacity"] == 70000000


@pytest.mark.parametrize("flag, expected_code", [("--lenient", 0), (None, 1)])
def test_cli_root_cd_up_policy(tmp_path, flag, expected_code):
    transcript = tmp_path / "extra_up.txt"
    transcript.write_text("$ cd /\n$ cd ..\n$ ls\n10 a\n", encoding="utf-8")

    args = ["-i", str(transcript)] + ([flag] if flag else [])
    proc = run_cli(args, tmp_path)

    assert proc.returncode == expected_code
