from __future__ import annotations

"""
Unit tests for the Transcript Parser.

Verifies:
1. Reconstruction of the reference tree.
2. Overwrite semantics for repeated names.
3. Grammar and structural failures.
4. Read-only nature of the returned tree.
"""

import pytest

from nospace.core.parser import (
    TranscriptCursor,
    parse_directory,
    parse_file_entry,
    parse_transcript,
)
from nospace.core.solver import solve_part_one
from nospace.domain.constants import MAX_NESTING_DEPTH
from nospace.domain.errors import MalformedTranscript, ParseFailure, TranscriptError
from nospace.domain.tree_models import DirectoryNode, FileNode


def test_parse_reference_structure(example_transcript):
    """The reference transcript yields the expected nesting and files."""
    root = parse_transcript(example_transcript)

    assert root.name == "/"
    assert set(root.files) == {"b.txt", "c.dat"}
    assert root.files["b.txt"] == FileNode(name="b.txt", size=14848514)
    assert set(root.subdirectories) == {"a", "d"}

    a = root.subdirectories["a"]
    assert set(a.files) == {"f", "g", "h.lst"}
    assert set(a.subdirectories) == {"e"}
    assert a.subdirectories["e"].files["i"].size == 584

    d = root.subdirectories["d"]
    assert set(d.files) == {"j", "d.log", "d.ext", "k"}
    assert not d.subdirectories


def test_listed_but_never_entered_directory_is_omitted():
    """'dir x' alone does not create a node."""
    root = parse_transcript("$ cd /\n$ ls\ndir ghost\n10 a.txt\n")

    assert "ghost" not in root.subdirectories
    assert set(root.files) == {"a.txt"}


def test_repeated_file_name_keeps_last_entry():
    root = parse_transcript("$ cd /\n$ ls\n10 a.txt\n$ ls\n25 a.txt\n")

    assert len(root.files) == 1
    assert root.files["a.txt"].size == 25


def test_repeated_cd_replaces_subdirectory():
    """A second visit to the same name replaces the first node entirely."""
    transcript = "\n".join([
        "$ cd /",
        "$ cd x",
        "$ ls",
        "100 old.bin",
        "$ cd ..",
        "$ cd x",
        "$ ls",
        "7 new.bin",
    ])
    root = parse_transcript(transcript)

    x = root.subdirectories["x"]
    assert set(x.files) == {"new.bin"}
    assert x.files["new.bin"].size == 7


def test_end_of_input_closes_every_open_level():
    """Nested levels without a trailing 'cd ..' terminate at end of input."""
    root = parse_transcript("$ cd /\n$ cd a\n$ cd b\n$ ls\n3 deep.txt")

    assert root.subdirectories["a"].subdirectories["b"].files["deep.txt"].size == 3


def test_blank_lines_and_crlf_are_tolerated():
    root = parse_transcript("$ cd /\r\n$ ls\r\n\r\n42 a.txt\r\n\r\n")

    assert root.files["a.txt"].size == 42


def test_file_name_keeps_everything_after_size():
    entry = parse_file_entry("512 my file.txt")

    assert entry == FileNode(name="my file.txt", size=512)


def test_zero_size_file_is_accepted():
    assert parse_file_entry("0 empty").size == 0


def test_file_name_keeps_trailing_spaces():
    root = parse_transcript("$ cd /\n$ ls\n10 name  \n10 name\n")

    assert set(root.files) == {"name  ", "name"}
    crlf = parse_transcript("$ cd /\r\n$ ls\r\n10 name  \r\n")
    assert set(crlf.files) == {"name  "}


def test_only_newline_separates_lines():
    """Unicode line separators inside a file name are part of the name."""
    root = parse_transcript("$ cd /\n$ ls\n10 a\u2028b\n20 c\x85d\n")

    assert root.files["a\u2028b"].size == 10
    assert root.files["c\x85d"].size == 20


def _nested_transcript(levels: int) -> str:
    cds = "".join(f"$ cd d{i}\n" for i in range(levels))
    return "$ cd /\n" + cds + "$ ls\n10 f\n"


def test_nesting_at_the_limit_is_accepted():
    root = parse_transcript(_nested_transcript(MAX_NESTING_DEPTH))

    node = root
    for i in range(MAX_NESTING_DEPTH):
        node = node.subdirectories[f"d{i}"]
    assert node.files["f"].size == 10
    assert solve_part_one(_nested_transcript(MAX_NESTING_DEPTH)) == 10 * (MAX_NESTING_DEPTH + 1)


def test_nesting_beyond_the_limit_is_malformed():
    with pytest.raises(MalformedTranscript) as exc:
        parse_transcript(_nested_transcript(1200))

    assert exc.value.line_number == MAX_NESTING_DEPTH + 2
    assert "nesting" in str(exc.value)


@pytest.mark.parametrize("line", ["abc file.txt", "-5 file.txt", "1.5 file.txt", "12x file"])
def test_non_numeric_size_raises_parse_failure(line):
    with pytest.raises(ParseFailure) as exc_info:
        parse_transcript(f"$ cd /\n$ ls\n{line}\n")

    assert exc_info.value.line_number == 3
    assert exc_info.value.line == line


def test_missing_name_raises_parse_failure():
    with pytest.raises(ParseFailure, match="missing a name"):
        parse_transcript("$ cd /\n$ ls\n1234\n")


def test_unknown_command_raises_parse_failure():
    with pytest.raises(ParseFailure, match="unknown command"):
        parse_transcript("$ cd /\n$ rm -rf a\n")


def test_parse_failure_inside_nested_level_aborts_whole_parse():
    with pytest.raises(ParseFailure):
        parse_transcript("$ cd /\n$ cd a\n$ ls\n10 ok\nbad entry\n$ cd ..\n")


def test_empty_transcript_is_malformed():
    with pytest.raises(MalformedTranscript, match="empty"):
        parse_transcript("\n\n")


def test_missing_root_header_is_malformed():
    with pytest.raises(MalformedTranscript) as exc_info:
        parse_transcript("$ ls\n10 a.txt\n")

    assert exc_info.value.line_number == 1


def test_extra_cd_up_at_root_fails_in_strict_mode():
    with pytest.raises(MalformedTranscript) as exc_info:
        parse_transcript("$ cd /\n$ cd a\n$ cd ..\n$ cd ..\n10 x\n")

    assert exc_info.value.line_number == 4
    assert isinstance(exc_info.value, TranscriptError)


def test_extra_cd_up_at_root_is_ignored_in_lenient_mode():
    root = parse_transcript("$ cd /\n$ cd a\n$ cd ..\n$ cd ..\n$ ls\n10 x\n", strict_root=False)

    assert "a" in root.subdirectories
    assert root.files["x"].size == 10


def test_parse_directory_returns_at_cd_up_and_leaves_cursor_positioned():
    """A nested call stops right after its 'cd ..'; the rest stays unread."""
    cursor = TranscriptCursor(["$ ls", "5 inner", "$ cd ..", "9 outer"])

    node = parse_directory(cursor, "child", depth=1)

    assert set(node.files) == {"inner"}
    assert cursor.next_line() == "9 outer"
    assert cursor.exhausted


def test_returned_tree_is_read_only(example_transcript):
    root = parse_transcript(example_transcript)

    with pytest.raises(TypeError):
        root.files["new"] = FileNode(name="new", size=1)  # type: ignore[index]
    with pytest.raises(TypeError):
        root.subdirectories["z"] = DirectoryNode(name="z")  # type: ignore[index]
