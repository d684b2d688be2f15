from __future__ import annotations

"""
Transcript Parser.

Recursive-descent reader that rebuilds a directory tree from a shell
session transcript. Every nesting level is one call frame; all frames
share a single cursor, so a child call consumes exactly the lines that
belong to its directory and hands control back at `$ cd ..` or at the
end of input.

Directories that only appear in a `dir <name>` listing and are never
entered with `$ cd <name>` are not part of the resulting tree.
"""

import re
from typing import Dict, Iterable, List, Optional

from nospace.domain.constants import (
    CD_PARENT,
    CD_PREFIX,
    DIR_PREFIX,
    LS_COMMAND,
    MAX_NESTING_DEPTH,
    ROOT_COMMAND,
    ROOT_NAME,
)
from nospace.domain.errors import MalformedTranscript, ParseFailure
from nospace.domain.tree_models import DirectoryNode, FileNode, freeze_directory

_SIZE_RX = re.compile(r"[0-9]+")

# -----------------------------------------------------------------------------
# CURSOR
# -----------------------------------------------------------------------------

class TranscriptCursor:
    """
    Forward-only position over the transcript lines.

    Blank lines are skipped and a trailing carriage return is dropped; any
    other whitespace is kept, since file names may end in spaces. The cursor
    remembers the 1-based number of the last line it handed out so errors
    can point at it.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: List[str] = list(lines)
        self._index = 0
        self.line_number = 0

    def next_line(self) -> Optional[str]:
        """Consume and return the next non-blank line, or None when exhausted."""
        while self._index < len(self._lines):
            raw = self._lines[self._index]
            self._index += 1
            self.line_number = self._index
            line = raw[:-1] if raw.endswith("\r") else raw
            if line.strip():
                return line
        return None

    @property
    def exhausted(self) -> bool:
        return self._index >= len(self._lines)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_transcript(text: str, *, strict_root: bool = True) -> DirectoryNode:
    """
    Parse a full transcript into its root directory.

    The first line must be `$ cd /`; it is consumed here and the root node
    is created directly instead of through the `cd` path.

    Args:
        text: Raw transcript content.
        strict_root: If True, a `$ cd ..` at the root level raises
            MalformedTranscript; otherwise it is ignored.

    Returns:
        DirectoryNode: The read-only root of the reconstructed tree.

    Raises:
        ParseFailure: A listing line is malformed.
        MalformedTranscript: The transcript structure is invalid, or nests
            deeper than MAX_NESTING_DEPTH.
    """
    cursor = TranscriptCursor(text.split("\n"))

    header = cursor.next_line()
    if header is None:
        raise MalformedTranscript("transcript is empty")
    if header.rstrip() != ROOT_COMMAND:
        raise MalformedTranscript(
            f"expected '{ROOT_COMMAND}' as first command, found '{header}'",
            cursor.line_number,
        )

    try:
        return parse_directory(cursor, ROOT_NAME, strict_root=strict_root)
    except RecursionError:
        raise MalformedTranscript("directory nesting too deep", cursor.line_number) from None


def parse_directory(
        cursor: TranscriptCursor,
        name: str,
        *,
        depth: int = 0,
        strict_root: bool = True,
) -> DirectoryNode:
    """
    Consume the lines of one nesting level and build its directory.

    Args:
        cursor: Shared cursor, advanced destructively.
        name: Name of the directory being built.
        depth: Nesting level; 0 is the root.
        strict_root: Fail on `$ cd ..` at depth 0 instead of ignoring it.

    Returns:
        DirectoryNode: The populated, read-only directory.
    """
    files: Dict[str, FileNode] = {}
    subdirectories: Dict[str, DirectoryNode] = {}

    while True:
        line = cursor.next_line()
        if line is None:
            break

        command = line.rstrip()
        if command == CD_PARENT:
            if depth > 0:
                break
            if strict_root:
                raise MalformedTranscript(
                    "'$ cd ..' with no open directory above the root",
                    cursor.line_number,
                )
            continue

        if command == LS_COMMAND:
            continue

        if command.startswith(CD_PREFIX):
            if depth >= MAX_NESTING_DEPTH:
                raise MalformedTranscript(
                    f"directory nesting deeper than {MAX_NESTING_DEPTH} levels",
                    cursor.line_number,
                )
            child_name = command[len(CD_PREFIX):]
            subdirectories[child_name] = parse_directory(
                cursor, child_name, depth=depth + 1, strict_root=strict_root
            )
            continue

        if command.startswith(DIR_PREFIX):
            continue

        if command.startswith("$"):
            raise ParseFailure(f"unknown command '{command}'", cursor.line_number, line)

        file_node = parse_file_entry(line, cursor.line_number)
        files[file_node.name] = file_node

    return freeze_directory(name, files, subdirectories)


def parse_file_entry(line: str, line_number: Optional[int] = None) -> FileNode:
    """
    Parse a `<size> <name>` listing line.

    The name is everything after the whitespace following the size, trailing
    spaces included.

    Raises:
        ParseFailure: The size is not a non-negative integer or the name is missing.
    """
    parts = line.lstrip().split(None, 1)
    size_token = parts[0] if parts else ""

    if not _SIZE_RX.fullmatch(size_token):
        raise ParseFailure(f"invalid size token '{size_token}'", line_number, line)
    if len(parts) < 2 or not parts[1].strip():
        raise ParseFailure("file entry is missing a name", line_number, line)

    return FileNode(name=parts[1], size=int(size_token))
