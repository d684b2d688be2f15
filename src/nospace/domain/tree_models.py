from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the recursive node types produced by the transcript parser. Nodes
are built from plain dictionaries and handed out behind read-only mapping
proxies, so a tree cannot change once parsing has returned it.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (file) in the reconstructed tree.

    Attributes:
        name: File name, unique within its owning directory.
        size: Size in bytes as reported by the listing line.
    """
    name: str
    size: int


@dataclass(frozen=True)
class DirectoryNode:
    """
    Represents a directory and everything it exclusively owns.

    Attributes:
        name: Directory name, unique only among its siblings.
        files: Files keyed by name.
        subdirectories: Child directories keyed by name.
    """
    name: str
    files: Mapping[str, FileNode] = field(default_factory=dict)
    subdirectories: Mapping[str, "DirectoryNode"] = field(default_factory=dict)


def freeze_directory(
        name: str,
        files: Dict[str, FileNode],
        subdirectories: Dict[str, DirectoryNode],
) -> DirectoryNode:
    """Wrap construction-time dictionaries into a read-only DirectoryNode."""
    return DirectoryNode(
        name=name,
        files=MappingProxyType(dict(files)),
        subdirectories=MappingProxyType(dict(subdirectories)),
    )
