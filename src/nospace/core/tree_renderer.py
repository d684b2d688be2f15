from __future__ import annotations

"""
Tree Renderer.

Converts a parsed DirectoryNode into a visual ASCII listing annotated with
file sizes and directory totals.
"""

from typing import List, Optional, Union

from nospace.core.aggregator import SizeIndex, build_size_index
from nospace.domain.tree_models import DirectoryNode, FileNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: DirectoryNode) -> List[str]:
    """
    Render the whole tree, root line first.

    Returns:
        List[str]: Visual lines of the tree.
    """
    sizes = build_size_index(root)
    lines: List[str] = [_format_directory(root, sizes)]
    render_tree_structure(root, lines, prefix="", sizes=sizes)
    return lines


def render_tree_structure(
        node: DirectoryNode,
        lines: List[str],
        prefix: str = "",
        sizes: Optional[SizeIndex] = None,
) -> None:
    """
    Recursively append the children of node to lines.

    Uses standard ASCII connectors (├──, └──). Files and directories are
    interleaved in name order.

    Args:
        node: Directory whose children are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
        sizes: Precomputed directory totals; built on demand when omitted.
    """
    if sizes is None:
        sizes = build_size_index(node)

    entries: List[Union[DirectoryNode, FileNode]] = [
        *node.subdirectories.values(),
        *node.files.values(),
    ]
    entries.sort(key=lambda e: e.name)
    total = len(entries)

    for i, entry in enumerate(entries):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        if isinstance(entry, DirectoryNode):
            lines.append(f"{prefix}{connector}{_format_directory(entry, sizes)}")
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_tree_structure(entry, lines, prefix=new_prefix, sizes=sizes)
            continue

        lines.append(f"{prefix}{connector}{entry.name} (file, size={entry.size})")


def _format_directory(node: DirectoryNode, sizes: SizeIndex) -> str:
    label = node.name if node.name.endswith("/") else f"{node.name}/"
    return f"{label} (dir, size={sizes[id(node)]})"
