from __future__ import annotations

"""
Tree Aggregator.

Read-only traversals over a parsed directory tree. Directory sizes are
never stored on the nodes; each query computes them on demand, walking the
tree once and reusing the per-directory totals for the rest of the query.
"""

from typing import Dict, Iterator, Optional, Tuple

from nospace.domain.constants import ROOT_NAME
from nospace.domain.tree_models import DirectoryNode

SizeIndex = Dict[int, int]

# -----------------------------------------------------------------------------
# SIZE COMPUTATION
# -----------------------------------------------------------------------------

def total_size(node: DirectoryNode) -> int:
    """Sum of every file size under node, descendants included."""
    return (
        sum(f.size for f in node.files.values())
        + sum(total_size(child) for child in node.subdirectories.values())
    )


def build_size_index(node: DirectoryNode, index: Optional[SizeIndex] = None) -> SizeIndex:
    """
    Compute the total size of every directory in one post-order walk.

    Returns:
        SizeIndex: Totals keyed by id() of each DirectoryNode.
    """
    if index is None:
        index = {}
    size = sum(f.size for f in node.files.values())
    for child in node.subdirectories.values():
        build_size_index(child, index)
        size += index[id(child)]
    index[id(node)] = size
    return index


def space_to_free(root: DirectoryNode, disk_capacity: int, required_free_space: int) -> int:
    """Deficit between used space and what may stay used after freeing enough room."""
    return total_size(root) - (disk_capacity - required_free_space)

# -----------------------------------------------------------------------------
# TRAVERSAL
# -----------------------------------------------------------------------------

def iter_directories(
        node: DirectoryNode,
        path: Optional[str] = None,
) -> Iterator[Tuple[str, DirectoryNode]]:
    """Yield (path, directory) pairs depth-first, children in name order."""
    if path is None:
        path = ROOT_NAME if node.name == ROOT_NAME else node.name
    yield path, node
    for child_name in sorted(node.subdirectories):
        child_path = path.rstrip("/") + "/" + child_name
        yield from iter_directories(node.subdirectories[child_name], child_path)

# -----------------------------------------------------------------------------
# QUERIES
# -----------------------------------------------------------------------------

def sum_small_directories(node: DirectoryNode, threshold: int) -> int:
    """
    Sum the totals of all directories (node included) strictly below threshold.

    A directory at or above the threshold contributes nothing itself, but its
    qualifying descendants still count.
    """
    sizes = build_size_index(node)
    return sum(
        sizes[id(d)] for _, d in iter_directories(node) if sizes[id(d)] < threshold
    )


def smallest_directory_at_least(
        node: DirectoryNode,
        min_size: int,
        *,
        prune: bool = True,
) -> Optional[int]:
    """
    Find the smallest directory total that is at least min_size.

    With prune enabled, a subtree whose own total is below min_size is not
    searched: no descendant can be larger than its ancestor.

    Returns:
        Optional[int]: The minimal qualifying size, or None if nothing qualifies.
    """
    sizes = build_size_index(node)
    return _smallest_at_least(node, min_size, sizes, prune)


def find_deletion_candidate(
        node: DirectoryNode,
        min_size: int,
) -> Optional[Tuple[str, int]]:
    """
    Locate the directory whose deletion frees at least min_size with least waste.

    Ties on size resolve to the first path in lexical order.

    Returns:
        Optional[Tuple[str, int]]: (path, size) of the chosen directory, or None.
    """
    sizes = build_size_index(node)
    candidates = [
        (sizes[id(d)], path)
        for path, d in iter_directories(node)
        if sizes[id(d)] >= min_size
    ]
    if not candidates:
        return None
    size, path = min(candidates)
    return path, size


def _smallest_at_least(
        node: DirectoryNode,
        min_size: int,
        sizes: SizeIndex,
        prune: bool,
) -> Optional[int]:
    node_size = sizes[id(node)]
    if node_size < min_size and prune:
        return None

    best = node_size if node_size >= min_size else None
    for child in node.subdirectories.values():
        candidate = _smallest_at_least(child, min_size, sizes, prune)
        if candidate is not None and (best is None or candidate < best):
            best = candidate
    return best
