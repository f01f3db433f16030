"""Nested directory map built from flat relative paths."""

from __future__ import annotations

from collections.abc import Iterable

from project_index.index.models import FILE_MARKER, DirectoryNode


def build_file_tree(relative_paths: Iterable[str]) -> DirectoryNode:
    """Fold POSIX relative paths into one nested directory map.

    A later path wins when a segment is needed both as a file and as a
    directory.
    """
    tree: DirectoryNode = {}
    for relative_path in relative_paths:
        parts = [part for part in relative_path.split("/") if part]
        if not parts:
            continue
        current = tree
        for part in parts[:-1]:
            child = current.get(part)
            if not isinstance(child, dict):
                child = {}
                current[part] = child
            current = child
        current[parts[-1]] = FILE_MARKER
    return tree


def count_file_leaves(tree: DirectoryNode) -> int:
    """Count file markers reachable from a directory node."""
    total = 0
    for child in tree.values():
        if isinstance(child, dict):
            total += count_file_leaves(child)
        else:
            total += 1
    return total
