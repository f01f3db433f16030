"""Deterministic, pruned file discovery."""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from project_index.index.ignore import IgnoreMatcher


@dataclass(slots=True, frozen=True)
class DiscoveredFile:
    """Candidate file that survived ignore and extension filtering."""

    relative_path: str
    full_path: Path
    extension: str
    size: int


def discover_files(
    root: Path,
    include_extensions: tuple[str, ...],
    matcher: IgnoreMatcher,
    *,
    exclude: Callable[[str], bool] | None = None,
) -> list[DiscoveredFile]:
    """Walk the tree without entering ignored directories; results sorted by path."""
    resolved = root.resolve()
    allowed = {extension.lower() for extension in include_extensions}
    output: list[DiscoveredFile] = []
    stack: list[Path] = [resolved]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as entries:
                ordered_entries = sorted(entries, key=lambda item: item.name)
        except OSError:
            continue
        for entry in ordered_entries:
            full_path = Path(entry.path)
            relative = full_path.relative_to(resolved).as_posix()
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = entry.is_file(follow_symlinks=False)
            except OSError:
                continue
            if is_dir:
                if matcher.matches(relative, is_dir=True):
                    continue
                if exclude is not None and exclude(relative):
                    continue
                stack.append(full_path)
                continue
            if not is_file:
                continue
            if matcher.matches(relative):
                continue
            if exclude is not None and exclude(relative):
                continue
            if not has_allowed_extension(relative, allowed):
                continue
            try:
                stat = entry.stat(follow_symlinks=False)
            except OSError:
                continue
            output.append(
                DiscoveredFile(
                    relative_path=relative,
                    full_path=full_path,
                    extension=Path(relative).suffix,
                    size=stat.st_size,
                )
            )
    output.sort(key=lambda item: item.relative_path)
    return output


def has_allowed_extension(relative_path: str, include_extensions: set[str]) -> bool:
    """Return True when the file extension is whitelisted (case-insensitive)."""
    suffix = Path(relative_path).suffix.lower()
    return suffix in include_extensions
