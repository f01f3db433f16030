"""Gitignore-style path exclusion with built-in defaults."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from project_index.config import IndexerConfig


@dataclass(slots=True, frozen=True)
class _CompiledPattern:
    source: str
    regex: re.Pattern[str] | None
    needle: str


@dataclass(slots=True, frozen=True)
class IgnoreMatcher:
    """Ordered ignore patterns compiled once per build."""

    patterns: tuple[str, ...]
    _compiled: tuple[_CompiledPattern, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        compiled = tuple(_compile(pattern) for pattern in self.patterns)
        object.__setattr__(self, "_compiled", compiled)

    @classmethod
    def for_config(cls, config: IndexerConfig) -> IgnoreMatcher:
        """Combine configured patterns with the project's ignore file, if any."""
        patterns = list(config.ignore_patterns)
        if config.ignore_file:
            patterns.extend(read_ignore_file(config.root / config.ignore_file))
        return cls(patterns=tuple(patterns))

    def matches(self, relative_path: str, is_dir: bool = False) -> bool:
        """Return True when a POSIX relative path is excluded."""
        candidates = (relative_path, f"{relative_path}/") if is_dir else (relative_path,)
        for pattern in self._compiled:
            if pattern.regex is not None:
                if any(pattern.regex.search(candidate) for candidate in candidates):
                    return True
                continue
            if any(pattern.needle in candidate for candidate in candidates):
                return True
        return False


def parse_ignore_lines(text: str) -> tuple[str, ...]:
    """Return non-blank, non-comment lines, stripped."""
    output: list[str] = []
    for raw_line in text.splitlines():
        if not raw_line.strip() or raw_line.startswith("#"):
            continue
        output.append(raw_line.strip())
    return tuple(output)


def read_ignore_file(path: Path) -> tuple[str, ...]:
    """Read an ignore file; a missing or unreadable file yields no patterns."""
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return ()
    return parse_ignore_lines(text)


def compile_recursive_pattern(pattern: str) -> re.Pattern[str]:
    """Translate a `**` pattern into an unanchored regex over POSIX paths."""
    parts: list[str] = []
    index = 0
    length = len(pattern)
    while index < length:
        if pattern.startswith("**/", index):
            parts.append("(?:^|.*/)" if index == 0 else "(?:.*/)?")
            index += 3
            continue
        if pattern.startswith("**", index):
            parts.append(".*")
            index += 2
            continue
        char = pattern[index]
        if char == "*":
            parts.append("[^/]*")
        else:
            parts.append(re.escape(char))
        index += 1
    return re.compile("".join(parts))


def _compile(pattern: str) -> _CompiledPattern:
    if "**" in pattern:
        return _CompiledPattern(source=pattern, regex=compile_recursive_pattern(pattern), needle="")
    return _CompiledPattern(source=pattern, regex=None, needle=pattern.replace("*", ""))
