"""Core extractor protocol and data types."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

CATEGORIES = ("imports", "exports", "functions", "classes", "interfaces", "constants", "types")
EXPORT_BUCKET_ORDER = ("functions", "classes", "interfaces", "types", "exports")

_UPPER_SNAKE_RE = re.compile(r"^[A-Z_][A-Z0-9_]*$")


@dataclass(slots=True, frozen=True)
class ExtractionFragment:
    """Structural metadata produced by one extractor for one file."""

    imports: tuple[str, ...] = ()
    exports: tuple[str, ...] = ()
    functions: tuple[str, ...] = ()
    classes: tuple[str, ...] = ()
    interfaces: tuple[str, ...] = ()
    constants: tuple[str, ...] = ()
    types: tuple[str, ...] = ()
    line_count: int | None = None
    has_comments: bool | None = None


@dataclass(slots=True)
class FragmentBuilder:
    """Accumulates names per category in first-seen order."""

    _buckets: dict[str, list[str]] = field(
        default_factory=lambda: {category: [] for category in CATEGORIES}
    )

    def add(self, category: str, name: str | None) -> None:
        """Record a name once per category."""
        if not name:
            return
        bucket = self._buckets[category]
        if name not in bucket:
            bucket.append(name)

    def add_import(self, module: str | None) -> None:
        """Record an import; repeats are kept."""
        if module:
            self._buckets["imports"].append(module)

    def add_all(self, category: str, names: Iterable[str]) -> None:
        for name in names:
            self.add(category, name)

    def add_export(self, name: str | None, bucket: str) -> None:
        """Record an exported symbol in the bucket chosen by the export scan."""
        if bucket not in EXPORT_BUCKET_ORDER:
            raise ValueError(f"Unknown export bucket: {bucket}")
        self.add(bucket, name)

    def add_constant(self, name: str | None) -> None:
        """Record a constant only when it is conventionally upper-snake-case."""
        if name and is_upper_snake(name):
            self.add("constants", name)

    def build(self) -> ExtractionFragment:
        return ExtractionFragment(
            imports=tuple(self._buckets["imports"]),
            exports=tuple(self._buckets["exports"]),
            functions=tuple(self._buckets["functions"]),
            classes=tuple(self._buckets["classes"]),
            interfaces=tuple(self._buckets["interfaces"]),
            constants=tuple(self._buckets["constants"]),
            types=tuple(self._buckets["types"]),
        )


def is_upper_snake(name: str) -> bool:
    """Return True for names like MAX_RETRIES or _DEFAULT."""
    return _UPPER_SNAKE_RE.match(name) is not None


def first_group(match: re.Match[str], groups: Iterable[int | str]) -> tuple[str, str] | None:
    """Return (group key, value) of the first participating group.

    Named groups the pattern does not declare are skipped.
    """
    for group in groups:
        if isinstance(group, str) and group not in match.re.groupindex:
            continue
        value = match.group(group)
        if value:
            return str(group), value
    return None


class LanguageExtractor(Protocol):
    """Protocol implemented by language extractors."""

    name: str
    extensions: tuple[str, ...]

    def extract(self, path: str, text: str) -> ExtractionFragment:
        """Return structural fragments for one file's text."""
