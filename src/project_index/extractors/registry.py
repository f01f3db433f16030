"""Extractor registry with deterministic selection behavior."""

from __future__ import annotations

from dataclasses import dataclass, field

from project_index.extractors.base import LanguageExtractor


@dataclass(slots=True)
class ExtractorRegistry:
    """Ordered extractor registry with explicit fallback extractor."""

    _extractors: list[LanguageExtractor] = field(default_factory=list)
    _fallback: LanguageExtractor | None = None

    def register(self, extractor: LanguageExtractor, *, fallback: bool = False) -> None:
        """Register an extractor in deterministic insertion order."""
        if fallback:
            self._fallback = extractor
            return
        self._extractors.append(extractor)

    def select(self, extension: str) -> LanguageExtractor:
        """Select the first extractor claiming the extension, else fallback."""
        normalized = extension.lower()
        for extractor in self._extractors:
            if normalized in extractor.extensions:
                return extractor
        if self._fallback is not None:
            return self._fallback
        raise LookupError(f"No extractor supports extension: {extension}")

    def names(self) -> tuple[str, ...]:
        """Return registered extractor names in deterministic order."""
        ordered = [extractor.name for extractor in self._extractors]
        if self._fallback is not None:
            ordered.append(self._fallback.name)
        return tuple(ordered)
