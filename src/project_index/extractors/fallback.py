"""Generic extractor for whitelisted files without a language extractor."""

from __future__ import annotations

import re

from project_index.extractors.base import ExtractionFragment

_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/|//.*$|#.*$", re.MULTILINE)


class GenericExtractor:
    """Reports line count and comment presence only."""

    name = "generic"
    extensions: tuple[str, ...] = ()

    def extract(self, path: str, text: str) -> ExtractionFragment:
        _ = path
        return ExtractionFragment(
            line_count=text.count("\n") + 1,
            has_comments=_COMMENT_RE.search(text) is not None,
        )
