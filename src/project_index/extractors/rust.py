"""Lexical Rust extractor."""

from __future__ import annotations

import re

from project_index.extractors.base import (
    EXPORT_BUCKET_ORDER,
    ExtractionFragment,
    FragmentBuilder,
    first_group,
)

_VISIBILITY = r"pub(?:\s*\([^)]*\))?"
_USE_RE = re.compile(rf"^[ \t]*(?:{_VISIBILITY}\s+)?use\s+([^;]+);", re.MULTILINE)
_FN_RE = re.compile(r"\bfn\s+([A-Za-z_][A-Za-z0-9_]*)")
_CONST_RE = re.compile(r"\b(?:const|static)\s+(?:mut\s+)?([A-Za-z_][A-Za-z0-9_]*)\s*:")
_STRUCT_RE = re.compile(r"\b(?:struct|enum|union)\s+([A-Za-z_][A-Za-z0-9_]*)")
_TRAIT_RE = re.compile(r"\btrait\s+([A-Za-z_][A-Za-z0-9_]*)")
_TYPE_RE = re.compile(r"\btype\s+([A-Za-z_][A-Za-z0-9_]*)\s*(?:<[^>]*>)?\s*=")
_EXPORT_RE = re.compile(
    rf"\b{_VISIBILITY}\s+(?:(?:async|const|unsafe|extern\s+\"[^\"]*\")\s+)*"
    r"(?:fn\s+(?P<functions>[A-Za-z_][A-Za-z0-9_]*)"
    r"|(?:struct|enum|union)\s+(?P<classes>[A-Za-z_][A-Za-z0-9_]*)"
    r"|trait\s+(?P<interfaces>[A-Za-z_][A-Za-z0-9_]*)"
    r"|type\s+(?P<types>[A-Za-z_][A-Za-z0-9_]*)"
    r"|(?:const|static|mod)\s+(?:mut\s+)?(?P<exports>[A-Za-z_][A-Za-z0-9_]*))"
)


class RustExtractor:
    """Pattern scans for Rust use paths, items and `pub` visibility."""

    name = "rust"
    extensions = (".rs",)

    def extract(self, path: str, text: str) -> ExtractionFragment:
        _ = path
        builder = FragmentBuilder()
        for match in _USE_RE.finditer(text):
            builder.add_import(" ".join(match.group(1).split()))
        for match in _EXPORT_RE.finditer(text):
            found = first_group(match, EXPORT_BUCKET_ORDER)
            if found is not None:
                builder.add_export(found[1], found[0])
        builder.add_all("functions", (m.group(1) for m in _FN_RE.finditer(text)))
        builder.add_all("classes", (m.group(1) for m in _STRUCT_RE.finditer(text)))
        builder.add_all("interfaces", (m.group(1) for m in _TRAIT_RE.finditer(text)))
        builder.add_all("types", (m.group(1) for m in _TYPE_RE.finditer(text)))
        for match in _CONST_RE.finditer(text):
            builder.add_constant(match.group(1))
        return builder.build()
