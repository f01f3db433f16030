"""Lexical Java extractor."""

from __future__ import annotations

import re

from project_index.extractors.base import (
    EXPORT_BUCKET_ORDER,
    ExtractionFragment,
    FragmentBuilder,
    first_group,
)

_IMPORT_RE = re.compile(r"^[ \t]*import\s+(?:static\s+)?([^;]+);", re.MULTILINE)
_CLASS_RE = re.compile(r"\b(?:class|enum|record)\s+([A-Za-z_][A-Za-z0-9_]*)\b")
_INTERFACE_RE = re.compile(r"\binterface\s+([A-Za-z_][A-Za-z0-9_]*)")
_METHOD_RE = re.compile(
    r"^[ \t]*(?:@[A-Za-z_][A-Za-z0-9_]*(?:\([^)]*\))?\s*)*"
    r"(?:(?:public|protected|private|abstract|final|static|synchronized|native|strictfp|default)\s+)*"
    r"(?:<[^>]+>\s*)?([A-Za-z_][A-Za-z0-9_<>\[\], ?.]*?)\s+"
    r"([A-Za-z_][A-Za-z0-9_]*)\s*\([^)]*\)\s*"
    r"(?:throws\s+[A-Za-z0-9_.,\s]+)?\s*[;{]",
    re.MULTILINE,
)
_METHOD_SKIP = {
    "if",
    "for",
    "while",
    "switch",
    "catch",
    "return",
    "new",
    "else",
    "throw",
    "case",
    "do",
    "try",
    "synchronized",
}
_EXPORT_RE = re.compile(
    r"\bpublic\s+(?:(?:static|final|abstract|sealed|non-sealed|strictfp)\s+)*"
    r"(?:(?:class|enum|record)\s+(?P<classes>[A-Za-z_][A-Za-z0-9_]*)"
    r"|@?interface\s+(?P<interfaces>[A-Za-z_][A-Za-z0-9_]*))"
)
_CONSTANT_RE = re.compile(
    r"\b(?:static\s+final|final\s+static)\s+[A-Za-z_][A-Za-z0-9_<>\[\], ?.]*?\s+"
    r"([A-Za-z_][A-Za-z0-9_]*)\s*="
)


class JavaExtractor:
    """Pattern scans for Java imports, types, methods and static constants."""

    name = "java"
    extensions = (".java",)

    def extract(self, path: str, text: str) -> ExtractionFragment:
        _ = path
        builder = FragmentBuilder()
        for match in _IMPORT_RE.finditer(text):
            builder.add_import(" ".join(match.group(1).split()))
        for match in _EXPORT_RE.finditer(text):
            found = first_group(match, EXPORT_BUCKET_ORDER)
            if found is not None:
                builder.add_export(found[1], found[0])
        builder.add_all("classes", (m.group(1) for m in _CLASS_RE.finditer(text)))
        builder.add_all("interfaces", (m.group(1) for m in _INTERFACE_RE.finditer(text)))
        for match in _METHOD_RE.finditer(text):
            return_type, name = match.group(1), match.group(2)
            last_word = return_type.split()[-1] if return_type.split() else return_type
            if name in _METHOD_SKIP or last_word in _METHOD_SKIP:
                continue
            builder.add("functions", name)
        for match in _CONSTANT_RE.finditer(text):
            builder.add_constant(match.group(1))
        return builder.build()
