"""Lexical C# extractor."""

from __future__ import annotations

import re

from project_index.extractors.base import (
    EXPORT_BUCKET_ORDER,
    ExtractionFragment,
    FragmentBuilder,
    first_group,
)

_USING_RE = re.compile(
    r"^[ \t]*(?:global\s+)?using\s+(?:static\s+)?([A-Za-z_][\w.]*)\s*;",
    re.MULTILINE,
)
_CLASS_RE = re.compile(r"\b(?:class|struct|record)\s+([A-Za-z_][A-Za-z0-9_]*)")
_INTERFACE_RE = re.compile(r"\binterface\s+([A-Za-z_][A-Za-z0-9_]*)")
_ENUM_RE = re.compile(r"\benum\s+([A-Za-z_][A-Za-z0-9_]*)")
_METHOD_RE = re.compile(
    r"^[ \t]*(?:\[[^\]]*\]\s*)*"
    r"(?:(?:public|private|protected|internal|static|virtual|override|abstract|sealed|async|"
    r"extern|unsafe|new|partial)\s+)*"
    r"([A-Za-z_][A-Za-z0-9_<>\[\], ?.]*?)\s+"
    r"([A-Za-z_][A-Za-z0-9_]*)\s*(?:<[^>]*>)?\s*\([^)]*\)\s*"
    r"(?:where\s+[^{;]+)?(?:\{|=>|;)",
    re.MULTILINE,
)
_METHOD_SKIP = {
    "if",
    "for",
    "foreach",
    "while",
    "switch",
    "catch",
    "return",
    "new",
    "else",
    "throw",
    "case",
    "using",
    "lock",
    "await",
    "nameof",
    "typeof",
}
_EXPORT_RE = re.compile(
    r"\bpublic\s+(?:(?:static|sealed|abstract|partial|readonly|ref|unsafe|new)\s+)*"
    r"(?:(?:class|struct|record)\s+(?P<classes>[A-Za-z_][A-Za-z0-9_]*)"
    r"|interface\s+(?P<interfaces>[A-Za-z_][A-Za-z0-9_]*)"
    r"|enum\s+(?P<types>[A-Za-z_][A-Za-z0-9_]*))"
)
_CONST_RE = re.compile(r"\bconst\s+[A-Za-z_][\w<>\[\]?.]*\s+([A-Za-z_][A-Za-z0-9_]*)\s*=")


class CSharpExtractor:
    """Pattern scans for C# usings, types and methods."""

    name = "csharp"
    extensions = (".cs",)

    def extract(self, path: str, text: str) -> ExtractionFragment:
        _ = path
        builder = FragmentBuilder()
        for match in _USING_RE.finditer(text):
            builder.add_import(match.group(1))
        for match in _EXPORT_RE.finditer(text):
            found = first_group(match, EXPORT_BUCKET_ORDER)
            if found is not None:
                builder.add_export(found[1], found[0])
        builder.add_all("classes", (m.group(1) for m in _CLASS_RE.finditer(text)))
        builder.add_all("interfaces", (m.group(1) for m in _INTERFACE_RE.finditer(text)))
        builder.add_all("types", (m.group(1) for m in _ENUM_RE.finditer(text)))
        for match in _METHOD_RE.finditer(text):
            return_type, name = match.group(1), match.group(2)
            words = return_type.split()
            if name in _METHOD_SKIP or (words and words[-1] in _METHOD_SKIP):
                continue
            builder.add("functions", name)
        for match in _CONST_RE.finditer(text):
            builder.add_constant(match.group(1))
        return builder.build()
