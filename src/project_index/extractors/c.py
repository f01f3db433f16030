"""Lexical C/C++ extractor."""

from __future__ import annotations

import re

from project_index.extractors.base import ExtractionFragment, FragmentBuilder

_INCLUDE_RE = re.compile(r"^[ \t]*#[ \t]*include[ \t]*[<\"]([^>\"]+)[>\"]", re.MULTILINE)
_FUNCTION_RE = re.compile(
    r"^[ \t]*(?:(?:static|inline|extern|virtual|explicit|constexpr|const|unsigned|signed|"
    r"long|short|struct|enum)[ \t]+)*"
    r"([A-Za-z_][A-Za-z0-9_:<>,]*)(?:[ \t]*[*&]+[ \t]*|[ \t]+)"
    r"(~?[A-Za-z_][A-Za-z0-9_:~]*)[ \t]*\([^;{}()]*\)[ \t]*"
    r"(?:const[ \t]*)?(?:noexcept[ \t]*)?(?:override[ \t]*)?(?:\{|;|$)",
    re.MULTILINE,
)
_FUNCTION_SKIP = {
    "if",
    "for",
    "while",
    "switch",
    "return",
    "sizeof",
    "else",
    "case",
    "do",
    "defined",
    "new",
    "delete",
    "goto",
}
_CLASS_RE = re.compile(
    r"\b(?:class|struct)\s+([A-Za-z_][A-Za-z0-9_]*)\s*(?:final\s*)?(?::[^;{]*)?\{"
)
_ENUM_RE = re.compile(r"\benum\s+(?:class\s+|struct\s+)?([A-Za-z_][A-Za-z0-9_]*)")
_TYPEDEF_RE = re.compile(r"\btypedef\s+[^;{}]*?\b([A-Za-z_][A-Za-z0-9_]*)\s*;")
_USING_ALIAS_RE = re.compile(r"\busing\s+([A-Za-z_][A-Za-z0-9_]*)\s*=")
_DEFINE_RE = re.compile(r"^[ \t]*#[ \t]*define[ \t]+([A-Z_][A-Z0-9_]*)\b", re.MULTILINE)
_CONST_RE = re.compile(
    r"\b(?:const|constexpr)\s+[A-Za-z_][A-Za-z0-9_:<>]*\s+([A-Z_][A-Z0-9_]*)\s*(?:\[[^\]]*\])?\s*="
)


class CExtractor:
    """Pattern scans for includes, function signatures, aggregates and macros."""

    name = "c"
    extensions = (".c", ".h", ".cpp", ".cc", ".cxx", ".hpp", ".hh", ".hxx")

    def extract(self, path: str, text: str) -> ExtractionFragment:
        _ = path
        builder = FragmentBuilder()
        for match in _INCLUDE_RE.finditer(text):
            builder.add_import(match.group(1))
        for match in _FUNCTION_RE.finditer(text):
            return_type, name = match.group(1), match.group(2)
            if name in _FUNCTION_SKIP or return_type in _FUNCTION_SKIP:
                continue
            builder.add("functions", name)
        builder.add_all("classes", (m.group(1) for m in _CLASS_RE.finditer(text)))
        builder.add_all("types", (m.group(1) for m in _ENUM_RE.finditer(text)))
        builder.add_all("types", (m.group(1) for m in _TYPEDEF_RE.finditer(text)))
        builder.add_all("types", (m.group(1) for m in _USING_ALIAS_RE.finditer(text)))
        for pattern in (_DEFINE_RE, _CONST_RE):
            for match in pattern.finditer(text):
                builder.add_constant(match.group(1))
        return builder.build()
