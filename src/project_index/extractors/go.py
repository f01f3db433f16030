"""Lexical Go extractor."""

from __future__ import annotations

import re

from project_index.extractors.base import ExtractionFragment, FragmentBuilder

_IMPORT_RE = re.compile(r"\bimport\s*(?:\(([^)]*)\)|(?:[A-Za-z_.][A-Za-z0-9_]*\s+)?\"([^\"]+)\")")
_QUOTED_RE = re.compile(r"\"([^\"]+)\"")
_FUNC_RE = re.compile(
    r"\bfunc\s+(?:\([^)]*\)\s*)?([A-Za-z_][A-Za-z0-9_]*)\s*(?:\[[^\]]*\])?\s*\("
)
_CONST_RE = re.compile(r"\bconst\s+([A-Za-z_][A-Za-z0-9_]*)")
_CONST_BLOCK_RE = re.compile(r"\bconst\s*\(([^)]*)\)")
_BLOCK_NAME_RE = re.compile(r"^\s*([A-Za-z_][A-Za-z0-9_]*)", re.MULTILINE)
_TYPE_RE = re.compile(
    r"\btype\s+([A-Za-z_][A-Za-z0-9_]*)\s*(?:\[[^\]]*\])?\s+(?:(struct)|(interface))?"
)


class GoExtractor:
    """Pattern scans for Go imports, funcs, consts and type declarations."""

    name = "go"
    extensions = (".go",)

    def extract(self, path: str, text: str) -> ExtractionFragment:
        _ = path
        builder = FragmentBuilder()
        for match in _IMPORT_RE.finditer(text):
            block, single = match.group(1), match.group(2)
            if block is not None:
                for quoted in _QUOTED_RE.finditer(block):
                    builder.add_import(quoted.group(1))
            else:
                builder.add_import(single)
        builder.add_all("functions", (m.group(1) for m in _FUNC_RE.finditer(text)))
        for match in _CONST_RE.finditer(text):
            builder.add_constant(match.group(1))
        for match in _CONST_BLOCK_RE.finditer(text):
            for name in _BLOCK_NAME_RE.finditer(match.group(1)):
                builder.add_constant(name.group(1))
        for match in _TYPE_RE.finditer(text):
            name = match.group(1)
            if match.group(2):
                builder.add("classes", name)
            elif match.group(3):
                builder.add("interfaces", name)
            else:
                builder.add("types", name)
        return builder.build()
