"""Lexical Python extractor."""

from __future__ import annotations

import re

from project_index.extractors.base import ExtractionFragment, FragmentBuilder

_FROM_IMPORT_RE = re.compile(r"^\s*from\s+([.\w]+)\s+import\b", re.MULTILINE)
_IMPORT_RE = re.compile(
    r"^\s*import\s+([\w.]+(?:\s+as\s+\w+)?(?:\s*,\s*[\w.]+(?:\s+as\s+\w+)?)*)", re.MULTILINE
)
_DEF_RE = re.compile(r"^\s*(?:async\s+)?def\s+(\w+)\s*\(", re.MULTILINE)
_CLASS_RE = re.compile(r"^\s*class\s+(\w+)", re.MULTILINE)
_CONSTANT_RE = re.compile(r"^([A-Z_][A-Z0-9_]*)\s*(?::[^=\n]+)?=(?!=)", re.MULTILINE)


class PythonExtractor:
    """Pattern scans for modules, definitions and module-level constants."""

    name = "python"
    extensions = (".py", ".pyi")

    def extract(self, path: str, text: str) -> ExtractionFragment:
        _ = path
        builder = FragmentBuilder()
        for match in _FROM_IMPORT_RE.finditer(text):
            builder.add_import(match.group(1))
        for match in _IMPORT_RE.finditer(text):
            for item in match.group(1).split(","):
                module = item.strip().split(" as ")[0].strip()
                builder.add_import(module)
        builder.add_all("functions", (m.group(1) for m in _DEF_RE.finditer(text)))
        builder.add_all("classes", (m.group(1) for m in _CLASS_RE.finditer(text)))
        for match in _CONSTANT_RE.finditer(text):
            builder.add_constant(match.group(1))
        return builder.build()
