"""Lexical TypeScript/JavaScript extractor."""

from __future__ import annotations

import re

from project_index.extractors.base import (
    EXPORT_BUCKET_ORDER,
    ExtractionFragment,
    FragmentBuilder,
    first_group,
)

_IDENT = r"[A-Za-z_$][A-Za-z0-9_$]*"
_BINDING = rf"(?:\{{[^}}]*\}}|\*\s+as\s+{_IDENT}|{_IDENT})"

_IMPORT_RE = re.compile(
    rf"\bimport\s+(?:type\s+)?(?:{_BINDING}(?:\s*,\s*{_BINDING})*\s+from\s+)?"
    r"['\"`]([^'\"`]+)['\"`]"
)
_REEXPORT_RE = re.compile(
    rf"\bexport\s+(?:type\s+)?(?:\*(?:\s+as\s+{_IDENT})?|\{{[^}}]*\}})\s*from\s+"
    r"['\"`]([^'\"`]+)['\"`]"
)
_DYNAMIC_IMPORT_RE = re.compile(r"\bimport\s*\(\s*['\"`]([^'\"`]+)['\"`]\s*\)")
_REQUIRE_RE = re.compile(r"\brequire\s*\(\s*['\"`]([^'\"`]+)['\"`]\s*\)")

_EXPORT_RE = re.compile(
    r"\bexport\s+(?:default\s+)?(?:declare\s+)?(?:abstract\s+)?(?:async\s+)?"
    rf"(?:function\s*\*?\s*(?P<functions>{_IDENT})"
    rf"|class\s+(?!extends\b)(?P<classes>{_IDENT})"
    rf"|interface\s+(?P<interfaces>{_IDENT})"
    rf"|(?:type|(?:const\s+)?enum)\s+(?P<types>{_IDENT})"
    rf"|(?:const|let|var)\s+(?P<exports>{_IDENT}))"
)
_COMMONJS_EXPORT_RE = re.compile(rf"\b(?:module\.)?exports\.({_IDENT})\s*=(?!=)")

_FUNCTION_RE = re.compile(rf"\bfunction\s*\*?\s*({_IDENT})\s*\(")
_ARROW_RE = re.compile(
    rf"\b(?:const|let|var)\s+({_IDENT})\s*(?::[^=;]+)?=\s*(?:async\s+)?"
    rf"(?:\([^)]*\)|{_IDENT})\s*(?::\s*[^=;{{]+?)?\s*=>"
)
_CLASS_RE = re.compile(rf"\bclass\s+(?!extends\b)({_IDENT})")
_INTERFACE_RE = re.compile(rf"\binterface\s+({_IDENT})")
_TYPE_ALIAS_RE = re.compile(rf"\btype\s+({_IDENT})\s*(?:<[^>]*>)?\s*=(?!=)")
_CONST_RE = re.compile(r"\bconst\s+([A-Z_][A-Z0-9_]*)\b\s*(?::[^=;]+)?=(?!=)")


class JavaScriptExtractor:
    """Sequential pattern scans for JS/TS modules (ESM and CommonJS)."""

    name = "javascript"
    extensions = (".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs", ".mts", ".cts")

    def extract(self, path: str, text: str) -> ExtractionFragment:
        _ = path
        builder = FragmentBuilder()

        for pattern in (_IMPORT_RE, _REEXPORT_RE, _DYNAMIC_IMPORT_RE, _REQUIRE_RE):
            for match in pattern.finditer(text):
                builder.add_import(match.group(1))

        for match in _EXPORT_RE.finditer(text):
            found = first_group(match, EXPORT_BUCKET_ORDER)
            if found is not None:
                bucket, name = found
                builder.add_export(name, bucket)
        for match in _COMMONJS_EXPORT_RE.finditer(text):
            builder.add_export(match.group(1), "exports")

        builder.add_all("functions", (m.group(1) for m in _FUNCTION_RE.finditer(text)))
        builder.add_all("functions", (m.group(1) for m in _ARROW_RE.finditer(text)))
        builder.add_all("classes", (m.group(1) for m in _CLASS_RE.finditer(text)))
        builder.add_all("interfaces", (m.group(1) for m in _INTERFACE_RE.finditer(text)))
        builder.add_all("types", (m.group(1) for m in _TYPE_ALIAS_RE.finditer(text)))
        for match in _CONST_RE.finditer(text):
            builder.add_constant(match.group(1))
        return builder.build()
