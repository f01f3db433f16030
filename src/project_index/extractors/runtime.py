"""Runtime extractor registry construction."""

from __future__ import annotations

from project_index.extractors.c import CExtractor
from project_index.extractors.csharp import CSharpExtractor
from project_index.extractors.fallback import GenericExtractor
from project_index.extractors.go import GoExtractor
from project_index.extractors.java import JavaExtractor
from project_index.extractors.javascript import JavaScriptExtractor
from project_index.extractors.python import PythonExtractor
from project_index.extractors.registry import ExtractorRegistry
from project_index.extractors.rust import RustExtractor


def build_extractor_registry() -> ExtractorRegistry:
    """Build the default extractor registry."""
    registry = ExtractorRegistry()
    registry.register(JavaScriptExtractor())
    registry.register(PythonExtractor())
    registry.register(JavaExtractor())
    registry.register(CExtractor())
    registry.register(CSharpExtractor())
    registry.register(GoExtractor())
    registry.register(RustExtractor())
    registry.register(GenericExtractor(), fallback=True)
    return registry
