"""Per-language structural extractors."""

from .base import (
    CATEGORIES,
    ExtractionFragment,
    FragmentBuilder,
    LanguageExtractor,
    is_upper_snake,
)
from .c import CExtractor
from .csharp import CSharpExtractor
from .fallback import GenericExtractor
from .go import GoExtractor
from .java import JavaExtractor
from .javascript import JavaScriptExtractor
from .python import PythonExtractor
from .registry import ExtractorRegistry
from .runtime import build_extractor_registry
from .rust import RustExtractor

__all__ = [
    "CATEGORIES",
    "CExtractor",
    "CSharpExtractor",
    "ExtractionFragment",
    "ExtractorRegistry",
    "FragmentBuilder",
    "GenericExtractor",
    "GoExtractor",
    "JavaExtractor",
    "JavaScriptExtractor",
    "LanguageExtractor",
    "PythonExtractor",
    "RustExtractor",
    "build_extractor_registry",
    "is_upper_snake",
]
