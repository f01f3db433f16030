from __future__ import annotations

from project_index.extractors import PythonExtractor

SOURCE = '''\
"""Module docstring."""
from __future__ import annotations
import os, sys as system
import json
from .models import Record

MAX_SIZE = 10
DEFAULT_NAME: str = "x"
lower = 1
if MAX_SIZE == 10:
    pass


class Loader(Base):
    def load(self):
        return None


async def fetch():
    pass


def load():
    pass
'''


def test_python_extractor_collects_modules() -> None:
    fragment = PythonExtractor().extract("pkg/loader.py", SOURCE)

    assert fragment.imports == ("__future__", ".models", "os", "sys", "json")


def test_python_extractor_collects_definitions_and_constants() -> None:
    fragment = PythonExtractor().extract("pkg/loader.py", SOURCE)

    assert fragment.functions == ("load", "fetch")
    assert fragment.classes == ("Loader",)
    assert fragment.constants == ("MAX_SIZE", "DEFAULT_NAME")
    assert fragment.exports == ()
