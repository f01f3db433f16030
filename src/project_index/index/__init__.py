"""Index build pipeline package."""

from .assembler import IndexAssembler, IndexPersistenceError
from .discovery import DiscoveredFile, discover_files
from .ignore import IgnoreMatcher, parse_ignore_lines, read_ignore_file
from .models import FILE_MARKER, FileRecord, IndexDocument, LargestFile, Summary
from .summary import summarize
from .tree import build_file_tree, count_file_leaves

__all__ = [
    "DiscoveredFile",
    "FILE_MARKER",
    "FileRecord",
    "IgnoreMatcher",
    "IndexAssembler",
    "IndexDocument",
    "IndexPersistenceError",
    "LargestFile",
    "Summary",
    "build_file_tree",
    "count_file_leaves",
    "discover_files",
    "parse_ignore_lines",
    "read_ignore_file",
    "summarize",
]
