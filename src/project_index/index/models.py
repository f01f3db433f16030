"""Typed models for the project index document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

FILE_MARKER = "file"

DirectoryNode = dict[str, Union["DirectoryNode", str]]


@dataclass(slots=True, frozen=True)
class FileRecord:
    """Structural metadata for one indexed file."""

    relative_path: str
    extension: str
    size_bytes: int
    imports: tuple[str, ...] = ()
    exports: tuple[str, ...] = ()
    functions: tuple[str, ...] = ()
    classes: tuple[str, ...] = ()
    interfaces: tuple[str, ...] = ()
    constants: tuple[str, ...] = ()
    types: tuple[str, ...] = ()
    line_count: int | None = None
    has_comments: bool | None = None
    extraction_error: str | None = None

    def to_dict(self) -> dict[str, object]:
        """Return the persisted key-value form."""
        payload: dict[str, object] = {
            "path": self.relative_path,
            "extension": self.extension,
            "sizeBytes": self.size_bytes,
            "imports": list(self.imports),
            "exports": list(self.exports),
            "functions": list(self.functions),
            "classes": list(self.classes),
            "interfaces": list(self.interfaces),
            "constants": list(self.constants),
            "types": list(self.types),
        }
        if self.line_count is not None:
            payload["lineCount"] = self.line_count
        if self.has_comments is not None:
            payload["hasComments"] = self.has_comments
        if self.extraction_error is not None:
            payload["extractionError"] = self.extraction_error
        return payload


@dataclass(slots=True, frozen=True)
class LargestFile:
    """One entry of the largest-files ranking."""

    path: str
    size: int


@dataclass(slots=True, frozen=True)
class Summary:
    """Whole-project aggregate counts."""

    total_functions: int
    total_classes: int
    total_interfaces: int
    total_constants: int
    files_by_extension: dict[str, int]
    largest_files: tuple[LargestFile, ...]

    def to_dict(self) -> dict[str, object]:
        """Return the persisted key-value form."""
        return {
            "totalFunctions": self.total_functions,
            "totalClasses": self.total_classes,
            "totalInterfaces": self.total_interfaces,
            "totalConstants": self.total_constants,
            "filesByExtension": dict(self.files_by_extension),
            "largestFiles": [{"path": item.path, "size": item.size} for item in self.largest_files],
        }


@dataclass(slots=True, frozen=True)
class IndexDocument:
    """Immutable result of one complete index build."""

    generated_at: str
    project_root: str
    total_files: int
    file_tree: DirectoryNode
    files: dict[str, FileRecord]
    summary: Summary

    def to_dict(self) -> dict[str, object]:
        """Return the persisted key-value form."""
        return {
            "generatedAt": self.generated_at,
            "projectRoot": self.project_root,
            "totalFiles": self.total_files,
            "fileTree": self.file_tree,
            "files": {path: record.to_dict() for path, record in self.files.items()},
            "summary": self.summary.to_dict(),
        }
