"""Whole-project aggregation over per-file records."""

from __future__ import annotations

from collections.abc import Mapping

from project_index.index.models import FileRecord, LargestFile, Summary

LARGEST_FILES_LIMIT = 10
UNKNOWN_EXTENSION = "unknown"


def summarize(files: Mapping[str, FileRecord], limit: int = LARGEST_FILES_LIMIT) -> Summary:
    """Reduce file records into counts and a size ranking.

    Mapping order is discovery order; equal sizes keep it.
    """
    total_functions = 0
    total_classes = 0
    total_interfaces = 0
    total_constants = 0
    files_by_extension: dict[str, int] = {}
    sized: list[LargestFile] = []

    for path, record in files.items():
        total_functions += len(record.functions)
        total_classes += len(record.classes)
        total_interfaces += len(record.interfaces)
        total_constants += len(record.constants)

        extension = record.extension or UNKNOWN_EXTENSION
        files_by_extension[extension] = files_by_extension.get(extension, 0) + 1

        if record.size_bytes > 0:
            sized.append(LargestFile(path=path, size=record.size_bytes))

    ranked = sorted(sized, key=lambda item: item.size, reverse=True)
    return Summary(
        total_functions=total_functions,
        total_classes=total_classes,
        total_interfaces=total_interfaces,
        total_constants=total_constants,
        files_by_extension=files_by_extension,
        largest_files=tuple(ranked[:limit]),
    )
