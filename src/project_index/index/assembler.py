"""Index build orchestration and persistence."""

from __future__ import annotations

import json
import time
from pathlib import Path

from project_index.config import IndexerConfig
from project_index.extractors import ExtractorRegistry, build_extractor_registry
from project_index.index.discovery import DiscoveredFile, discover_files
from project_index.index.ignore import IgnoreMatcher
from project_index.index.models import FileRecord, IndexDocument
from project_index.index.summary import summarize
from project_index.index.tree import build_file_tree
from project_index.logging import JsonlEventLogger, utc_timestamp


class IndexPersistenceError(Exception):
    """Raised when the index document cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to write index to {path}: {reason}")
        self.path = path
        self.reason = reason


class IndexAssembler:
    """Builds one complete index document per call and persists it."""

    def __init__(
        self,
        config: IndexerConfig,
        registry: ExtractorRegistry | None = None,
        event_logger: JsonlEventLogger | None = None,
    ) -> None:
        self._config = config
        self._root = config.root.resolve()
        self._registry = registry or build_extractor_registry()
        self._event_logger = event_logger
        self._output_path = config.output_path.resolve()
        self._output_relative = _relative_to(self._output_path, self._root)
        self._data_dir_relative = _relative_to(config.data_dir.resolve(), self._root)

    def is_internal_path(self, relative_path: str) -> bool:
        """Return True for the output file, its temp file, and the data directory."""
        if self._output_relative is not None and relative_path in (
            self._output_relative,
            f"{self._output_relative}.tmp",
        ):
            return True
        if self._data_dir_relative is None:
            return False
        return relative_path == self._data_dir_relative or relative_path.startswith(
            f"{self._data_dir_relative}/"
        )

    def build(self) -> IndexDocument:
        """Run discovery, extraction and aggregation, then persist atomically."""
        started = time.perf_counter()
        try:
            document = self._assemble()
            self._write(document)
        except Exception as exc:
            self._emit("index_build_failed", ok=False, error=str(exc))
            raise
        duration_ms = int((time.perf_counter() - started) * 1000)
        self._emit(
            "index_built",
            total_files=document.total_files,
            duration_ms=duration_ms,
            output=str(self._output_path),
        )
        return document

    def _assemble(self) -> IndexDocument:
        matcher = IgnoreMatcher.for_config(self._config)
        discovered = discover_files(
            self._root,
            self._config.include_extensions,
            matcher,
            exclude=self.is_internal_path,
        )
        tree = build_file_tree(item.relative_path for item in discovered)
        files: dict[str, FileRecord] = {}
        for item in discovered:
            files[item.relative_path] = self.extract_file(item)
        return IndexDocument(
            generated_at=utc_timestamp(),
            project_root=str(self._root),
            total_files=len(discovered),
            file_tree=tree,
            files=files,
            summary=summarize(files),
        )

    def extract_file(self, item: DiscoveredFile) -> FileRecord:
        """Extract one file; any failure is recorded on the returned record."""
        try:
            text = item.full_path.read_bytes().decode("utf-8")
            extractor = self._registry.select(item.extension)
            fragment = extractor.extract(item.relative_path, text)
        except Exception as exc:
            return FileRecord(
                relative_path=item.relative_path,
                extension=item.extension,
                size_bytes=0,
                extraction_error=f"{type(exc).__name__}: {exc}",
            )
        return FileRecord(
            relative_path=item.relative_path,
            extension=item.extension,
            size_bytes=item.size,
            imports=fragment.imports,
            exports=fragment.exports,
            functions=fragment.functions,
            classes=fragment.classes,
            interfaces=fragment.interfaces,
            constants=fragment.constants,
            types=fragment.types,
            line_count=fragment.line_count,
            has_comments=fragment.has_comments,
        )

    def _write(self, document: IndexDocument) -> None:
        path = self._output_path
        tmp = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8") as handle:
                json.dump(document.to_dict(), handle, indent=2)
                handle.write("\n")
            tmp.replace(path)
        except OSError as exc:
            if tmp.is_file():
                tmp.unlink()
            raise IndexPersistenceError(path, str(exc)) from exc

    def _emit(self, event: str, *, ok: bool = True, **metadata: object) -> None:
        if self._event_logger is not None:
            self._event_logger.emit(event, ok=ok, **metadata)


def _relative_to(path: Path, root: Path) -> str | None:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return None
