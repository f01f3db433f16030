from __future__ import annotations

from project_index.index import FileRecord, summarize


def _record(path: str, size: int, extension: str = ".ts", **fields: tuple[str, ...]) -> FileRecord:
    return FileRecord(relative_path=path, extension=extension, size_bytes=size, **fields)


def test_largest_files_are_ranked_with_stable_ties() -> None:
    files = {
        "a": _record("a", 10),
        "b": _record("b", 50),
        "c": _record("c", 5),
        "d": _record("d", 50),
    }

    summary = summarize(files)

    assert [(item.path, item.size) for item in summary.largest_files] == [
        ("b", 50),
        ("d", 50),
        ("a", 10),
        ("c", 5),
    ]


def test_largest_files_are_capped_at_ten_and_skip_empty_files() -> None:
    files = {f"f{index:02d}.py": _record(f"f{index:02d}.py", index) for index in range(15)}

    summary = summarize(files)

    assert len(summary.largest_files) == 10
    assert summary.largest_files[0].path == "f14.py"
    assert all(item.size > 0 for item in summary.largest_files)


def test_counts_and_extension_buckets() -> None:
    files = {
        "a.ts": _record("a.ts", 1, functions=("f", "g"), classes=("C",)),
        "b.ts": _record("b.ts", 1, interfaces=("I",), constants=("K", "L")),
        "Makefile": _record("Makefile", 1, extension=""),
    }

    summary = summarize(files)

    assert summary.total_functions == 2
    assert summary.total_classes == 1
    assert summary.total_interfaces == 1
    assert summary.total_constants == 2
    assert summary.files_by_extension == {".ts": 2, "unknown": 1}


def test_summarize_does_not_mutate_input() -> None:
    files = {"a.ts": _record("a.ts", 3)}
    snapshot = dict(files)

    summarize(files)

    assert files == snapshot


def test_empty_input_yields_zero_summary() -> None:
    summary = summarize({})

    assert summary.to_dict() == {
        "totalFunctions": 0,
        "totalClasses": 0,
        "totalInterfaces": 0,
        "totalConstants": 0,
        "filesByExtension": {},
        "largestFiles": [],
    }
