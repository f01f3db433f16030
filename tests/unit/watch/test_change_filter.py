from __future__ import annotations

from pathlib import Path

from watchdog.events import (
    DirCreatedEvent,
    DirModifiedEvent,
    FileCreatedEvent,
    FileDeletedEvent,
    FileModifiedEvent,
    FileMovedEvent,
)

from project_index.config import default_config
from project_index.watch import ChangeEvent, ChangeEventHandler, ChangeFilter


def _internal(relative: str) -> bool:
    return relative == "PROJECT_INDEX.json" or relative.startswith(".project_index")


def test_filter_accepts_whitelisted_files_and_config_files(tmp_path: Path) -> None:
    change_filter = ChangeFilter(default_config(tmp_path), internal=_internal)

    assert change_filter.accepts("src/app.ts")
    assert change_filter.accepts("package.json")
    assert change_filter.accepts("web/tsconfig.json")
    assert change_filter.accepts(".gitignore")
    assert change_filter.accepts("src/new_dir", is_dir=True)
    assert not change_filter.accepts("README.md")
    assert not change_filter.accepts("node_modules/x/index.js")
    assert not change_filter.accepts("PROJECT_INDEX.json")
    assert not change_filter.accepts(".project_index/events.jsonl")
    assert not change_filter.accepts("")


def test_filter_reload_picks_up_new_ignore_patterns(tmp_path: Path) -> None:
    change_filter = ChangeFilter(default_config(tmp_path))
    assert change_filter.accepts("generated/api.ts")

    (tmp_path / ".gitignore").write_text("generated/\n", encoding="utf-8")
    change_filter.reload()

    assert not change_filter.accepts("generated/api.ts")


def test_handler_maps_watchdog_events_to_change_kinds(tmp_path: Path) -> None:
    root = tmp_path.resolve()
    received: list[ChangeEvent] = []
    handler = ChangeEventHandler(
        root,
        ChangeFilter(default_config(root)),
        received.append,
        clock=lambda: 7.0,
    )

    handler.dispatch(FileCreatedEvent(str(root / "src" / "a.ts")))
    handler.dispatch(FileModifiedEvent(str(root / "src" / "a.ts")))
    handler.dispatch(FileDeletedEvent(str(root / "src" / "b.py")))
    handler.dispatch(DirCreatedEvent(str(root / "src" / "pkg")))
    handler.dispatch(DirModifiedEvent(str(root / "src")))
    handler.dispatch(FileMovedEvent(str(root / "old.go"), str(root / "new.go")))
    handler.dispatch(FileModifiedEvent(str(root / "notes.txt")))

    assert [(event.kind, event.path) for event in received] == [
        ("created", "src/a.ts"),
        ("modified", "src/a.ts"),
        ("deleted", "src/b.py"),
        ("dir_created", "src/pkg"),
        ("deleted", "old.go"),
        ("created", "new.go"),
    ]
    assert all(event.observed_at == 7.0 for event in received)


def test_handler_ignores_paths_outside_root(tmp_path: Path) -> None:
    root = (tmp_path / "project").resolve()
    root.mkdir()
    received: list[ChangeEvent] = []
    handler = ChangeEventHandler(root, ChangeFilter(default_config(root)), received.append)

    handler.dispatch(FileCreatedEvent(str(tmp_path / "elsewhere.ts")))

    assert received == []
