from __future__ import annotations

import json
from pathlib import Path

from project_index.api import run_once
from project_index.config import default_config


def _write(root: Path, relative: str, text: str) -> None:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_typescript_project_produces_linked_document(tmp_path: Path) -> None:
    _write(tmp_path, "src/util.ts", "export function add(a, b) {\n  return a + b;\n}\n")
    _write(tmp_path, "src/index.ts", 'import { add } from "./util";\n\nconsole.log(add(1, 2));\n')

    document = run_once(default_config(tmp_path))

    assert "add" in document.files["src/util.ts"].functions
    assert "add" in document.files["src/util.ts"].to_dict()["functions"]
    assert "./util" in document.files["src/index.ts"].imports
    assert document.file_tree["src"] == {"util.ts": "file", "index.ts": "file"}
    assert document.total_files == 2


def test_mixed_language_project_persists_complete_schema(tmp_path: Path) -> None:
    _write(tmp_path, "app/main.py", "import os\n\nDEBUG = True\n\ndef main():\n    pass\n")
    _write(tmp_path, "app/Widget.java", "public class Widget {\n    void draw() {\n    }\n}\n")
    _write(tmp_path, "web/page.vue", "<template></template>\n<!-- page -->\n// script\n")
    _write(tmp_path, "node_modules/lib/index.js", "export function hidden() {}\n")
    _write(tmp_path, "notes.txt", "not indexed\n")

    run_once(default_config(tmp_path))

    payload = json.loads((tmp_path / "PROJECT_INDEX.json").read_text(encoding="utf-8"))
    assert set(payload) == {
        "generatedAt",
        "projectRoot",
        "totalFiles",
        "fileTree",
        "files",
        "summary",
    }
    assert payload["totalFiles"] == 3
    assert sorted(payload["files"]) == ["app/Widget.java", "app/main.py", "web/page.vue"]
    python_record = payload["files"]["app/main.py"]
    assert python_record["imports"] == ["os"]
    assert python_record["constants"] == ["DEBUG"]
    assert python_record["functions"] == ["main"]
    assert payload["files"]["app/Widget.java"]["classes"] == ["Widget"]
    vue_record = payload["files"]["web/page.vue"]
    assert vue_record["lineCount"] == 4
    assert vue_record["hasComments"] is True
    assert "lineCount" not in python_record
    summary = payload["summary"]
    assert summary["filesByExtension"] == {".java": 1, ".py": 1, ".vue": 1}
    assert summary["totalFunctions"] == 2
    assert summary["totalClasses"] == 1
    assert summary["totalConstants"] == 1
    assert len(summary["largestFiles"]) == 3


def test_rebuild_replaces_previous_document(tmp_path: Path) -> None:
    _write(tmp_path, "a.py", "def a():\n    pass\n")
    first = run_once(default_config(tmp_path))
    (tmp_path / "a.py").unlink()
    _write(tmp_path, "b.py", "def b():\n    pass\n")

    second = run_once(default_config(tmp_path))

    assert list(first.files) == ["a.py"]
    assert list(second.files) == ["b.py"]
    payload = json.loads((tmp_path / "PROJECT_INDEX.json").read_text(encoding="utf-8"))
    assert list(payload["files"]) == ["b.py"]
