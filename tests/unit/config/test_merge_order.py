from __future__ import annotations

from pathlib import Path

from project_index.config import (
    DEFAULT_INCLUDE_EXTENSIONS,
    CliOverrides,
    load_effective_config,
    normalize_extensions,
)


def test_defaults_apply_without_config_file(tmp_path: Path) -> None:
    config = load_effective_config(tmp_path)

    assert config.root == tmp_path.resolve()
    assert config.output_path == tmp_path.resolve() / "PROJECT_INDEX.json"
    assert config.data_dir == tmp_path.resolve() / ".project_index"
    assert config.include_extensions == DEFAULT_INCLUDE_EXTENSIONS
    assert config.ignore_file == ".gitignore"
    assert config.debounce_ms == 1000
    assert config.debounce_seconds == 1.0
    assert config.requeue_dropped is False
    assert config.event_log_path == tmp_path.resolve() / ".project_index" / "events.jsonl"


def test_merge_order_defaults_then_project_file_then_cli(tmp_path: Path) -> None:
    (tmp_path / "project_index.toml").write_text(
        "\n".join(
            [
                "[index]",
                'output = "docs/index.json"',
                'include_extensions = ["py", ".ts"]',
                'ignore_patterns = ["vendor/**"]',
                "",
                "[watch]",
                "debounce_ms = 250",
                "requeue_dropped = true",
                "",
                "[logging]",
                "event_log_enabled = false",
            ]
        ),
        encoding="utf-8",
    )
    overrides = CliOverrides(debounce_ms=40, include_extensions=(".go",))

    config = load_effective_config(tmp_path, overrides)

    assert config.output_path == tmp_path.resolve() / "docs" / "index.json"
    assert config.include_extensions == (".go",)
    assert config.ignore_patterns == ("vendor/**",)
    assert config.debounce_ms == 40
    assert config.requeue_dropped is True
    assert config.event_log_enabled is False


def test_ignore_file_can_be_disabled(tmp_path: Path) -> None:
    (tmp_path / "project_index.toml").write_text(
        '[index]\nignore_file = ""\n', encoding="utf-8"
    )

    assert load_effective_config(tmp_path).ignore_file is None


def test_normalize_extensions_adds_dots_and_drops_blanks() -> None:
    assert normalize_extensions(["py", " .ts ", "", "go"]) == (".py", ".ts", ".go")
