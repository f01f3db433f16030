"""Configuration loading and deterministic merge order."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_FILE_NAME = "project_index.toml"
DEFAULT_OUTPUT_NAME = "PROJECT_INDEX.json"
DEFAULT_DATA_DIR_NAME = ".project_index"
DEFAULT_IGNORE_FILE = ".gitignore"
DEFAULT_DEBOUNCE_MS = 1000
MAX_DEBOUNCE_MS = 10 * 60 * 1000

DEFAULT_INCLUDE_EXTENSIONS = (
    ".js",
    ".jsx",
    ".ts",
    ".tsx",
    ".py",
    ".java",
    ".cpp",
    ".c",
    ".h",
    ".cs",
    ".php",
    ".rb",
    ".go",
    ".rs",
    ".kt",
    ".swift",
    ".vue",
    ".svelte",
)
DEFAULT_IGNORE_PATTERNS = (
    "node_modules/**",
    ".git/**",
    "dist/**",
    "build/**",
    "*.min.js",
    "*.map",
    ".next/**",
    ".vercel/**",
    "coverage/**",
    "__pycache__/**",
    "*.pyc",
    ".DS_Store",
    "Thumbs.db",
)


@dataclass(slots=True, frozen=True)
class IndexerConfig:
    """Fully merged indexer configuration."""

    root: Path
    output_path: Path
    data_dir: Path
    include_extensions: tuple[str, ...] = DEFAULT_INCLUDE_EXTENSIONS
    ignore_patterns: tuple[str, ...] = DEFAULT_IGNORE_PATTERNS
    ignore_file: str | None = DEFAULT_IGNORE_FILE
    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    requeue_dropped: bool = False
    event_log_enabled: bool = True

    @property
    def debounce_seconds(self) -> float:
        """Return the debounce window in seconds."""
        return self.debounce_ms / 1000.0

    @property
    def event_log_path(self) -> Path:
        """Return the JSONL event log location."""
        return self.data_dir / "events.jsonl"


@dataclass(slots=True, frozen=True)
class CliOverrides:
    """Optional startup overrides applied at highest precedence."""

    output: Path | None = None
    include_extensions: tuple[str, ...] | None = None
    debounce_ms: int | None = None
    requeue_dropped: bool | None = None
    event_log_enabled: bool | None = None


def default_config(root: Path | None = None) -> IndexerConfig:
    """Build default config for a project root (current directory when omitted)."""
    resolved_root = (root or Path.cwd()).resolve()
    return IndexerConfig(
        root=resolved_root,
        output_path=resolved_root / DEFAULT_OUTPUT_NAME,
        data_dir=resolved_root / DEFAULT_DATA_DIR_NAME,
    )


def load_project_config_file(root: Path) -> dict[str, object]:
    """Load optional project_index.toml from the project root."""
    config_path = root / CONFIG_FILE_NAME
    if not config_path.exists():
        return {}
    with config_path.open("rb") as handle:
        payload = tomllib.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"{CONFIG_FILE_NAME} must contain a top-level table.")
    return payload


def merge_config(
    base: IndexerConfig, file_payload: dict[str, object], overrides: CliOverrides
) -> IndexerConfig:
    """Merge defaults, project config file, then CLI/startup overrides."""
    index_payload = _get_table(file_payload, "index")
    watch_payload = _get_table(file_payload, "watch")
    logging_payload = _get_table(file_payload, "logging")

    output_path = base.output_path
    if "output" in index_payload:
        output_path = _resolve_output(base.root, _string(index_payload["output"], "index.output"))

    include_extensions = base.include_extensions
    if "include_extensions" in index_payload:
        include_extensions = normalize_extensions(
            _tuple_of_strings(index_payload["include_extensions"], "index", "include_extensions")
        )
    ignore_patterns = base.ignore_patterns
    if "ignore_patterns" in index_payload:
        ignore_patterns = _tuple_of_strings(
            index_payload["ignore_patterns"], "index", "ignore_patterns"
        )
    ignore_file = base.ignore_file
    if "ignore_file" in index_payload:
        raw_ignore_file = index_payload["ignore_file"]
        if raw_ignore_file is False or raw_ignore_file == "":
            ignore_file = None
        else:
            ignore_file = _string(raw_ignore_file, "index.ignore_file")

    debounce_ms = _optional_positive_int_with_cap(
        watch_payload.get("debounce_ms"),
        "watch.debounce_ms",
        base.debounce_ms,
        MAX_DEBOUNCE_MS,
    )
    requeue_dropped = _optional_bool(
        watch_payload.get("requeue_dropped"), "watch.requeue_dropped", base.requeue_dropped
    )
    event_log_enabled = _optional_bool(
        logging_payload.get("event_log_enabled"),
        "logging.event_log_enabled",
        base.event_log_enabled,
    )

    merged = IndexerConfig(
        root=base.root,
        output_path=output_path,
        data_dir=base.data_dir,
        include_extensions=include_extensions,
        ignore_patterns=ignore_patterns,
        ignore_file=ignore_file,
        debounce_ms=debounce_ms,
        requeue_dropped=requeue_dropped,
        event_log_enabled=event_log_enabled,
    )
    return apply_cli_overrides(merged, overrides)


def apply_cli_overrides(config: IndexerConfig, overrides: CliOverrides) -> IndexerConfig:
    """Apply startup overrides at highest precedence."""
    output_path = config.output_path
    if overrides.output is not None:
        output_path = _resolve_output(config.root, str(overrides.output))
    include_extensions = config.include_extensions
    if overrides.include_extensions is not None:
        include_extensions = normalize_extensions(overrides.include_extensions)
    debounce_ms = _optional_positive_int_with_cap(
        overrides.debounce_ms,
        "overrides.debounce_ms",
        config.debounce_ms,
        MAX_DEBOUNCE_MS,
    )
    return IndexerConfig(
        root=config.root,
        output_path=output_path,
        data_dir=config.data_dir,
        include_extensions=include_extensions,
        ignore_patterns=config.ignore_patterns,
        ignore_file=config.ignore_file,
        debounce_ms=debounce_ms,
        requeue_dropped=(
            overrides.requeue_dropped
            if overrides.requeue_dropped is not None
            else config.requeue_dropped
        ),
        event_log_enabled=(
            overrides.event_log_enabled
            if overrides.event_log_enabled is not None
            else config.event_log_enabled
        ),
    )


def load_effective_config(
    root: Path | None = None, overrides: CliOverrides | None = None
) -> IndexerConfig:
    """Load effective config using merge order defaults -> project file -> overrides."""
    base = default_config(root)
    if not base.root.is_dir():
        raise ValueError("Config field 'root' must be an existing directory.")
    payload = load_project_config_file(base.root)
    return merge_config(base, payload, overrides or CliOverrides())


def normalize_extensions(extensions: tuple[str, ...] | list[str]) -> tuple[str, ...]:
    """Return dot-prefixed extensions, blanks dropped, order kept."""
    output: list[str] = []
    for raw in extensions:
        stripped = raw.strip()
        if not stripped:
            continue
        if not stripped.startswith("."):
            stripped = f".{stripped}"
        output.append(stripped)
    return tuple(output)


def _resolve_output(root: Path, value: str) -> Path:
    candidate = Path(value)
    if not candidate.is_absolute():
        candidate = root / candidate
    return candidate.resolve()


def _get_table(payload: dict[str, object], key: str) -> dict[str, object]:
    value = payload.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{key}' must be a table.")
    return value


def _string(value: object, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Config field '{name}' must be a non-empty string.")
    return value


def _tuple_of_strings(value: object, section: str, field: str) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise ValueError(f"Config field '{section}.{field}' must be a list of strings.")
    output: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ValueError(f"Config field '{section}.{field}' must contain only strings.")
        output.append(item)
    return tuple(output)


def _optional_bool(value: object, name: str, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValueError(f"Config field '{name}' must be a boolean.")
    return value


def _optional_positive_int_with_cap(
    value: object,
    name: str,
    default: int,
    cap: int | None,
) -> int:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"Config field '{name}' must be a positive integer.")
    if cap is not None and value > cap:
        raise ValueError(f"Config field '{name}' must be <= {cap}.")
    return value
