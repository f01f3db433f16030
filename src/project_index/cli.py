"""Command-line entry point."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from project_index.api import build_event_logger, run_once, start_watching
from project_index.config import CliOverrides, load_effective_config
from project_index.index import IndexPersistenceError


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for indexer startup configuration."""
    parser = argparse.ArgumentParser(
        prog="project-index",
        description="Build a structural index of a source tree and keep it current.",
    )
    parser.add_argument("--root", required=False, default=".")
    parser.add_argument("--output", required=False, default=None)
    parser.add_argument(
        "--extensions",
        required=False,
        default=None,
        help="Comma-separated extension whitelist, e.g. .py,.ts",
    )
    parser.add_argument("--debounce", type=int, required=False, default=None, help="milliseconds")
    parser.add_argument("--once", action="store_true", help="build once and exit")
    parser.add_argument(
        "--requeue-dropped",
        choices=("true", "false"),
        required=False,
        default=None,
    )
    parser.add_argument("--quiet", action="store_true", help="do not echo events to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for the project indexer process."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    extensions: tuple[str, ...] | None = None
    if args.extensions is not None:
        extensions = tuple(item for item in args.extensions.split(",") if item.strip())
    requeue_dropped: bool | None = None
    if args.requeue_dropped == "true":
        requeue_dropped = True
    if args.requeue_dropped == "false":
        requeue_dropped = False
    overrides = CliOverrides(
        output=Path(args.output) if args.output is not None else None,
        include_extensions=extensions,
        debounce_ms=args.debounce,
        requeue_dropped=requeue_dropped,
    )
    try:
        config = load_effective_config(Path(args.root), overrides)
    except ValueError as exc:
        print(f"project-index: {exc}", file=sys.stderr)
        return 2

    echo = None if args.quiet else sys.stderr
    event_logger = build_event_logger(config, echo=echo)
    if args.once:
        try:
            document = run_once(config, event_logger=event_logger)
        except IndexPersistenceError as exc:
            print(f"project-index: {exc}", file=sys.stderr)
            return 1
        summary = {
            "output": str(config.output_path),
            "totalFiles": document.total_files,
            "summary": document.summary.to_dict(),
        }
        print(json.dumps(summary, indent=2))
        return 0

    try:
        start_watching(config, event_logger=event_logger)
    except IndexPersistenceError as exc:
        print(f"project-index: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
