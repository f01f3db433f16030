"""Structured logging utilities."""

from .events import BuildEvent, JsonlEventLogger, utc_timestamp

__all__ = ["BuildEvent", "JsonlEventLogger", "utc_timestamp"]
