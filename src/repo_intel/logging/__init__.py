"""Structured logging utilities."""

from .audit import HookEvent, JsonlAuditLogger, sanitize_tool_input, utc_timestamp

__all__ = ["HookEvent", "JsonlAuditLogger", "sanitize_tool_input", "utc_timestamp"]
