"""Structured JSONL audit log of hook outcomes."""

from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from pathlib import Path


@dataclass(slots=True, frozen=True)
class HookEvent:
    """Sanitized record of one hook invocation."""

    timestamp: str
    tool: str
    outcome: str
    ok: bool
    path: str | None
    error_code: str | None
    metadata: dict[str, object]


def utc_timestamp() -> str:
    """Return an ISO-8601 UTC timestamp."""
    return datetime.now(tz=UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def sanitize_tool_input(tool_input: dict[str, object]) -> dict[str, object]:
    """Sanitize tool input so file contents never reach the log."""
    sanitized: dict[str, object] = {}
    for key in sorted(tool_input.keys()):
        value = tool_input[key]
        if key == "file_path" and isinstance(value, str):
            sanitized[key] = value
            continue
        if isinstance(value, (int, float, bool)) or value is None:
            sanitized[key] = value
            continue
        if isinstance(value, str):
            sanitized[f"{key}_present"] = True
            sanitized[f"{key}_length"] = len(value)
            continue
        if isinstance(value, list):
            sanitized[f"{key}_type"] = "list"
            sanitized[f"{key}_length"] = len(value)
            continue
        if isinstance(value, dict):
            sanitized[f"{key}_type"] = "dict"
            sanitized[f"{key}_keys"] = sorted(str(k) for k in value.keys())
            continue
        sanitized[f"{key}_type"] = type(value).__name__
    return sanitized


class JsonlAuditLogger:
    """Append-only JSONL audit logger and bounded reader."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        """Return on-disk JSONL path."""
        return self._path

    def append(self, event: HookEvent) -> None:
        """Append a sanitized event as one JSON object per line."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(asdict(event), sort_keys=True))
            handle.write("\n")

    def read(
        self,
        since: str | None = None,
        limit: int = 50,
        *,
        outcome: str | None = None,
    ) -> list[dict[str, object]]:
        """Return the newest events, oldest first.

        ``since`` drops events stamped before it; ``outcome`` keeps only
        events with that outcome code. Unparseable lines are skipped.
        """
        if limit < 1 or not self._path.exists():
            return []
        events = [
            event
            for event in self._iter_events()
            if (since is None or str(event.get("timestamp", "")) >= since)
            and (outcome is None or event.get("outcome") == outcome)
        ]
        return events[-limit:]

    def _iter_events(self) -> Iterator[dict[str, object]]:
        with self._path.open("r", encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    continue
                try:
                    event = json.loads(line)
                except json.JSONDecodeError:
                    continue
                if isinstance(event, dict):
                    yield event
