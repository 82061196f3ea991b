"""Post-tool-use hook entrypoint.

One process handles one trigger: extract the written file's exports and
imports, upsert them into the index, then recompute conventions and the
summary from the whole index. The process always exits with status 0; every
failure is absorbed here and only recorded in the audit log.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Final, TextIO

from repo_intel.adapters import AdapterRegistry, build_adapter_registry
from repo_intel.config import CliOverrides, IntelConfig, load_effective_config
from repo_intel.conventions import ConventionRecord, detect_conventions
from repo_intel.index import IndexStore, IntelIndex, apply_record, discover_source_files
from repo_intel.logging import HookEvent, JsonlAuditLogger, sanitize_tool_input, utc_timestamp
from repo_intel.summary import generate_summary

INDEXED_TOOLS: Final = ("Write", "Edit")
AUDIT_LOG_FILE_NAME: Final = "hook.jsonl"

OUTCOME_INDEXED: Final = "indexed"
OUTCOME_INVALID_PAYLOAD: Final = "invalid_payload"
OUTCOME_UNSUPPORTED_TOOL: Final = "unsupported_tool"
OUTCOME_UNSUPPORTED_EXTENSION: Final = "unsupported_extension"
OUTCOME_UNREADABLE: Final = "unreadable"
OUTCOME_INTERNAL_ERROR: Final = "internal_error"


@dataclass(slots=True, frozen=True)
class TriggerPayload:
    """Normalized trigger for one file mutation."""

    tool: str
    file_path: str
    content: str | None
    tool_input: dict[str, object]


@dataclass(slots=True, frozen=True)
class HookOutcome:
    """Result of one hook invocation; never raised, only reported."""

    outcome: str
    tool: str
    path: str | None = None
    error_code: str | None = None
    export_count: int = 0
    import_count: int = 0

    @property
    def ok(self) -> bool:
        """False only for genuine faults, not for expected no-ops."""
        return self.outcome != OUTCOME_INTERNAL_ERROR


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for hook startup configuration."""
    parser = argparse.ArgumentParser(prog="repo-intel-hook")
    parser.add_argument("--project-root", required=False, default=".")
    parser.add_argument("--data-dir", required=False, default=None)
    parser.add_argument("--no-audit", action="store_true", default=False)
    parser.add_argument(
        "--scan",
        action="store_true",
        default=False,
        help="Index every source file under the project root instead of reading stdin.",
    )
    return parser


class IntelHook:
    """Runs the extract, persist, detect and render sequence for one trigger."""

    def __init__(self, config: IntelConfig) -> None:
        self._config = config
        self._project_root = config.project_root
        self._store = IndexStore(config.data_dir)
        self._adapters: AdapterRegistry = build_adapter_registry(config)
        self._audit_logger: JsonlAuditLogger | None = None
        if config.audit_enabled:
            self._audit_logger = JsonlAuditLogger(path=self.audit_log_path)

    @property
    def store(self) -> IndexStore:
        """Return the index store used by this hook."""
        return self._store

    @property
    def audit_log_path(self) -> Path:
        """Return where audit events go when auditing is enabled."""
        return self._config.data_dir / AUDIT_LOG_FILE_NAME

    def handle_json_text(self, raw_text: str) -> HookOutcome:
        """Handle the raw JSON document read from stdin."""
        try:
            payload = json.loads(raw_text)
        except json.JSONDecodeError:
            outcome = HookOutcome(outcome=OUTCOME_INVALID_PAYLOAD, tool="invalid_json")
            self.log_outcome(outcome, {"raw_length": len(raw_text)})
            return outcome
        return self.handle_payload(payload)

    def handle_payload(self, payload: object) -> HookOutcome:
        """Validate a parsed payload and index the target file."""
        parsed = self.parse_payload(payload)
        if isinstance(parsed, HookOutcome):
            # Most tool calls are not file writes; logging each one would flood the log.
            if parsed.outcome != OUTCOME_UNSUPPORTED_TOOL:
                self.log_outcome(parsed, {})
            return parsed

        try:
            outcome = self.index_file(parsed.file_path, parsed.content, tool=parsed.tool)
        except Exception as error:
            outcome = HookOutcome(
                outcome=OUTCOME_INTERNAL_ERROR,
                tool=parsed.tool,
                path=parsed.file_path,
                error_code=type(error).__name__,
            )
        self.log_outcome(outcome, parsed.tool_input)
        return outcome

    def parse_payload(self, payload: object) -> TriggerPayload | HookOutcome:
        """Validate payload shape and return a normalized trigger."""
        if not isinstance(payload, dict):
            return HookOutcome(outcome=OUTCOME_INVALID_PAYLOAD, tool="invalid_payload")

        tool = payload.get("tool_name")
        if not isinstance(tool, str) or not tool:
            return HookOutcome(outcome=OUTCOME_INVALID_PAYLOAD, tool="invalid_payload")
        if tool not in INDEXED_TOOLS:
            return HookOutcome(outcome=OUTCOME_UNSUPPORTED_TOOL, tool=tool)

        tool_input = payload.get("tool_input")
        if not isinstance(tool_input, dict):
            return HookOutcome(outcome=OUTCOME_INVALID_PAYLOAD, tool=tool)
        file_path = tool_input.get("file_path")
        if not isinstance(file_path, str) or not file_path:
            return HookOutcome(outcome=OUTCOME_INVALID_PAYLOAD, tool=tool)

        content = tool_input.get("content")
        # Edit payloads carry no content; the file is read back from disk.
        if not isinstance(content, str) or not content:
            content = None
        return TriggerPayload(
            tool=tool,
            file_path=file_path,
            content=content,
            tool_input=tool_input,
        )

    def index_file(
        self, file_path: str, content: str | None = None, *, tool: str = "Write"
    ) -> HookOutcome:
        """Index one file and regenerate conventions and summary."""
        adapter = self._adapters.select(file_path)
        if adapter is None:
            return HookOutcome(outcome=OUTCOME_UNSUPPORTED_EXTENSION, tool=tool, path=file_path)

        if content is None:
            content = self._read_source(file_path)
            if content is None:
                return HookOutcome(outcome=OUTCOME_UNREADABLE, tool=tool, path=file_path)

        surface = adapter.extract(file_path, content)
        index = self._store.upsert(
            file_path,
            surface.exports,
            surface.imports,
            base=self._project_root,
        )
        self.refresh_derived(index)
        return HookOutcome(
            outcome=OUTCOME_INDEXED,
            tool=tool,
            path=file_path,
            export_count=len(surface.exports),
            import_count=len(surface.imports),
        )

    def scan_tree(self) -> int:
        """Index every source file under the project root; return how many were indexed."""
        index = self._store.load()
        indexed = 0
        for full_path in discover_source_files(
            self._project_root,
            extensions=self._config.extraction.extensions,
            exclude_globs=self._config.extraction.exclude_globs,
            skip_dirs=(self._config.data_dir,),
        ):
            path = str(full_path)
            adapter = self._adapters.select(path)
            if adapter is None:
                continue
            content = self._read_source(path)
            if content is None:
                continue
            surface = adapter.extract(path, content)
            apply_record(index, path, surface.exports, surface.imports)
            indexed += 1
        self._store.save(index)
        self.refresh_derived(index)
        return indexed

    def refresh_derived(self, index: IntelIndex) -> ConventionRecord:
        """Recompute conventions and summary from the full index and persist both."""
        conventions = detect_conventions(
            index,
            min_samples=self._config.conventions.min_samples,
            min_match_rate=self._config.conventions.min_match_rate,
        )
        self._store.write_conventions(conventions.to_dict(updated=utc_timestamp()))
        self._store.write_summary(
            generate_summary(
                index,
                conventions,
                max_directories=self._config.summary.max_directories,
                max_file_patterns=self._config.summary.max_file_patterns,
            )
        )
        return conventions

    def log_outcome(self, outcome: HookOutcome, tool_input: dict[str, object]) -> None:
        """Append one sanitized audit event; logging failures are ignored."""
        if self._audit_logger is None:
            return
        event = HookEvent(
            timestamp=utc_timestamp(),
            tool=outcome.tool,
            outcome=outcome.outcome,
            ok=outcome.ok,
            path=outcome.path,
            error_code=outcome.error_code,
            metadata={
                **sanitize_tool_input(tool_input),
                "export_count": outcome.export_count,
                "import_count": outcome.import_count,
            },
        )
        try:
            self._audit_logger.append(event)
        except OSError:
            return

    def _read_source(self, file_path: str) -> str | None:
        path = Path(file_path)
        if not path.is_absolute():
            path = self._project_root / path
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError:
            return None


def create_hook(
    project_root: str,
    data_dir: str | None = None,
    cli_overrides: CliOverrides | None = None,
) -> IntelHook:
    """Create a configured hook instance."""
    overrides = cli_overrides or CliOverrides()
    if data_dir is not None:
        overrides = CliOverrides(
            data_dir=Path(data_dir).resolve(),
            audit_enabled=overrides.audit_enabled,
        )
    config = load_effective_config(project_root=Path(project_root).resolve(), overrides=overrides)
    return IntelHook(config=config)


def main(argv: list[str] | None = None, stdin: TextIO | None = None) -> int:
    """Entrypoint for the hook process; always returns 0."""
    parser = build_arg_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        # argparse exits on bad arguments; the calling workflow must still proceed.
        return 0

    overrides = CliOverrides(
        data_dir=Path(args.data_dir) if args.data_dir is not None else None,
        audit_enabled=False if args.no_audit else None,
    )
    try:
        hook = create_hook(project_root=args.project_root, cli_overrides=overrides)
        if args.scan:
            hook.scan_tree()
        else:
            hook.handle_json_text((stdin or sys.stdin).read())
    except Exception:
        # Config and stdin failures land here, before any audit log is available.
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
