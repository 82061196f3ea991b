"""Configuration loading and deterministic merge order."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_FILE_NAME = "repo_intel.toml"
DEFAULT_DATA_DIR = Path(".planning") / "intel"

DEFAULT_INDEXABLE_EXTENSIONS = (".js", ".ts", ".jsx", ".tsx", ".mjs", ".cjs")
DEFAULT_EXCLUDE_GLOBS = (
    "**/.git/**",
    "**/node_modules/**",
    "**/dist/**",
    "**/build/**",
    "**/coverage/**",
)
DEFAULT_MIN_SAMPLES = 5
DEFAULT_MIN_MATCH_RATE = 0.70
DEFAULT_MAX_SUMMARY_DIRECTORIES = 5
DEFAULT_MAX_SUMMARY_FILE_PATTERNS = 3


class ConfigError(ValueError):
    """Raised when repo_intel.toml or overrides contain invalid values."""


@dataclass(slots=True, frozen=True)
class ExtractionConfig:
    """Which files are indexed."""

    extensions: tuple[str, ...]
    exclude_globs: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class ConventionsConfig:
    """Thresholds for convention detection."""

    min_samples: int
    min_match_rate: float


@dataclass(slots=True, frozen=True)
class SummaryConfig:
    """Size bounds for the rendered summary."""

    max_directories: int
    max_file_patterns: int


@dataclass(slots=True, frozen=True)
class IntelConfig:
    """Fully merged hook configuration."""

    project_root: Path
    data_dir: Path
    extraction: ExtractionConfig
    conventions: ConventionsConfig
    summary: SummaryConfig
    audit_enabled: bool


@dataclass(slots=True, frozen=True)
class CliOverrides:
    """Optional startup overrides applied at highest precedence."""

    data_dir: Path | None = None
    audit_enabled: bool | None = None


def default_config(project_root: Path) -> IntelConfig:
    """Build default config for a given project root."""
    resolved_root = project_root.resolve()
    return IntelConfig(
        project_root=resolved_root,
        data_dir=resolved_root / DEFAULT_DATA_DIR,
        extraction=ExtractionConfig(
            extensions=DEFAULT_INDEXABLE_EXTENSIONS,
            exclude_globs=DEFAULT_EXCLUDE_GLOBS,
        ),
        conventions=ConventionsConfig(
            min_samples=DEFAULT_MIN_SAMPLES,
            min_match_rate=DEFAULT_MIN_MATCH_RATE,
        ),
        summary=SummaryConfig(
            max_directories=DEFAULT_MAX_SUMMARY_DIRECTORIES,
            max_file_patterns=DEFAULT_MAX_SUMMARY_FILE_PATTERNS,
        ),
        audit_enabled=True,
    )


def load_project_config_file(project_root: Path) -> dict[str, object]:
    """Load optional repo_intel.toml from the project root."""
    config_path = project_root / CONFIG_FILE_NAME
    if not config_path.exists():
        return {}
    try:
        with config_path.open("rb") as handle:
            payload = tomllib.load(handle)
    except tomllib.TOMLDecodeError as error:
        raise ConfigError(f"{CONFIG_FILE_NAME} is not valid TOML: {error}") from error
    if not isinstance(payload, dict):
        raise ConfigError(f"{CONFIG_FILE_NAME} must contain a top-level table.")
    return payload


def merge_config(
    base: IntelConfig, project_payload: dict[str, object], overrides: CliOverrides
) -> IntelConfig:
    """Merge defaults, project config, then CLI overrides."""
    index_payload = _get_table(project_payload, "index")
    conventions_payload = _get_table(project_payload, "conventions")
    summary_payload = _get_table(project_payload, "summary")
    audit_payload = _get_table(project_payload, "audit")

    extensions = base.extraction.extensions
    if "extensions" in index_payload:
        extensions = _normalize_extensions(
            _tuple_of_strings(index_payload["extensions"], "index", "extensions")
        )
    exclude_globs = base.extraction.exclude_globs
    if "exclude_globs" in index_payload:
        exclude_globs = _tuple_of_strings(index_payload["exclude_globs"], "index", "exclude_globs")

    min_samples = _optional_positive_int(
        conventions_payload.get("min_samples"),
        "conventions.min_samples",
        base.conventions.min_samples,
    )
    min_match_rate = _optional_rate(
        conventions_payload.get("min_match_rate"),
        "conventions.min_match_rate",
        base.conventions.min_match_rate,
    )
    max_directories = _optional_positive_int(
        summary_payload.get("max_directories"),
        "summary.max_directories",
        base.summary.max_directories,
    )
    max_file_patterns = _optional_positive_int(
        summary_payload.get("max_file_patterns"),
        "summary.max_file_patterns",
        base.summary.max_file_patterns,
    )

    audit_enabled = base.audit_enabled
    if "enabled" in audit_payload:
        raw_enabled = audit_payload["enabled"]
        if not isinstance(raw_enabled, bool):
            raise ConfigError("Config field 'audit.enabled' must be a boolean.")
        audit_enabled = raw_enabled

    merged = IntelConfig(
        project_root=base.project_root,
        data_dir=base.data_dir,
        extraction=ExtractionConfig(extensions=extensions, exclude_globs=exclude_globs),
        conventions=ConventionsConfig(
            min_samples=min_samples,
            min_match_rate=min_match_rate,
        ),
        summary=SummaryConfig(
            max_directories=max_directories,
            max_file_patterns=max_file_patterns,
        ),
        audit_enabled=audit_enabled,
    )
    return apply_cli_overrides(merged, overrides)


def apply_cli_overrides(config: IntelConfig, overrides: CliOverrides) -> IntelConfig:
    """Apply startup overrides at highest precedence."""
    data_dir = overrides.data_dir or config.data_dir
    if not data_dir.is_absolute():
        data_dir = config.project_root / data_dir
    return IntelConfig(
        project_root=config.project_root,
        data_dir=data_dir.resolve(),
        extraction=config.extraction,
        conventions=config.conventions,
        summary=config.summary,
        audit_enabled=(
            overrides.audit_enabled
            if overrides.audit_enabled is not None
            else config.audit_enabled
        ),
    )


def load_effective_config(
    project_root: Path, overrides: CliOverrides | None = None
) -> IntelConfig:
    """Load effective config using merge order defaults -> project config -> overrides."""
    resolved_root = project_root.resolve()
    base = default_config(resolved_root)
    payload = load_project_config_file(resolved_root)
    return merge_config(base, payload, overrides or CliOverrides())


def _get_table(payload: dict[str, object], key: str) -> dict[str, object]:
    value = payload.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"Config section '{key}' must be a table.")
    return value


def _tuple_of_strings(value: object, section: str, field: str) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise ConfigError(f"Config field '{section}.{field}' must be a list of strings.")
    output: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ConfigError(f"Config field '{section}.{field}' must contain only strings.")
        output.append(item)
    return tuple(output)


def _normalize_extensions(extensions: tuple[str, ...]) -> tuple[str, ...]:
    output: list[str] = []
    for extension in extensions:
        lowered = extension.strip().lower()
        if not lowered:
            continue
        if not lowered.startswith("."):
            lowered = f".{lowered}"
        if lowered not in output:
            output.append(lowered)
    if not output:
        raise ConfigError("Config field 'index.extensions' must name at least one extension.")
    return tuple(output)


def _optional_positive_int(value: object, name: str, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError(f"Config field '{name}' must be a positive integer.")
    return value


def _optional_rate(value: object, name: str, default: float) -> float:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"Config field '{name}' must be a number.")
    rate = float(value)
    if rate <= 0.0 or rate > 1.0:
        raise ConfigError(f"Config field '{name}' must be > 0 and <= 1.")
    return rate
