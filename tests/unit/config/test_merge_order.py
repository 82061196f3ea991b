from __future__ import annotations

from pathlib import Path

import pytest

from repo_intel.config import (
    DEFAULT_INDEXABLE_EXTENSIONS,
    CliOverrides,
    ConfigError,
    load_effective_config,
)


def test_defaults_without_project_config(tmp_path: Path) -> None:
    config = load_effective_config(tmp_path)

    assert config.project_root == tmp_path.resolve()
    assert config.data_dir == tmp_path.resolve() / ".planning" / "intel"
    assert config.extraction.extensions == DEFAULT_INDEXABLE_EXTENSIONS
    assert config.conventions.min_samples == 5
    assert config.conventions.min_match_rate == pytest.approx(0.70)
    assert config.summary.max_directories == 5
    assert config.summary.max_file_patterns == 3
    assert config.audit_enabled is True


def test_merge_order_defaults_then_project_then_cli(tmp_path: Path) -> None:
    (tmp_path / "repo_intel.toml").write_text(
        "\n".join(
            [
                "[index]",
                'extensions = ["TS", ".vue", ".ts"]',
                "",
                "[conventions]",
                "min_samples = 3",
                "min_match_rate = 0.6",
                "",
                "[audit]",
                "enabled = false",
            ]
        ),
        encoding="utf-8",
    )
    overrides = CliOverrides(data_dir=Path("custom"), audit_enabled=True)

    config = load_effective_config(tmp_path, overrides)

    assert config.extraction.extensions == (".ts", ".vue")
    assert config.conventions.min_samples == 3
    assert config.conventions.min_match_rate == pytest.approx(0.6)
    assert config.summary.max_directories == 5
    assert config.data_dir == tmp_path.resolve() / "custom"
    assert config.audit_enabled is True


@pytest.mark.parametrize(
    "body",
    [
        "[conventions]\nmin_match_rate = 1.5\n",
        "[conventions]\nmin_samples = 0\n",
        "[summary]\nmax_directories = true\n",
        "[index]\nextensions = \".ts\"\n",
        "[audit]\nenabled = \"yes\"\n",
        "conventions = 3\n",
        "[conventions\n",
    ],
)
def test_invalid_project_config_raises(tmp_path: Path, body: str) -> None:
    (tmp_path / "repo_intel.toml").write_text(body, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_effective_config(tmp_path)
