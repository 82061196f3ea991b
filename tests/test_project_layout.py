from __future__ import annotations

from pathlib import Path


def test_required_package_paths_exist() -> None:
    root = Path(__file__).resolve().parents[1]
    required = [
        "src/repo_intel/hook.py",
        "src/repo_intel/config.py",
        "src/repo_intel/summary.py",
        "src/repo_intel/adapters/__init__.py",
        "src/repo_intel/conventions/__init__.py",
        "src/repo_intel/index/__init__.py",
        "src/repo_intel/logging/__init__.py",
    ]
    for rel in required:
        assert (root / rel).exists(), rel
