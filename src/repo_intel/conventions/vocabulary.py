"""Purpose labels for well-known directory names and file suffixes."""

from __future__ import annotations

from typing import Final

UNKNOWN_PURPOSE: Final = "Unknown"

DIRECTORY_PURPOSES: Final[dict[str, str]] = {
    "components": "UI components",
    "hooks": "React/custom hooks",
    "utils": "Utility functions",
    "lib": "Utility functions",
    "services": "Service layer",
    "api": "API endpoints",
    "routes": "API endpoints",
    "types": "TypeScript types",
    "models": "Data models",
    "tests": "Test files",
    "__tests__": "Test files",
    "test": "Test files",
    "spec": "Test files",
    "controllers": "Controllers",
    "middleware": "Middleware",
    "config": "Configuration",
    "constants": "Constants",
    "assets": "Static assets",
    "styles": "Stylesheets",
    "pages": "Page components",
    "views": "View templates",
}

SUFFIX_PURPOSES: Final[dict[str, str]] = {
    "test": "Test files",
    "spec": "Test files",
    "service": "Service layer",
    "controller": "Controllers",
    "model": "Data models",
    "util": "Utility functions",
    "utils": "Utility functions",
    "helper": "Helper functions",
    "helpers": "Helper functions",
    "config": "Configuration",
    "types": "TypeScript types",
    "type": "TypeScript types",
    "interface": "TypeScript interfaces",
    "interfaces": "TypeScript interfaces",
    "constants": "Constants",
    "constant": "Constants",
    "hook": "React/custom hooks",
    "hooks": "React/custom hooks",
    "context": "React context",
    "store": "State store",
    "slice": "Redux slice",
    "reducer": "Redux reducer",
    "action": "Redux action",
    "actions": "Redux actions",
    "api": "API layer",
    "route": "Route definitions",
    "routes": "Route definitions",
    "middleware": "Middleware",
    "schema": "Schema definitions",
    "styles": "Stylesheets",
    "mock": "Mock data",
    "mocks": "Mock data",
    "fixture": "Test fixtures",
    "fixtures": "Test fixtures",
}


def directory_purpose(name: str) -> str | None:
    """Return the purpose label of a directory name, if it is well known."""
    return DIRECTORY_PURPOSES.get(name.lower())


def suffix_purpose(suffix: str) -> str:
    """Return the purpose label of a dotted file suffix such as "service"."""
    return SUFFIX_PURPOSES.get(suffix.lower(), UNKNOWN_PURPOSE)
