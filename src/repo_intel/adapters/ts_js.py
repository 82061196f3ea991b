"""Lexical TypeScript/JavaScript adapter recovering exports and imports.

Each surface form is matched by its own pattern over the raw text and the
results are unioned, so a form that fails to match never hides another one.
Nothing here validates syntax: malformed statements simply do not match.
"""

from __future__ import annotations

import re

from repo_intel.adapters.base import ModuleSurface, surface_from_sets

_IMPORT_FROM_RE = re.compile(
    r"import\s+(?:\{[^}]*\}|\*\s+as\s+\w+|\w+)\s+from\s+['\"]([^'\"]+)['\"]", re.ASCII
)
_IMPORT_SIDE_EFFECT_RE = re.compile(r"import\s+['\"]([^'\"]+)['\"]")
_REQUIRE_RE = re.compile(r"require\s*\(\s*['\"]([^'\"]+)['\"]\s*\)")
_SIDE_EFFECT_LOOKBEHIND_CHARS = 10

_EXPORT_LIST_RE = re.compile(r"export\s*\{([^}]+)\}")
_EXPORT_ALIAS_SPLIT_RE = re.compile(r"\s+as\s+")
_EXPORT_DECLARATION_RE = re.compile(
    r"export\s+(?:(?:const|let|var|class)\s+|(?:async\s+)?function\b\s*\*?\s*)(\w+)", re.ASCII
)
_EXPORT_DEFAULT_RE = re.compile(
    r"export\s+default\s+(?:(?:async\s+)?function\b\s*\*?\s*(\w+)|class\s+(\w+))?", re.ASCII
)
_MODULE_EXPORTS_OBJECT_RE = re.compile(r"module\.exports\s*=\s*\{([^}]+)\}")
_MODULE_EXPORTS_KEY_SPLIT_RE = re.compile(r"\s*:\s*")
_MODULE_EXPORTS_IDENTIFIER_RE = re.compile(r"module\.exports\s*=\s*(\w+)\s*[;\n]", re.ASCII)
_TYPE_EXPORT_RE = re.compile(r"export\s+(?:type|interface)\s+(\w+)", re.ASCII)
_BARE_WORD_RE = re.compile(r"\w+", re.ASCII)

DEFAULT_EXPORT = "default"
DEFAULT_EXTENSIONS = (".js", ".ts", ".jsx", ".tsx", ".mjs", ".cjs")
# Words that can follow "class" in an anonymous default export.
_NOT_A_CLASS_NAME = {"extends", "implements"}


class TypeScriptJavaScriptExtractor:
    """Deterministic lexical extractor for TypeScript and JavaScript files."""

    name = "ts_js_lexical"

    def __init__(self, extensions: tuple[str, ...] = DEFAULT_EXTENSIONS) -> None:
        self._extensions = tuple(extension.lower() for extension in extensions)

    def supports_path(self, path: str) -> bool:
        """Return True when path ends with an indexable extension."""
        return path.lower().endswith(self._extensions)

    def extract(self, path: str, text: str) -> ModuleSurface:
        """Return sorted export names and import sources for one file."""
        _ = path
        return surface_from_sets(extract_exports(text), extract_imports(text))


def extract_imports(text: str) -> set[str]:
    """Return module sources referenced by import and require forms."""
    imports: set[str] = set()

    for match in _IMPORT_FROM_RE.finditer(text):
        imports.add(match.group(1))

    for match in _IMPORT_SIDE_EFFECT_RE.finditer(text):
        window = text[max(0, match.start() - _SIDE_EFFECT_LOOKBEHIND_CHARS) : match.start()]
        if "from" not in window:
            imports.add(match.group(1))

    for match in _REQUIRE_RE.finditer(text):
        imports.add(match.group(1))

    return imports


def extract_exports(text: str) -> set[str]:
    """Return names a module exposes, including the "default" sentinel."""
    exports: set[str] = set()

    for match in _EXPORT_LIST_RE.finditer(text):
        for entry in match.group(1).split(","):
            # "a as b" exports b
            name = _EXPORT_ALIAS_SPLIT_RE.split(entry.strip())[-1].strip()
            if name:
                exports.add(name)

    for match in _EXPORT_DECLARATION_RE.finditer(text):
        exports.add(match.group(1))

    for match in _EXPORT_DEFAULT_RE.finditer(text):
        exports.add(DEFAULT_EXPORT)
        function_name, class_name = match.group(1), match.group(2)
        if function_name:
            exports.add(function_name)
        if class_name and class_name not in _NOT_A_CLASS_NAME:
            exports.add(class_name)

    for match in _MODULE_EXPORTS_OBJECT_RE.finditer(text):
        for entry in match.group(1).split(","):
            key = _MODULE_EXPORTS_KEY_SPLIT_RE.split(entry.strip())[0].strip()
            if key and _BARE_WORD_RE.fullmatch(key):
                exports.add(key)

    for match in _MODULE_EXPORTS_IDENTIFIER_RE.finditer(text):
        exports.add(DEFAULT_EXPORT)
        exports.add(match.group(1))

    for match in _TYPE_EXPORT_RE.finditer(text):
        exports.add(match.group(1))

    return exports
