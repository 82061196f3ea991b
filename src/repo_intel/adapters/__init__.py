"""Source extraction adapters."""

from .base import ExtractionAdapter, ModuleSurface, surface_from_sets
from .registry import AdapterRegistry
from .runtime import build_adapter_registry
from .ts_js import TypeScriptJavaScriptExtractor, extract_exports, extract_imports

__all__ = [
    "AdapterRegistry",
    "ExtractionAdapter",
    "ModuleSurface",
    "TypeScriptJavaScriptExtractor",
    "build_adapter_registry",
    "extract_exports",
    "extract_imports",
    "surface_from_sets",
]
