"""
minicomp - component graph resolver for mini-program projects.

Walks ``usingComponents`` declarations in JSON manifests and produces the
copy patterns needed to ship every referenced native component.
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .core import (
    Compilation,
    CompilationOptions,
    ComponentConfig,
    CopyPattern,
    Entry,
    ResolveResult,
    extract_components,
    resolve_components,
)
from .core.errors import (
    ComponentError,
    ComponentScriptNotFoundError,
    ConfigError,
    IneffectivePathError,
    ManifestNotFoundError,
    ManifestNotJSONError,
    MinicompError,
)


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    # In editable mode, read directly from pyproject.toml for live updates
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    # Fall back to installed metadata
    try:
        return _metadata_version("minicomp")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "Compilation",
    "CompilationOptions",
    "ComponentConfig",
    "CopyPattern",
    "Entry",
    "ResolveResult",
    "resolve_components",
    "extract_components",
    "MinicompError",
    "ConfigError",
    "ComponentError",
    "ManifestNotJSONError",
    "ManifestNotFoundError",
    "ComponentScriptNotFoundError",
    "IneffectivePathError",
]
