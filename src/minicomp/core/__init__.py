"""Core minicomp functionality: manifest reading, graph traversal, entry collection, resolution."""

from .config import ComponentConfig, ProjectConfig, load_config
from .context import ResolveContext
from .entries import collect_entries
from .errors import (
    ComponentError,
    ComponentScriptNotFoundError,
    ConfigError,
    ErrorContext,
    IneffectivePathError,
    ManifestNotFoundError,
    ManifestNotJSONError,
    MinicompError,
)
from .manifest import read_manifest_from_disk, read_using_components, resolve_component_refs
from .models import (
    Compilation,
    CompilationOptions,
    ComponentRef,
    CopyPattern,
    Entry,
    FileAsset,
    ResolveResult,
    TextAsset,
)
from .resolver import extract_components, resolve_components
from .traversal import PatternList, expand_component, expand_worklist

__all__ = [
    "MinicompError",
    "ConfigError",
    "ComponentError",
    "ManifestNotJSONError",
    "ManifestNotFoundError",
    "ComponentScriptNotFoundError",
    "IneffectivePathError",
    "ErrorContext",
    "ComponentConfig",
    "ProjectConfig",
    "load_config",
    "ResolveContext",
    "Compilation",
    "CompilationOptions",
    "ComponentRef",
    "CopyPattern",
    "Entry",
    "FileAsset",
    "TextAsset",
    "ResolveResult",
    "read_using_components",
    "resolve_component_refs",
    "read_manifest_from_disk",
    "collect_entries",
    "PatternList",
    "expand_component",
    "expand_worklist",
    "resolve_components",
    "extract_components",
]
