"""
Top-level component resolution.

Combines forced copies, the configured root manifest, host entries and
entries synthesized from ``src`` roots into one deduplicated list of copy
patterns.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .config import ComponentConfig
from .context import ResolveContext
from .entries import collect_entries
from .manifest import refs_from_disk, refs_from_text
from .models import CopyPattern, Entry, ResolveResult
from .paths import is_absolute, is_manifest_name, join_path, output_dir, relative_path, resolve_path
from .traversal import PatternList, expand_worklist

logger = logging.getLogger(__name__)


def _project_root(compilation: Any) -> str:
    options = getattr(compilation, "options", None)
    return getattr(options, "context", "") or ""


def _expand_entry(entry: Entry, patterns: PatternList, ctx: ResolveContext) -> None:
    name = next((n for n in entry.assets if is_manifest_name(n)), None)
    if name is None:
        return

    refs = refs_from_text(entry.assets[name].source(), name, ctx)
    root = ctx.project_root

    def locate(path: str) -> tuple[str, str]:
        if is_absolute(path):
            from_path = join_path(root, path)
        else:
            from_path = resolve_path(root, entry.context, path)
        return from_path, output_dir(name, path)

    expand_worklist(refs, locate, patterns, ctx)


def resolve_components(
    compilation: Any,
    config: ComponentConfig | Mapping[str, Any] | None = None,
) -> ResolveResult:
    """
    Resolve the component graph of a compilation into copy patterns.

    Steps:
    1. Collect entries (host entries, then any synthesized from ``src``)
    2. Emit a pattern for every ``force_copy`` path, no existence check
    3. Expand the ``using_components`` root manifest against the project root
    4. Expand each entry's manifest against the entry's context

    Args:
        compilation: Host exposing ``entries``, ``options.context`` and
            optionally an ``errors`` list
        config: Component configuration (model or camelCase/snake_case dict)

    Returns:
        Patterns, script dependencies and recorded diagnostics. Nothing is
        raised for missing or malformed component files.
    """
    config = ComponentConfig.coerce(config)
    ctx = ResolveContext(
        project_root=_project_root(compilation),
        error_sink=getattr(compilation, "errors", None),
    )
    root = ctx.project_root
    patterns = PatternList()

    entries: list[Entry] = list(getattr(compilation, "entries", None) or [])
    if config.src:
        entries.extend(collect_entries(config.src, "json", ctx))

    for path in config.force_copy:
        ctx.dependencies.add(path)
        patterns.add(CopyPattern(from_=path, to=relative_path(root, path)))

    if config.using_components:
        refs = refs_from_disk(config.using_components, ctx, parent_dir=root)
        expand_worklist(refs, lambda path: (path, relative_path(root, path)), patterns, ctx)

    if entries and root:
        for entry in entries:
            _expand_entry(entry, patterns, ctx)

    logger.debug(
        "Resolved %d pattern(s), %d dependency(ies), %d error(s)",
        len(patterns),
        len(ctx.dependencies),
        len(ctx.diagnostics),
    )
    return ResolveResult(
        patterns=patterns.as_list(),
        dependencies=ctx.dependencies,
        diagnostics=ctx.diagnostics,
    )


def extract_components(
    compilation: Any,
    config: ComponentConfig | Mapping[str, Any] | None = None,
) -> list[CopyPattern]:
    """Resolve and return only the copy patterns; errors go to ``compilation.errors``."""
    return resolve_components(compilation, config).patterns
