"""
Component manifest reader.

A manifest is a JSON object that may declare ``usingComponents``, a mapping
of local component name to component path (without extension).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .context import ResolveContext
from .errors import ManifestNotFoundError, ManifestNotJSONError
from .models import ComponentRef
from .paths import join_path

logger = logging.getLogger(__name__)


def read_using_components(text: str, label: str, ctx: ResolveContext) -> dict[str, Any]:
    """
    Extract the ``usingComponents`` mapping from manifest text.

    Args:
        text: Raw manifest text
        label: Manifest name used in error messages
        ctx: Resolution context that receives parse errors

    Returns:
        The mapping, or an empty dict when the text is not JSON or the
        field is absent.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        ctx.report(ManifestNotJSONError(label))
        return {}

    if not isinstance(data, dict):
        return {}
    using = data.get("usingComponents") or {}
    if not isinstance(using, dict):
        logger.debug("Ignoring non-object usingComponents in %s", label)
        return {}
    return using


def resolve_component_refs(
    mapping: dict[str, Any],
    parent_dir: str | None = None,
    origin: str | None = None,
) -> list[ComponentRef]:
    """Turn a ``usingComponents`` mapping into references, in declaration order."""
    refs: list[ComponentRef] = []
    for name, value in mapping.items():
        if not isinstance(value, str):
            logger.debug("Skipping component %r in %s: path is not a string", name, origin)
            continue
        path = join_path(parent_dir, value) if parent_dir else value
        refs.append(ComponentRef(path=path, origin=origin))
    return refs


def read_manifest_from_disk(path: str, ctx: ResolveContext) -> dict[str, Any] | None:
    """Read a manifest file; records an error and returns None if it is missing."""
    manifest = Path(path)
    if not manifest.exists():
        ctx.report(ManifestNotFoundError(path))
        return None
    return read_using_components(manifest.read_text(encoding="utf-8", errors="replace"), path, ctx)


def refs_from_text(
    text: str, label: str, ctx: ResolveContext, parent_dir: str | None = None
) -> list[ComponentRef]:
    return resolve_component_refs(read_using_components(text, label, ctx), parent_dir, label)


def refs_from_disk(
    path: str, ctx: ResolveContext, parent_dir: str | None = None
) -> list[ComponentRef]:
    mapping = read_manifest_from_disk(path, ctx)
    if mapping is None:
        return []
    return resolve_component_refs(mapping, parent_dir, path)
