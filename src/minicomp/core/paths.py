"""
Path helpers for component resolution.

All paths are handled as POSIX strings rather than ``Path`` objects: the
resolver re-anchors references that may be relative, absolute, or
project-root relative, and the normalization rules below have to match
the way mini-program manifests are written.
"""

from __future__ import annotations

import os
import posixpath
import re

# Asset names that count as a manifest: at least one directory separator
# before a ``.json`` file name.
MANIFEST_NAME_RE = re.compile(r"/.+\.json$")


def is_absolute(path: str) -> bool:
    return posixpath.isabs(path)


def join_path(*parts: str) -> str:
    """
    Join path segments and normalize the result.

    Unlike ``os.path.join`` an absolute segment does not discard what came
    before it, so ``join_path("/project", "/comp/a")`` is
    ``"/project/comp/a"``.
    """
    joined = "/".join(part for part in parts if part)
    if not joined:
        return "."
    return posixpath.normpath(joined)


def resolve_path(*parts: str) -> str:
    """Resolve segments right to left into an absolute, normalized path."""
    resolved = ""
    for part in reversed(parts):
        if not part:
            continue
        resolved = posixpath.join(part, resolved) if resolved else part
        if is_absolute(resolved):
            break
    if not is_absolute(resolved):
        resolved = posixpath.join(os.getcwd(), resolved)
    return posixpath.normpath(resolved)


def relative_path(base: str, target: str) -> str:
    """Path of ``target`` relative to ``base``; ``""`` when they coincide."""
    rel = posixpath.relpath(resolve_path(target), resolve_path(base))
    return "" if rel == "." else rel


def split_path(path: str) -> tuple[str, str]:
    """Split ``path`` into its directory and base name without extension."""
    directory, base = posixpath.split(path)
    name, _ = posixpath.splitext(base)
    return directory, name


def file_dir(path: str) -> str:
    return posixpath.dirname(path)


def output_dir(asset_name: str, reference: str) -> str:
    """
    Re-anchor ``reference`` onto the directory of ``asset_name``.

    The asset's directory is treated as the top of the output tree, so the
    result is relative to the project root (no leading separator). Absolute
    references are taken as already rooted there.
    """
    if is_absolute(reference):
        anchored = reference
    else:
        base = file_dir(asset_name)
        if not is_absolute(base):
            base = "/" + base
        anchored = join_path(base, reference)
    return anchored[1:]


def is_manifest_name(name: str, ext: str = "json") -> bool:
    """Whether ``name`` looks like a manifest asset (``.../<file>.<ext>``)."""
    if ext == "json":
        return MANIFEST_NAME_RE.search(name) is not None
    return re.search(rf"/.+\.{re.escape(ext)}$", name) is not None
