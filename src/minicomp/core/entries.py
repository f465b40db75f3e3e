"""
Synthesize entries from source roots.

Turns directories and individual manifest files into ``Entry`` records so
they can be traversed exactly like entries supplied by the host.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from .context import ResolveContext
from .errors import IneffectivePathError
from .models import Entry, FileAsset
from .paths import is_manifest_name

logger = logging.getLogger(__name__)


def _is_hidden(rel: Path) -> bool:
    return any(part.startswith(".") for part in rel.parts)


def path_to_entry(file: Path, root: Path | None = None) -> Entry:
    """
    Build an entry for a single manifest file.

    The asset is keyed by the file's path relative to ``root`` when given,
    otherwise by its absolute path. The entry's context is the file's own
    directory.
    """
    file = file.resolve()
    name = file.relative_to(root).as_posix() if root else file.as_posix()
    return Entry(context=file.parent.as_posix(), assets={name: FileAsset(file)})


def collect_entries(
    roots: str | Sequence[str],
    ext: str,
    ctx: ResolveContext,
) -> list[Entry]:
    """
    Collect one entry per ``*.<ext>`` file under the given roots.

    Args:
        roots: Directories or single manifest files
        ext: File extension to match, without the dot
        ctx: Resolution context that receives ineffective-path errors

    Returns:
        Entries in root order, files within a directory root sorted by path
    """
    if isinstance(roots, str):
        roots = [roots]

    entries: list[Entry] = []
    for root in roots:
        root_path = Path(root)
        if root_path.is_dir():
            base = root_path.resolve()
            files = sorted(
                p
                for p in base.rglob(f"*.{ext}")
                if p.is_file() and not _is_hidden(p.relative_to(base))
            )
            logger.debug("Collected %d *.%s file(s) under %s", len(files), ext, base)
            entries.extend(path_to_entry(p, base) for p in files)
        elif root_path.is_file() and is_manifest_name(root, ext):
            entries.append(path_to_entry(root_path))
        else:
            ctx.report(IneffectivePathError(root))
    return entries
