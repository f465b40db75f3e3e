"""
Work-list expansion of component references into copy patterns.

Each reference is checked for its ``.js`` companion, its own manifest is
read for further references, and a native-file ``CopyPattern`` is emitted
for its directory. Newly discovered references go to the back of the same
queue, so discovery is breadth-first in declaration order.
"""

from __future__ import annotations

import logging
import posixpath
from collections import deque
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from .context import ResolveContext
from .errors import ComponentScriptNotFoundError
from .manifest import refs_from_disk
from .models import ComponentRef, CopyPattern
from .paths import file_dir, split_path

logger = logging.getLogger(__name__)

# Maps a reference path to its (from, to) pair.
Locator = Callable[[str], tuple[str, str]]


class PatternList:
    """
    Ordered copy patterns, unique by ``(from, to)``.

    The first pattern registered for a pair wins, even if a later one
    carries a different ``ignore`` filter.
    """

    def __init__(self, patterns: Iterable[CopyPattern] = ()) -> None:
        self._patterns: list[CopyPattern] = []
        self._keys: set[tuple[str, str]] = set()
        for pattern in patterns:
            self.add(pattern)

    def add(self, pattern: CopyPattern) -> bool:
        """Append ``pattern`` unless its pair is already present."""
        if pattern.key in self._keys:
            logger.debug("Skipping duplicate pattern %s -> %s", pattern.from_, pattern.to)
            return False
        self._keys.add(pattern.key)
        self._patterns.append(pattern)
        return True

    def __contains__(self, pattern: object) -> bool:
        return isinstance(pattern, CopyPattern) and pattern.key in self._keys

    def __iter__(self) -> Iterator[CopyPattern]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def as_list(self) -> list[CopyPattern]:
        return list(self._patterns)


def expand_component(
    from_path: str,
    to_path: str,
    ref: ComponentRef,
    ctx: ResolveContext,
) -> tuple[CopyPattern | None, list[ComponentRef]]:
    """
    Expand one component.

    Args:
        from_path: Component base path on disk (no extension)
        to_path: Output base path relative to the project root
        ref: The reference being expanded; nested references are joined
            onto its directory
        ctx: Resolution context

    Returns:
        The component's pattern (None if its script is missing) and the
        references declared in its manifest.
    """
    directory, name = split_path(from_path)
    script = f"{from_path}.js"

    # Only the script decides whether a component exists.
    if not Path(script).exists():
        ctx.report(ComponentScriptNotFoundError(from_path))
        return None, []

    ctx.dependencies.add(script)
    discovered = refs_from_disk(
        posixpath.join(directory, f"{name}.json"), ctx, parent_dir=file_dir(ref.path)
    )
    pattern = CopyPattern(from_=file_dir(from_path), to=file_dir(to_path))
    logger.debug(
        "Expanded %s (from %s): %d nested component(s)", from_path, ref.origin, len(discovered)
    )
    return pattern, discovered


def expand_worklist(
    refs: Iterable[ComponentRef],
    locate: Locator,
    patterns: PatternList,
    ctx: ResolveContext,
) -> None:
    """
    Expand ``refs`` and everything they transitively reference.

    A reference path is expanded at most once per call, which keeps cyclic
    component graphs finite.
    """
    queue = deque(refs)
    seen: set[str] = set()
    while queue:
        ref = queue.popleft()
        if not ref.path or ref.path in seen:
            continue
        seen.add(ref.path)

        from_path, to_path = locate(ref.path)
        pattern, discovered = expand_component(from_path, to_path, ref, ctx)
        queue.extend(discovered)
        if pattern is not None:
            patterns.add(pattern)
