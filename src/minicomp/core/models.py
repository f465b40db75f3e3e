"""
Data model for component resolution.

``CopyPattern`` is the output handed to the downstream copy step. The
remaining types describe the host's compilation (entries and their
lazily-readable assets) and the per-call result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field

from .errors import ComponentError

NATIVE_EXTENSIONS: tuple[str, ...] = ("js", "json", "wxss", "wxs", "wxml")
NATIVE_IGNORE = f"**/*.!({'|'.join(NATIVE_EXTENSIONS)})"


class CopyPattern(BaseModel):
    """
    Instruction to copy native component files from one directory to another.

    Attributes:
        from_: Source directory (or file, for forced copies). Serialized as ``from``.
        to: Destination, relative to the output root
        ignore: Glob exclusions applied while copying

    Two patterns are duplicates when ``from`` and ``to`` match; ``ignore``
    is not part of the key.
    """

    from_: str = Field(alias="from")
    to: str
    ignore: list[str] = Field(default_factory=lambda: [NATIVE_IGNORE])

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def key(self) -> tuple[str, str]:
        return (self.from_, self.to)

    def accepts(self, filename: str) -> bool:
        """Whether ``filename`` survives the native-file ignore filter."""
        name = Path(filename).name
        # Dotfiles never match the glob, so they are not excluded.
        if name.startswith(".") or "." not in name:
            return True
        suffix = name.split(".", 1)[1]
        return suffix in NATIVE_EXTENSIONS

    def to_dict(self) -> dict[str, Any]:
        """Convert to the ``{from, to, ignore}`` mapping copy steps expect."""
        return self.model_dump(by_alias=True)


class Asset(Protocol):
    def source(self) -> str: ...


@dataclass(frozen=True)
class TextAsset:
    """Asset backed by in-memory text."""

    text: str

    def source(self) -> str:
        return self.text


@dataclass(frozen=True)
class FileAsset:
    """Asset that reads its file each time ``source()`` is called."""

    path: Path

    def source(self) -> str:
        return self.path.read_text(encoding="utf-8", errors="replace")


@dataclass
class Entry:
    """
    One unit of compilation: a working directory and its named assets.

    Attributes:
        context: Directory references in the entry's manifest are relative to
        assets: Asset name -> asset
    """

    context: str
    assets: dict[str, Asset] = field(default_factory=dict)


@dataclass
class CompilationOptions:
    context: str = ""  # absolute project root


@dataclass
class Compilation:
    """
    Minimal host compilation.

    Any object exposing ``entries``, ``options.context`` and optionally an
    ``errors`` list can be passed to the resolver instead.
    """

    entries: list[Entry] = field(default_factory=list)
    options: CompilationOptions = field(default_factory=CompilationOptions)
    errors: list[Exception] = field(default_factory=list)


@dataclass(frozen=True)
class ComponentRef:
    """A component path waiting to be expanded, and the manifest it came from."""

    path: str
    origin: str | None = None


@dataclass
class ResolveResult:
    """Everything one resolution pass produced."""

    patterns: list[CopyPattern] = field(default_factory=list)
    dependencies: set[str] = field(default_factory=set)
    diagnostics: list[ComponentError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "patterns": [p.to_dict() for p in self.patterns],
            "dependencies": sorted(self.dependencies),
            "errors": [str(e) for e in self.diagnostics],
        }
