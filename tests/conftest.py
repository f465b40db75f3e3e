"""Shared pytest fixtures for minicomp tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from minicomp.core.context import ResolveContext

ComponentFactory = Callable[..., Path]


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Return an empty project directory."""
    root = tmp_path / "proj"
    root.mkdir()
    return root.resolve()


@pytest.fixture
def make_component(project_root: Path) -> ComponentFactory:
    """
    Return a helper that writes a component under the project root.

    ``make_component("comp/a/a", using={"b": "../b/b"})`` writes
    ``comp/a/a.js`` and ``comp/a/a.json``. Pass ``script=False`` to omit
    the script, ``manifest=None`` to omit the manifest, or ``manifest=<str>``
    to write raw manifest text.
    """

    def _make(
        base: str,
        using: dict[str, str] | None = None,
        *,
        script: bool = True,
        manifest: str | None | bool = True,
    ) -> Path:
        path = project_root / base
        path.parent.mkdir(parents=True, exist_ok=True)
        if script:
            path.with_name(path.name + ".js").write_text("Component({})\n")
        if manifest is True:
            data = {"component": True}
            if using is not None:
                data["usingComponents"] = using
            path.with_name(path.name + ".json").write_text(json.dumps(data))
        elif isinstance(manifest, str):
            path.with_name(path.name + ".json").write_text(manifest)
        return path

    return _make


@pytest.fixture
def write_json(project_root: Path) -> Callable[[str, dict], Path]:
    """Return a helper that writes a JSON file relative to the project root."""

    def _write(rel: str, data: dict) -> Path:
        path = project_root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data))
        return path

    return _write


@pytest.fixture
def ctx(project_root: Path) -> ResolveContext:
    """Return a fresh resolution context rooted at the project."""
    return ResolveContext(project_root=project_root.as_posix())
