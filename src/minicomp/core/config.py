"""
Component resolution configuration.

``ComponentConfig`` is what the resolver consumes. ``load_config`` reads it
from a project file, ``minicomp.toml`` by default:

    [project]
    context = "."            # project root, relative to this file

    [components]
    src = ["src"]
    using_components = "app.json"
    force_copy = ["static/vendor/lib.js"]

A ``.json`` file with the same keys (camelCase or snake_case) is accepted
too, either at top level or under ``"components"``.
"""

from __future__ import annotations

import json
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import make_config_error

DEFAULT_CONFIG_NAME = "minicomp.toml"


class ComponentConfig(BaseModel):
    """
    Inputs of one resolution pass.

    Attributes:
        src: Source roots to synthesize entries from (directories or manifests)
        using_components: Root manifest whose components are resolved
            against the project root
        force_copy: Paths copied unconditionally
    """

    src: list[str] = Field(default_factory=list)
    using_components: str | None = Field(default=None, alias="usingComponents")
    force_copy: list[str] = Field(default_factory=list, alias="forceCopy")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("src", "force_copy", mode="before")
    @classmethod
    def coerce_path_list(cls, v: Any) -> Any:
        """Accept a single path or nothing where a list is expected."""
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v

    @classmethod
    def coerce(cls, value: "ComponentConfig | Mapping[str, Any] | None") -> "ComponentConfig":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls.model_validate(dict(value))


@dataclass
class ProjectConfig:
    """Project root plus the component configuration loaded for it."""

    root: Path
    components: ComponentConfig
    path: Path | None = None


def _anchor(value: str, base: Path) -> str:
    path = Path(value)
    if not path.is_absolute():
        path = base / path
    return path.resolve().as_posix()


def load_config(path: Path) -> ProjectConfig:
    """
    Load a project configuration file.

    Relative paths in the file are resolved against the project root, which
    itself defaults to the directory containing the file.

    Raises:
        ConfigError: If the file is missing, malformed, or has invalid fields
    """
    if not path.exists():
        raise make_config_error("Config file not found", str(path))

    is_json = path.suffix == ".json"
    try:
        text = path.read_text(encoding="utf-8")
        data = json.loads(text) if is_json else tomllib.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise make_config_error(f"Invalid config file: {e}", str(path)) from e

    if not isinstance(data, dict):
        raise make_config_error("Config must be a table/object", str(path))

    project = data.get("project", {})
    if not isinstance(project, dict):
        raise make_config_error("[project] must be a table/object", str(path), "project")
    context = project.get("context", ".")
    if not isinstance(context, str):
        raise make_config_error("project.context must be a string", str(path), "project")

    if is_json and "components" not in data:
        components = {k: v for k, v in data.items() if k != "project"}
    else:
        components = data.get("components", {})

    base = path.parent.resolve()
    root = Path(_anchor(context, base))

    try:
        config = ComponentConfig.model_validate(components)
    except ValidationError as e:
        raise make_config_error(f"Invalid component settings: {e}", str(path), "components") from e

    config = config.model_copy(
        update={
            "src": [_anchor(s, root) for s in config.src],
            "using_components": (
                _anchor(config.using_components, root) if config.using_components else None
            ),
            "force_copy": [_anchor(p, root) for p in config.force_copy],
        }
    )
    return ProjectConfig(root=root, components=config, path=path)
