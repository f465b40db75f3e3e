"""Tests for the component manifest reader."""

from pathlib import Path

from minicomp.core.context import ResolveContext
from minicomp.core.errors import ManifestNotFoundError, ManifestNotJSONError
from minicomp.core.manifest import (
    read_manifest_from_disk,
    read_using_components,
    refs_from_disk,
    refs_from_text,
    resolve_component_refs,
)
from minicomp.core.models import ComponentRef


def test_reads_using_components(ctx: ResolveContext) -> None:
    text = '{"usingComponents": {"card": "../card/card"}, "navigationBarTitleText": "x"}'
    assert read_using_components(text, "pages/index.json", ctx) == {"card": "../card/card"}
    assert ctx.diagnostics == []


def test_missing_field_yields_empty_mapping(ctx: ResolveContext) -> None:
    assert read_using_components('{"component": true}', "a.json", ctx) == {}
    assert ctx.diagnostics == []


def test_malformed_json_records_one_error(ctx: ResolveContext) -> None:
    assert read_using_components("{not json", "pages/bad.json", ctx) == {}

    assert len(ctx.diagnostics) == 1
    error = ctx.diagnostics[0]
    assert isinstance(error, ManifestNotJSONError)
    assert str(error) == "pages/bad.json is not json"
    assert error.path == "pages/bad.json"


def test_non_object_manifest_is_ignored(ctx: ResolveContext) -> None:
    assert read_using_components("[1, 2]", "a.json", ctx) == {}
    assert read_using_components('{"usingComponents": ["a"]}', "a.json", ctx) == {}
    assert ctx.diagnostics == []


def test_errors_are_forwarded_to_host_sink() -> None:
    sink: list = []
    ctx = ResolveContext(error_sink=sink)

    read_using_components("", "empty.json", ctx)

    assert sink == ctx.diagnostics
    assert len(sink) == 1


class TestResolveComponentRefs:
    def test_declaration_order_is_preserved(self) -> None:
        refs = resolve_component_refs({"a": "./x", "b": "./y"})
        assert [r.path for r in refs] == ["./x", "./y"]

    def test_order_follows_manifest_not_key_names(self, ctx: ResolveContext) -> None:
        refs = refs_from_text('{"usingComponents": {"z": "./z", "a": "./a", "m": "./m"}}', "p/i.json", ctx)
        assert [r.path for r in refs] == ["./z", "./a", "./m"]

    def test_parent_is_joined(self) -> None:
        refs = resolve_component_refs({"a": "./x", "b": "/abs/y"}, "/project")
        assert [r.path for r in refs] == ["/project/x", "/project/abs/y"]

    def test_origin_is_recorded(self) -> None:
        refs = resolve_component_refs({"a": "./x"}, origin="pages/index.json")
        assert refs == [ComponentRef(path="./x", origin="pages/index.json")]

    def test_non_string_values_are_skipped(self) -> None:
        refs = resolve_component_refs({"a": 3, "b": "./b", "c": None})
        assert [r.path for r in refs] == ["./b"]


class TestReadFromDisk:
    def test_missing_manifest(self, ctx: ResolveContext, project_root: Path) -> None:
        path = (project_root / "nope.json").as_posix()

        assert read_manifest_from_disk(path, ctx) is None
        assert refs_from_disk(path, ctx) == []

        assert len(ctx.diagnostics) == 2
        assert isinstance(ctx.diagnostics[0], ManifestNotFoundError)
        assert str(ctx.diagnostics[0]) == f'Component is not found in path "{path}"(not found json)'

    def test_reads_file(self, ctx: ResolveContext, write_json, project_root: Path) -> None:
        path = write_json("app.json", {"usingComponents": {"a": "comp/a/a"}})

        refs = refs_from_disk(path.as_posix(), ctx, parent_dir=project_root.as_posix())

        assert [r.path for r in refs] == [f"{project_root.as_posix()}/comp/a/a"]
        assert refs[0].origin == path.as_posix()


def test_invalid_utf8_on_disk_is_not_json(ctx: ResolveContext, project_root: Path) -> None:
    path = project_root / "bad.json"
    path.write_bytes(b"\xff\xfe{}")

    assert read_manifest_from_disk(path.as_posix(), ctx) == {}
    assert [str(e) for e in ctx.diagnostics] == [f"{path.as_posix()} is not json"]
