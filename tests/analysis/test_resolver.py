"""Tests for TemplateResolver and virtual path construction."""

from __future__ import annotations

import pytest

from renderdeps import (
    Call,
    ClassCall,
    DefaultInflector,
    Opaque,
    RejectReason,
    Rejected,
    Resolved,
    Str,
    Sym,
    VarRef,
    VCall,
)
from renderdeps.analysis import RENDERABLE, TemplateReference, TemplateResolver, to_virtual_path


@pytest.fixture
def resolver(view_name):
    return TemplateResolver(view_name, DefaultInflector())


class TestResolvePathDirectory:
    """Relative template names."""

    def test_directory(self, resolver) -> None:
        assert resolver.directory == "app/views/posts"

    def test_bare_name(self, resolver) -> None:
        assert resolver.resolve_path_directory("form") == "app/views/posts/form"

    def test_name_with_slash(self, resolver) -> None:
        assert resolver.resolve_path_directory("shared/form") == "shared/form"

    @pytest.mark.parametrize(
        ("name", "directory"),
        [
            ("index.html", "."),
            ("/abs/index.html", "/abs"),
            ("a/b/c.html.erb", "a/b"),
        ],
    )
    def test_directory_of(self, name: str, directory: str) -> None:
        assert TemplateResolver(name, DefaultInflector()).directory == directory


class TestResolve:
    """Primary template resolution."""

    def test_literal(self, resolver) -> None:
        result = resolver.resolve({"partial": Str("foo")}, "partial")
        assert result == Resolved(TemplateReference("partial", "app/views/posts/foo"))

    def test_renderable(self, resolver) -> None:
        result = resolver.resolve({RENDERABLE: ClassCall("Card")}, RENDERABLE)
        assert result == Resolved(TemplateReference(RENDERABLE, "Card"))

    def test_class_call_as_partial_is_rejected(self, resolver) -> None:
        """Outside the renderable slot a class call names no template."""
        result = resolver.resolve({"partial": ClassCall("Card")}, "partial")
        assert isinstance(result, Rejected)
        assert result.reason is RejectReason.UNRESOLVED_EXPRESSION

    @pytest.mark.parametrize(
        "node",
        [VarRef("@post"), VarRef("post"), VCall("post"), Call("post", receiver=VarRef("@x"))],
    )
    def test_dynamic(self, resolver, node) -> None:
        result = resolver.resolve({"partial": node}, "partial")
        assert isinstance(result, Resolved)
        assert result.value.path == "posts/post"
        assert result.value.dynamic
        assert result.value.local_name == "post"

    @pytest.mark.parametrize("node", [Sym("post"), Opaque("1"), ClassCall("X")])
    def test_unresolvable(self, resolver, node) -> None:
        result = resolver.resolve({"partial": node}, "partial")
        assert isinstance(result, Rejected)
        assert result.reason is RejectReason.UNRESOLVED_EXPRESSION

    def test_empty_class_name(self, resolver) -> None:
        result = resolver.resolve({RENDERABLE: ClassCall("")}, RENDERABLE)
        assert isinstance(result, Rejected)
        assert result.reason is RejectReason.EMPTY_PATH

    def test_sigil_only_variable(self, resolver) -> None:
        result = resolver.resolve({"partial": VarRef("@")}, "partial")
        assert isinstance(result, Rejected)
        assert result.reason is RejectReason.EMPTY_PATH

    def test_dynamic_requires_partial(self, resolver) -> None:
        result = resolver.resolve({"template": VarRef("@post")}, "template")
        assert isinstance(result, Rejected)
        assert result.reason is RejectReason.PARTIAL_REQUIRED


class TestLocalName:
    """Informational local variable name for object/collection partials."""

    def test_from_path(self, resolver) -> None:
        result = resolver.resolve({"partial": Str("foo"), "collection": VarRef("@x")}, "partial")
        assert result == Resolved(
            TemplateReference("partial", "app/views/posts/foo", local_name="foo")
        )

    def test_strips_underscore_and_extensions(self, resolver) -> None:
        opts = {"partial": Str("shared/_card.html.erb"), "object": VarRef("@x")}
        result = resolver.resolve(opts, "partial")
        assert isinstance(result, Resolved)
        assert result.value.local_name == "card"

    @pytest.mark.parametrize("as_node", [Str("entry"), Sym("entry")])
    def test_from_as(self, resolver, as_node) -> None:
        opts = {"partial": Str("foo"), "collection": VarRef("@x"), "as": as_node}
        result = resolver.resolve(opts, "partial")
        assert isinstance(result, Resolved)
        assert result.value.local_name == "entry"

    def test_dynamic_as_gives_none(self, resolver) -> None:
        opts = {"partial": Str("foo"), "collection": VarRef("@x"), "as": VCall("name")}
        result = resolver.resolve(opts, "partial")
        assert isinstance(result, Resolved)
        assert result.value.local_name is None

    def test_plain_partial_has_no_local_name(self, resolver) -> None:
        result = resolver.resolve({"partial": Str("foo")}, "partial")
        assert isinstance(result, Resolved)
        assert result.value.local_name is None


class TestToVirtualPath:
    """Underscore marking of partials and layouts."""

    @pytest.mark.parametrize(
        ("render_type", "path", "expected"),
        [
            ("partial", "app/views/posts/foo", "app/views/posts/_foo"),
            ("partial", "foo", "_foo"),
            ("layout", "layouts/wide", "layouts/_wide"),
            ("layout", "bar", "_bar"),
            ("template", "posts/show", "posts/show"),
            (RENDERABLE, "Widgets::Card", "Widgets::Card"),
            ("partial", "./foo", "./_foo"),
        ],
    )
    def test_conversion(self, render_type: str, path: str, expected: str) -> None:
        assert to_virtual_path(render_type, path) == expected
