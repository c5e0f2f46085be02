"""Expression nodes understood by the render dependency extractor.

The set is closed: an upstream parser maps every argument expression it
finds onto one of these variants. Anything the extractor never needs to
look inside becomes ``Opaque``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from renderdeps.nodes.base import Node


@dataclass(frozen=True, slots=True)
class Str(Node):
    """String literal: "posts/post" """

    value: str


@dataclass(frozen=True, slots=True)
class Sym(Node):
    """Symbol literal: :partial, or the label in ``partial: "x"``"""

    value: str


@dataclass(frozen=True, slots=True)
class HashLit(Node):
    """Mapping literal: { partial: "x", locals: {...} }"""

    pairs: Sequence[tuple[AnyExpr, AnyExpr]] = ()


@dataclass(frozen=True, slots=True)
class Call(Node):
    """Method call with a receiver or arguments: @post.comments, find(1)"""

    method: str
    receiver: AnyExpr | None = None
    args: Sequence[AnyExpr] = ()


@dataclass(frozen=True, slots=True)
class ClassCall(Node):
    """Call on a constant: Widgets::Card.new(title: "x")"""

    class_name: str
    method: str = "new"
    args: Sequence[AnyExpr] = ()


@dataclass(frozen=True, slots=True)
class VarRef(Node):
    """Variable reference: post, @post, @@post, $post"""

    name: str


@dataclass(frozen=True, slots=True)
class VCall(Node):
    """Bare identifier that may be a local or a method: post"""

    name: str


@dataclass(frozen=True, slots=True)
class Opaque(Node):
    """Any other expression (numbers, arrays, blocks); never inspected."""

    source: str = ""


# Every argument node variant; RenderCall arguments are drawn from this set
AnyExpr = Str | Sym | HashLit | Call | ClassCall | VarRef | VCall | Opaque
