"""Render call sites as located by an upstream syntax-tree search."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from renderdeps.nodes.base import Node
from renderdeps.nodes.expressions import AnyExpr


@dataclass(frozen=True, slots=True)
class RenderCall(Node):
    """One render invocation: render(*argument_nodes)"""

    method_name: str
    argument_nodes: Sequence[AnyExpr] = ()


def group_render_calls(calls: Iterable[RenderCall]) -> dict[str, list[RenderCall]]:
    """Group call sites by method name.

    Methods keep the order of their first appearance and calls keep source
    order within each method, which is the order the extractor reports in.
    """
    grouped: dict[str, list[RenderCall]] = {}
    for call in calls:
        grouped.setdefault(call.method_name, []).append(call)
    return grouped
