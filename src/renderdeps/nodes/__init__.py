"""Syntax node vocabulary for render dependency extraction.

Nodes are frozen dataclasses; the extractor only reads them.
"""

from renderdeps.nodes.base import Node
from renderdeps.nodes.calls import RenderCall, group_render_calls
from renderdeps.nodes.expressions import (
    AnyExpr,
    Call,
    ClassCall,
    HashLit,
    Opaque,
    Str,
    Sym,
    VarRef,
    VCall,
)

__all__ = [
    "AnyExpr",
    "Call",
    "ClassCall",
    "HashLit",
    "Node",
    "Opaque",
    "RenderCall",
    "Str",
    "Sym",
    "VCall",
    "VarRef",
    "group_render_calls",
]
