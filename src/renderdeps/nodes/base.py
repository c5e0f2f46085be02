"""Base node class for render-call syntax trees."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all syntax nodes handed to the extractor.

    Nodes track their source location for debug logging.
    Nodes are immutable for thread-safety.

    """

    lineno: int = field(default=0, kw_only=True)
    col_offset: int = field(default=0, kw_only=True)
