"""Argument normalization and option validation for render calls.

Turns the positional arguments of one render call into an options mapping
and picks the render type. Both steps fail closed: any shape the extractor
cannot reason about statically is rejected rather than guessed at.
"""

from __future__ import annotations

from collections.abc import Sequence

from renderdeps.analysis.result import Rejected, Resolved
from renderdeps.exceptions import RejectReason
from renderdeps.nodes import ClassCall, HashLit, Node, Sym

# Options a render call may carry and still be analyzed
ALL_KNOWN_KEYS: frozenset[str] = frozenset(
    {
        "partial",
        "template",
        "layout",
        "formats",
        "locals",
        "object",
        "collection",
        "as",
        "status",
        "content_type",
        "location",
        "spacer_template",
    }
)

# Render types in priority order
RENDER_TYPE_KEYS: tuple[str, ...] = ("partial", "template", "layout")

# Synthetic render type for render(SomeComponent.new); never accepted from source
RENDERABLE = "renderable"

Options = dict[str, Node]


def normalize_arguments(args: Sequence[Node]) -> Resolved[Options] | Rejected:
    """Convert render's positional arguments into an options mapping.

    - ``render("foo")`` -> ``{partial: "foo"}``
    - ``render("foo", {...})`` -> ``{partial: "foo", locals: {...}}``
    - ``render(Card.new)`` -> ``{renderable: Card.new}``
    - ``render(partial: "foo", ...)`` -> the hash, keyed by symbol name
    """
    if len(args) in (1, 2) and not isinstance(args[0], HashLit):
        primary = args[0]
        if isinstance(primary, ClassCall):
            return Resolved({RENDERABLE: primary})
        if len(args) == 2:
            return Resolved({"partial": primary, "locals": args[1]})
        return Resolved({"partial": primary})

    if len(args) == 1:
        return _hash_to_options(args[0])

    return Rejected(RejectReason.UNSUPPORTED_ARGUMENTS, f"{len(args)} argument(s)")


def _hash_to_options(node: HashLit) -> Resolved[Options] | Rejected:
    """Key a mapping literal by symbol name; one non-symbol key rejects all."""
    options: Options = {}
    for key, value in node.pairs:
        match key:
            case Sym(value=name) if name != RENDERABLE:
                options[name] = value
            case Sym():
                return Rejected(RejectReason.UNKNOWN_OPTION, RENDERABLE)
            case _:
                return Rejected(RejectReason.NON_SYMBOL_KEY, type(key).__name__)
    return Resolved(options)


def select_render_type(options: Options) -> Resolved[str] | Rejected:
    """Pick the render type, or reject an options mapping we can't trust.

    Priority is ``partial``, ``template``, ``layout``; lower-priority keys
    stay in the mapping. The synthetic ``renderable`` key is not a render
    type, so ``render(Card.new)`` names no template.
    """
    present = [key for key in RENDER_TYPE_KEYS if key in options]
    if not present:
        return Rejected(RejectReason.MISSING_RENDER_TYPE)

    unknown = sorted(options.keys() - ALL_KNOWN_KEYS)
    if unknown:
        return Rejected(RejectReason.UNKNOWN_OPTION, ", ".join(unknown))

    return Resolved(present[0])
