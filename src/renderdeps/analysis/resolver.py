"""Template path resolution for validated render options.

Determines which template a render call names: a literal path, the class
behind a renderable, or, for ``render @post`` style calls, a path guessed
from the expression's name through inflection.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import PurePosixPath

from renderdeps.analysis.options import RENDERABLE, Options
from renderdeps.analysis.result import Rejected, Resolved
from renderdeps.exceptions import RejectReason
from renderdeps.inflector import Inflector
from renderdeps.nodes import Call, ClassCall, Node, Str, Sym, VarRef, VCall

# Leading sigil of global, instance, and class variables
_SIGIL_RE = re.compile(r"\A(?:\$|@{1,2})")

# "_post.html.erb" -> "post"
_LOCAL_NAME_RE = re.compile(r"\A_?(.*?)(?:\.\w+)*\Z")


@dataclass(frozen=True, slots=True)
class TemplateReference:
    """A render call's primary template.

    Attributes:
        render_type: ``partial``, ``template``, ``layout`` or ``renderable``.
        path: Resolved template path, before virtual path conversion.
        dynamic: True when the path was guessed from an expression name.
        local_name: Local variable the partial sees its object/collection
            item as. Informational only; never becomes a dependency.
    """

    render_type: str
    path: str
    dynamic: bool = False
    local_name: str | None = None


class TemplateResolver:
    """Resolve template paths relative to the file being analyzed.

    Thread-safe: holds only the file's directory and the inflector.

    Example:
            >>> from renderdeps.inflector import DefaultInflector
            >>> resolver = TemplateResolver("app/views/posts/index.html.erb", DefaultInflector())
            >>> resolver.resolve_path_directory("form")
            'app/views/posts/form'
            >>> resolver.resolve_path_directory("shared/form")
            'shared/form'

    """

    __slots__ = ("_directory", "_inflector")

    def __init__(self, name: str, inflector: Inflector) -> None:
        self._directory = str(PurePosixPath(name).parent)
        self._inflector = inflector

    @property
    def directory(self) -> str:
        """Directory of the analyzed file ("." for a bare file name)."""
        return self._directory

    def resolve_path_directory(self, path: str) -> str:
        """Prefix a bare template name with the current directory."""
        if "/" in path:
            return path
        return f"{self._directory}/{path}"

    def resolve(self, options: Options, render_type: str) -> Resolved[TemplateReference] | Rejected:
        """Resolve the template named by ``options[render_type]``."""
        node = options[render_type]
        dynamic = False

        match node:
            case Str(value=value):
                path = self.resolve_path_directory(value)
            case ClassCall(class_name=class_name) if render_type == RENDERABLE:
                path = class_name
            case _:
                dependency = _expression_name(node)
                if dependency is None:
                    return Rejected(RejectReason.UNRESOLVED_EXPRESSION, type(node).__name__)
                if not dependency:
                    return Rejected(RejectReason.EMPTY_PATH, "expression has no name")
                dynamic = True
                path = (
                    f"{self._inflector.pluralize(dependency)}/"
                    f"{self._inflector.singularize(dependency)}"
                )

        if not path:
            return Rejected(RejectReason.EMPTY_PATH, type(node).__name__)

        local_name: str | None = None
        if "object" in options or "collection" in options or dynamic:
            if "object" in options and "collection" in options:
                return Rejected(RejectReason.OBJECT_AND_COLLECTION)
            if "partial" not in options:
                return Rejected(RejectReason.PARTIAL_REQUIRED, f"render type {render_type}")
            local_name = _local_name(options, path)

        return Resolved(TemplateReference(render_type, path, dynamic, local_name))


def _expression_name(node: Node) -> str | None:
    """Name of a dynamic render target, or None if it has no usable name."""
    match node:
        case VarRef(name=name):
            return _SIGIL_RE.sub("", name)
        case VCall(name=name):
            return name
        case Call(method=method):
            return method
        case _:
            return None


def _local_name(options: Options, path: str) -> str | None:
    """Local variable name for an object/collection partial."""
    if "as" in options:
        match options["as"]:
            case Str(value=value) | Sym(value=value):
                return value
            case _:
                return None

    match = _LOCAL_NAME_RE.match(PurePosixPath(path).name)
    return match.group(1) if match else None
