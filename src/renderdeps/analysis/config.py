"""Configuration for render dependency extraction."""

from __future__ import annotations

from dataclasses import dataclass, field

from renderdeps.inflector import DefaultInflector, Inflector


@dataclass(frozen=True, slots=True)
class ExtractorConfig:
    """Knobs for ``RenderParser``.

    The option key sets are fixed and are not configurable; only the
    collaborators and the layout resolution policy are.

    Attributes:
        inflector: Pluralize/singularize service for object-template paths.
        resolve_layout_directory: Resolve a ``layout:`` companion against the
            current directory like the primary path. Off by default, so
            ``layout: "bar"`` yields ``_bar``.

    Example:
            >>> from renderdeps import HashLit, RenderCall, Str, Sym, extract_dependencies
            >>> call = RenderCall("render", [HashLit([(Sym("partial"), Str("form")), (Sym("layout"), Str("boxed"))])])
            >>> config = ExtractorConfig(resolve_layout_directory=True)
            >>> extract_dependencies("app/views/posts/new.html.erb", {"render": [call]}, config)
            ['app/views/posts/_form', 'app/views/posts/_boxed']

    """

    inflector: Inflector = field(default_factory=DefaultInflector)
    resolve_layout_directory: bool = False


DEFAULT_CONFIG = ExtractorConfig()
