"""Render dependency extractor - entry point for one template file.

Combines argument normalization, option validation, path resolution and
virtual path construction into a single pass over a file's render calls.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from renderdeps.analysis.config import DEFAULT_CONFIG, ExtractorConfig
from renderdeps.analysis.options import Options, normalize_arguments, select_render_type
from renderdeps.analysis.paths import to_virtual_path
from renderdeps.analysis.resolver import TemplateResolver
from renderdeps.analysis.result import Rejected, Resolved
from renderdeps.exceptions import NodeContractError
from renderdeps.nodes import Node, RenderCall, Str

logger = logging.getLogger(__name__)


class RenderParser:
    """Extract the templates a view file renders.

    Takes the file name and its render call sites, grouped by method name,
    and returns the virtual paths of every partial, template and layout
    those calls depend on.

    Best-effort and conservative: a call whose shape can't be proven safe
    to interpret (unknown option, non-symbol key, odd argument count, ...)
    contributes nothing rather than a guess.

    Thread-safe: Holds only its inputs; each call builds fresh results.

    Example:
            >>> calls = {"render": [RenderCall("render", [Str("form")])]}
            >>> RenderParser("app/views/posts/new.html.erb", calls).render_calls()
            ['app/views/posts/_form']

    Ordering:
        - Methods in mapping order, calls in list order
        - Per call: spacer template, primary template, layout
        - Duplicates are kept

    """

    __slots__ = ("_config", "_name", "_render_nodes", "_resolver")

    def __init__(
        self,
        name: str,
        render_nodes: Mapping[str, Sequence[RenderCall]],
        config: ExtractorConfig | None = None,
    ) -> None:
        """Initialize parser for one file.

        Args:
            name: Identifier of the analyzed file, used for relative paths.
            render_nodes: Render call sites grouped by invoked method name.
            config: Extraction configuration. Uses DEFAULT_CONFIG if not provided.
        """
        self._name = name
        self._render_nodes = render_nodes
        self._config = config or DEFAULT_CONFIG
        self._resolver = TemplateResolver(name, self._config.inflector)

    @property
    def name(self) -> str:
        return self._name

    def render_calls(self) -> list[str]:
        """Return the virtual paths of every statically known render dependency."""
        renders: list[str] = []
        total = 0

        for calls in self._render_nodes.values():
            for call in calls:
                total += 1
                result = self.parse_render(call)
                if isinstance(result, Resolved):
                    renders.extend(result.value)

        logger.debug(
            f"{self._name}: {len(renders)} render dependencies from {total} calls"
        )
        return renders

    def parse_render(self, call: RenderCall) -> Resolved[list[str]] | Rejected:
        """Resolve one render call to its virtual paths, or say why not.

        Raises:
            NodeContractError: If the call carries something that is not a node.
        """
        args = self._checked_arguments(call)

        result = self._parse_render(args)
        if isinstance(result, Rejected):
            logger.debug(
                f"Skipping {call.method_name} at {self._name}:{call.lineno}: {result}"
            )
        return result

    def _parse_render(self, args: Sequence[Node]) -> Resolved[list[str]] | Rejected:
        options = normalize_arguments(args)
        if isinstance(options, Rejected):
            return options
        return self._parse_render_from_options(options.value)

    def _parse_render_from_options(self, options: Options) -> Resolved[list[str]] | Rejected:
        render_type = select_render_type(options)
        if isinstance(render_type, Rejected):
            return render_type

        reference = self._resolver.resolve(options, render_type.value)
        if isinstance(reference, Rejected):
            return reference
        template = reference.value

        renders: list[str] = []

        spacer = options.get("spacer_template")
        if isinstance(spacer, Str):
            spacer_path = self._resolver.resolve_path_directory(spacer.value)
            renders.append(to_virtual_path("partial", spacer_path))

        renders.append(to_virtual_path(template.render_type, template.path))

        # A partial or template wrapped in a layout depends on both
        layout = options.get("layout")
        if template.render_type != "layout" and isinstance(layout, Str):
            layout_path = layout.value
            if self._config.resolve_layout_directory:
                layout_path = self._resolver.resolve_path_directory(layout_path)
            renders.append(to_virtual_path("layout", layout_path))

        return Resolved(renders)

    def _checked_arguments(self, call: RenderCall) -> Sequence[Node]:
        if not isinstance(call, RenderCall):
            raise NodeContractError(call, f"render calls of {self._name}")
        args = call.argument_nodes
        for index, arg in enumerate(args):
            if not isinstance(arg, Node):
                raise NodeContractError(
                    arg,
                    f"argument {index} of {call.method_name} at {self._name}:{call.lineno}",
                )
        return args


def extract_dependencies(
    name: str,
    render_nodes: Mapping[str, Sequence[RenderCall]],
    config: ExtractorConfig | None = None,
) -> list[str]:
    """Return the render dependencies of one file.

    Shorthand for ``RenderParser(name, render_nodes, config).render_calls()``.
    """
    return RenderParser(name, render_nodes, config).render_calls()
