"""renderdeps: static render dependency extraction for view templates.

Finds every ``render`` call in a view file and works out, without running
anything, which partials, templates and layouts it pulls in. The result is
an ordered list of virtual paths for cache-key digests or a render
dependency graph.

Quickstart:
    >>> from renderdeps import RenderCall, RenderParser, Str, Sym, HashLit
    >>> calls = {
    ...     "render": [
    ...         RenderCall("render", [Str("form")]),
    ...         RenderCall("render", [HashLit([(Sym("partial"), Str("shared/nav"))])]),
    ...     ]
    ... }
    >>> RenderParser("app/views/posts/new.html.erb", calls).render_calls()
    ['app/views/posts/_form', 'shared/_nav']

Architecture:
View Source → Parser (external) → Render call search (external) → RenderParser → virtual paths

Soundness over recall:
A call the extractor can't interpret safely is dropped, never guessed at.
Rejections are logged at DEBUG on the ``renderdeps`` logger; only a broken
node contract raises (``NodeContractError``).

Thread-Safety:
Extraction is a pure function of its inputs. Key sets are frozen module
constants and nodes are frozen dataclasses, so files can be analyzed on
any number of threads without coordination.

"""

from renderdeps.analysis import (
    DEFAULT_CONFIG,
    ExtractorConfig,
    Rejected,
    RenderParser,
    Resolved,
    extract_dependencies,
)
from renderdeps.exceptions import NodeContractError, RejectReason, RenderDepsError
from renderdeps.inflector import DefaultInflector, Inflector
from renderdeps.nodes import (
    Call,
    ClassCall,
    HashLit,
    Node,
    Opaque,
    RenderCall,
    Str,
    Sym,
    VarRef,
    VCall,
    group_render_calls,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "Call",
    "ClassCall",
    "DefaultInflector",
    "ExtractorConfig",
    "HashLit",
    "Inflector",
    "Node",
    "NodeContractError",
    "Opaque",
    "RejectReason",
    "Rejected",
    "RenderCall",
    "RenderDepsError",
    "RenderParser",
    "Resolved",
    "Str",
    "Sym",
    "VCall",
    "VarRef",
    "__version__",
    "extract_dependencies",
    "group_render_calls",
]


# Free-threading declaration (PEP 703)
def __getattr__(name: str) -> object:
    """Module-level getattr for free-threading declaration."""
    if name == "_Py_mod_gil":
        # 0 = Py_MOD_GIL_NOT_USED
        return 0
    raise AttributeError(f"module 'renderdeps' has no attribute {name!r}")
