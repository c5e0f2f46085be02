"""Exceptions and rejection codes for renderdeps.

Exception Hierarchy:
RenderDepsError (base)
└── NodeContractError     # Upstream handed over something that is not a Node

Rejections are not exceptions. When a render invocation cannot be
interpreted safely the extractor drops it and records a ``RejectReason``;
only contract violations by the syntax-tree provider are raised.

Example:
    ```
    NodeContractError: Expected a renderdeps node in argument 0 of render
    at app/views/posts/index.html.erb:12, got dict
    ```

"""

from __future__ import annotations

from enum import Enum

# ---------------------------------------------------------------------------
# Rejection codes
# ---------------------------------------------------------------------------


class RejectReason(Enum):
    """Searchable codes for dropped render invocations.

    Format: R-{CATEGORY}-{NUMBER}
    Categories: ARG (argument shape), OPT (options), RES (path resolution)

    Example:
        >>> RejectReason.UNKNOWN_OPTION.category
        'options'
    """

    # Argument shape (R-ARG-xxx)
    UNSUPPORTED_ARGUMENTS = "R-ARG-001"
    NON_SYMBOL_KEY = "R-ARG-002"

    # Options (R-OPT-xxx)
    MISSING_RENDER_TYPE = "R-OPT-001"
    UNKNOWN_OPTION = "R-OPT-002"
    OBJECT_AND_COLLECTION = "R-OPT-003"
    PARTIAL_REQUIRED = "R-OPT-004"

    # Path resolution (R-RES-xxx)
    UNRESOLVED_EXPRESSION = "R-RES-001"
    EMPTY_PATH = "R-RES-002"

    @property
    def category(self) -> str:
        """Rejection category (e.g., 'arguments', 'options', 'resolve')."""
        prefix = self.value.split("-")[1]
        return {
            "ARG": "arguments",
            "OPT": "options",
            "RES": "resolve",
        }.get(prefix, "unknown")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class RenderDepsError(Exception):
    """Base exception for renderdeps."""


class NodeContractError(RenderDepsError, TypeError):
    """A syntax-tree provider broke the node contract.

    Raised when a render call carries an argument that is not one of the
    ``renderdeps.nodes`` variants. This is a defect upstream, so unlike a
    rejection it propagates to the caller.

    Attributes:
        value: The offending object.
        where: Human-readable location (method, argument index, file, line).
    """

    def __init__(self, value: object, where: str) -> None:
        self.value = value
        self.where = where
        super().__init__(
            f"Expected a renderdeps node in {where}, got {type(value).__name__}"
        )
