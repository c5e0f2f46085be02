"""Virtual path construction for resolved templates."""

from __future__ import annotations

# Render types whose file name carries the underscore marker
_UNDERSCORED = frozenset({"partial", "layout"})


def to_virtual_path(render_type: str, path: str) -> str:
    """Map a resolved template path to its dependency identifier.

    Partials and layouts live in underscore-prefixed files, so the final
    path segment gains a leading ``_``. Templates and renderables are
    returned unchanged.

    Example:
            >>> to_virtual_path("partial", "app/views/posts/foo")
            'app/views/posts/_foo'
            >>> to_virtual_path("template", "posts/show")
            'posts/show'

    """
    if render_type not in _UNDERSCORED:
        return path
    head, sep, tail = path.rpartition("/")
    return f"{head}{sep}_{tail}"
