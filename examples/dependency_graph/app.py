"""Dependency graph -- render edges for a handful of views.

The syntax trees below stand in for what a view parser would hand over:
render call sites of each file, in source order. The extractor turns each
file's calls into the partials, templates and layouts it depends on.

Run:
    python app.py
"""

from renderdeps import (
    HashLit,
    Opaque,
    RenderCall,
    Str,
    Sym,
    VarRef,
    extract_dependencies,
    group_render_calls,
)


def hash_(**entries):
    return HashLit([(Sym(key), value) for key, value in entries.items()])


VIEWS = {
    "app/views/posts/index.html.erb": [
        # <%= render "search" %>
        RenderCall("render", [Str("search")], lineno=1),
        # <%= render partial: "post", collection: @posts, spacer_template: "divider" %>
        RenderCall(
            "render",
            [
                hash_(
                    partial=Str("post"),
                    collection=VarRef("@posts"),
                    spacer_template=Str("divider"),
                )
            ],
            lineno=3,
        ),
        # <%= render "shared/pagination", pages: @pages %>
        RenderCall("render", [Str("shared/pagination"), hash_(pages=VarRef("@pages"))], lineno=5),
    ],
    "app/views/posts/show.html.erb": [
        # <%= render @post %>
        RenderCall("render", [VarRef("@post")], lineno=1),
        # <%= render partial: "comments/form", layout: "boxed" %>
        RenderCall(
            "render",
            [hash_(partial=Str("comments/form"), layout=Str("boxed"))],
            lineno=2,
        ),
        # <%= render partial: "sidebar", cached: true %>  (unknown option: skipped)
        RenderCall("render", [hash_(partial=Str("sidebar"), cached=Opaque("true"))], lineno=4),
    ],
}

graph = {
    name: extract_dependencies(name, group_render_calls(calls))
    for name, calls in VIEWS.items()
}


def main() -> None:
    for name, dependencies in graph.items():
        print(name)
        for dependency in dependencies:
            print(f"  -> {dependency}")


if __name__ == "__main__":
    main()
