"""Static render dependency analysis.

Pipeline per render call:
1. **normalize_arguments**: positional arguments -> options mapping
2. **select_render_type**: reject unknown options, pick partial/template/layout
3. **TemplateResolver**: literal, renderable, or inflected object path
4. **to_virtual_path**: underscore-mark partials and layouts

``RenderParser`` runs the pipeline over every call in a file and flattens
the results in source order.
"""

from renderdeps.analysis.config import DEFAULT_CONFIG, ExtractorConfig
from renderdeps.analysis.extractor import RenderParser, extract_dependencies
from renderdeps.analysis.options import (
    ALL_KNOWN_KEYS,
    RENDER_TYPE_KEYS,
    RENDERABLE,
    normalize_arguments,
    select_render_type,
)
from renderdeps.analysis.paths import to_virtual_path
from renderdeps.analysis.resolver import TemplateReference, TemplateResolver
from renderdeps.analysis.result import Rejected, Resolved

__all__ = [
    "ALL_KNOWN_KEYS",
    "DEFAULT_CONFIG",
    "RENDERABLE",
    "RENDER_TYPE_KEYS",
    "ExtractorConfig",
    "Rejected",
    "RenderParser",
    "Resolved",
    "TemplateReference",
    "TemplateResolver",
    "extract_dependencies",
    "normalize_arguments",
    "select_render_type",
    "to_virtual_path",
]
