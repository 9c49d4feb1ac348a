from .comments import description_lines, render_description
from .declarations import (
    apply_override,
    is_optional,
    render_interface,
    render_method_parameters,
    render_methods,
    render_schema,
    render_type,
)
from .optional import looks_optional

__all__ = [
    "apply_override",
    "description_lines",
    "is_optional",
    "looks_optional",
    "render_description",
    "render_interface",
    "render_method_parameters",
    "render_methods",
    "render_schema",
    "render_type",
]
