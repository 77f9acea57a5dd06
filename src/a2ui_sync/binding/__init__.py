"""Path resolution, string interpolation and value bindings."""

from .paths import get_value_by_path, resolve_path, set_value_by_path
from .interpolation import (
    CompiledTemplate,
    TemplateCompiler,
    compile_template,
    get_interpolation_dependencies,
    has_interpolation,
    interpolate,
    parse_interpolation,
)

__all__ = [
    "CompiledTemplate",
    "TemplateCompiler",
    "compile_template",
    "get_interpolation_dependencies",
    "get_value_by_path",
    "has_interpolation",
    "interpolate",
    "parse_interpolation",
    "resolve_path",
    "set_value_by_path",
]
