"""
String interpolation over a data model.

Templates embed ``${path}`` expressions; the path is absolute (``/user/name``)
or relative to a base path (``name``, ``./name``). A backslash escapes an
expression: ``\\${x}`` renders as the literal ``${x}``.

    >>> interpolate("Hello, ${/user/name}!", {"user": {"name": "John"}})
    'Hello, John!'
"""

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from ..core import get_logger
from ..core.cache import LRUCache
from ..core.json import canonical_json
from ..monitoring import metrics_collector
from .paths import get_value_by_path, resolve_path

logger = get_logger(__name__)

# ${...} not preceded by a backslash
INTERPOLATION_PATTERN = re.compile(r"(?<!\\)\$\{([^}]+)\}")
_ESCAPED = "\\${"


def _format_float(value: float) -> str:
    """Shortest round-trip text; exponent form only below 1e-6 or from 1e21 up."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{exponent[0]}{exponent[1:].lstrip('0')}"


def _integral_floats_as_ints(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    if isinstance(value, dict):
        return {key: _integral_floats_as_ints(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_integral_floats_as_ints(item) for item in value]
    return value


def stringify(value: Any) -> str:
    """Text form of a data model value as it appears inside a template."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (dict, list)):
        return canonical_json(_integral_floats_as_ints(value))
    return str(value)


@dataclass(frozen=True)
class CompiledTemplate:
    """
    A template split once into literal text and path expressions.

    ``parts`` alternates literal text (even indexes) and trimmed path
    expressions (odd indexes). Rendering always reads the data model passed in.
    """

    source: str
    parts: tuple[str, ...]

    @property
    def expressions(self) -> list[str]:
        return list(self.parts[1::2])

    @property
    def has_expressions(self) -> bool:
        return len(self.parts) > 1

    def render(self, data_model: Any, base_path: str | None = None) -> str:
        if not self.has_expressions:
            return self.source.replace(_ESCAPED, "${")

        chunks: list[str] = []
        for index, part in enumerate(self.parts):
            if index % 2 == 0:
                chunks.append(part)
            else:
                value = get_value_by_path(data_model, resolve_path(part, base_path))
                chunks.append(stringify(value))
        return "".join(chunks).replace(_ESCAPED, "${")

    def dependencies(self, base_path: str | None = None) -> list[str]:
        return [resolve_path(expr, base_path) for expr in self.expressions]


def compile_template(template: str) -> CompiledTemplate:
    """Split a template into literal and expression parts."""
    parts: list[str] = []
    cursor = 0
    for match in INTERPOLATION_PATTERN.finditer(template):
        parts.append(template[cursor:match.start()])
        parts.append(match.group(1).strip())
        cursor = match.end()
    parts.append(template[cursor:])
    return CompiledTemplate(source=template, parts=tuple(parts))


def has_interpolation(value: str) -> bool:
    """True iff value holds at least one unescaped ``${...}``."""
    return INTERPOLATION_PATTERN.search(value) is not None


def parse_interpolation(value: str) -> list[str]:
    """
    Trimmed path expressions in order of appearance; escaped ones are skipped.

        >>> parse_interpolation("Hi ${/user/name}, \\${skip} ${ count }")
        ['/user/name', 'count']
    """
    return [match.group(1).strip() for match in INTERPOLATION_PATTERN.finditer(value)]


def interpolate(template: str, data_model: Any, base_path: str | None = None) -> str:
    """
    Replace every unescaped ``${path}`` with its value in data_model.

    Absent or null values render as an empty string, objects and arrays as
    compact JSON, booleans as ``true``/``false``. Escaped expressions are
    unescaped afterwards.
    """
    return compile_template(template).render(data_model, base_path)


def get_interpolation_dependencies(template: str, base_path: str | None = None) -> list[str]:
    """Absolute paths a template reads, in order of appearance."""
    return [resolve_path(path, base_path) for path in parse_interpolation(template)]


class TemplateCompiler:
    """Per-provider cache of compiled templates."""

    def __init__(self, max_size: int = 256, ttl_seconds: int | None = None) -> None:
        self._cache: LRUCache[CompiledTemplate] = LRUCache(
            max_size=max_size,
            ttl_seconds=ttl_seconds,
        )

    def compile(self, template: str) -> CompiledTemplate:
        compiled = self._cache.get(template)
        if compiled is not None:
            metrics_collector.record_template_cache("hit")
            return compiled

        metrics_collector.record_template_cache("miss")
        compiled = compile_template(template)
        self._cache.set(template, compiled)
        logger.debug("template_compiled", expressions=len(compiled.expressions))
        return compiled

    def clear(self) -> None:
        self._cache.clear()

    @property
    def stats(self):
        """Get cache statistics."""
        return self._cache.stats


__all__ = [
    "INTERPOLATION_PATTERN",
    "CompiledTemplate",
    "TemplateCompiler",
    "compile_template",
    "get_interpolation_dependencies",
    "has_interpolation",
    "interpolate",
    "parse_interpolation",
    "stringify",
]
