"""
Canonical JSON as it goes on the wire: compact separators, non-ASCII verbatim,
insertion order kept. Integral floats are written as integers (1.0 -> 1), the
way a JavaScript peer serializes numbers.
"""

from __future__ import annotations

import json
from collections.abc import Mapping

from ..errors import InvalidInput

# JavaScript writes numbers from 1e21 up in exponent notation.
_JS_EXPONENT_FROM = 1e21


def _is_js_integer(x: float) -> bool:
    return x.is_integer() and abs(x) < _JS_EXPONENT_FROM


def _normalize(obj: object) -> object:
    if isinstance(obj, float) and _is_js_integer(obj):
        return int(obj)
    if isinstance(obj, Mapping):
        return {k: _normalize(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_normalize(v) for v in obj]
    return obj


def canonical_json(obj: object) -> str:
    """
    Serialize obj exactly as it is hashed and shipped.

    Args:
        obj: JSON-compatible value (dicts, lists, str, int, float, bool, None).

    Returns:
        Compact JSON text.
    """
    try:
        return json.dumps(
            _normalize(obj),
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"Value is not JSON-serializable: {exc}") from exc


def template_value(value: object) -> str:
    """Render a scalar for a dash-joined base message (numbers as JSON writes them)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and _is_js_integer(value):
        return str(int(value))
    return str(value)


__all__: tuple[str, ...] = ("canonical_json", "template_value")
