import json
import math
from typing import Any, Mapping

from .errors import UnsupportedPropertyTypeError


def _render_value(key: str, value: Any) -> str:
    # bool is checked before int since it is a subclass of it.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float) and math.isfinite(value):
        return repr(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_render_value(key, v) for v in value) + "]"
    raise UnsupportedPropertyTypeError(key, value)


def properties_to_inline_string(properties: Mapping[str, Any]) -> str:
    """Render a flat mapping as inline Cypher properties.

    ``{"name": "A", "grade": 9}`` becomes ``name:"A", grade:9``. Key order
    follows the mapping.
    """
    return ", ".join(f"{k}:{_render_value(k, v)}" for k, v in properties.items())


def properties_to_parameter_refs(param_name: str, properties: Mapping[str, Any]) -> str:
    """Render keys as references into a parameter map: ``name:{student}.name``."""
    return ", ".join(f"{k}:{{{param_name}}}.{k}" for k in properties)


def properties_to_set_clauses(
    variable: str, param_name: str, properties: Mapping[str, Any]
) -> str:
    """Render one indented ``SET variable.key = {param_name}.key`` line per key.

    The query must pass a parameter named ``param_name`` holding the values.
    """
    return "\n".join(
        f"  SET {variable}.{k} = {{{param_name}}}.{k}" for k in properties
    )
