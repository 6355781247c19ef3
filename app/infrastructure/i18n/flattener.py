"""Flattening of nested translation structures into bundles."""

import json
from typing import Any, Mapping

from infrastructure.i18n.models import (
    Bundle,
    ObjectNode,
    ScalarNode,
    SequenceNode,
    to_node,
)

KEY_DELIMITER = "."


def stringify(value: Any) -> str:
    """Render a leaf value as variant text.

    Strings pass through unchanged; anything else is rendered as compact
    JSON (true, null, 1.5, [1,2]) and, failing that, with str().

    The output is JSON text, not a Go-style %v rendering: a decoded 1.0
    stays "1.0" rather than "1", null is "null" rather than "<nil>", and
    objects keep their JSON form rather than map[k:v].
    """
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError):
        return str(value)


def flatten(structure: Mapping[str, Any]) -> Bundle:
    """Flatten a decoded JSON object into a bundle.

    {"hello": {"world": "Hi"}, "bye": ["Bye", "Ciao"]} becomes
    {"hello.world": ["Hi"], "bye": ["Bye", "Ciao"]}.

    Colliding dotted keys resolve to the last one written in source order.
    Empty arrays produce no key.

    Args:
        structure: Decoded JSON object.

    Returns:
        Bundle mapping dotted keys to variants. Non-object input yields an
        empty bundle.
    """
    node = to_node(structure)
    if not isinstance(node, ObjectNode):
        return {}
    return flatten_node(node)


def flatten_node(node: ObjectNode) -> Bundle:
    """Flatten an already classified object node."""
    bundle: Bundle = {}
    for key, child in node.fields:
        if isinstance(child, ObjectNode):
            for sub_key, variants in flatten_node(child).items():
                bundle[f"{key}{KEY_DELIMITER}{sub_key}"] = variants
        elif isinstance(child, SequenceNode):
            if child.items:
                bundle[key] = [stringify(item) for item in child.items]
        elif isinstance(child, ScalarNode):
            bundle[key] = [stringify(child.value)]
    return bundle
