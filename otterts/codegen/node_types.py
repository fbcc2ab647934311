"""Derivation of the variant a schema node belongs to.

A schema node never stores its kind explicitly. The kind is derived from the
combination of keys present, and when several apply (an `enum` next to a
`oneOf`, say) the first match in the precedence below governs the node. All
branching on key presence lives in `node_type` so the order can be audited
and tested in one place.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

__all__ = ['NodeType', 'node_type']


class NodeType(str, Enum):
    ENUM = 'enum'
    ONE_OF = 'oneOf'
    ANY_OF = 'anyOf'
    OBJECT = 'object'
    ARRAY = 'array'
    REF = 'ref'
    STRING = 'string'
    NUMBER = 'number'
    BOOLEAN = 'boolean'
    UNKNOWN = 'unknown'


_OBJECT_KEYS = ('allOf', 'properties', 'additionalProperties')

_DECLARED_TYPES = {
    'string': NodeType.STRING,
    'boolean': NodeType.BOOLEAN,
    'integer': NodeType.NUMBER,
    'number': NodeType.NUMBER,
    'object': NodeType.OBJECT,
}


def node_type(node: Any) -> NodeType:
    """Return the variant governing `node`.

    Precedence: enum > oneOf > anyOf > object structure (allOf, properties,
    additionalProperties) > array > $ref > declared primitive type.
    """
    if not isinstance(node, Mapping) or not node:
        return NodeType.UNKNOWN

    if isinstance(node.get('enum'), list):
        return NodeType.ENUM
    if isinstance(node.get('oneOf'), list):
        return NodeType.ONE_OF
    if isinstance(node.get('anyOf'), list):
        return NodeType.ANY_OF
    if any(key in node for key in _OBJECT_KEYS):
        return NodeType.OBJECT
    if node.get('type') == 'array' or 'items' in node:
        return NodeType.ARRAY
    if isinstance(node.get('$ref'), str):
        return NodeType.REF

    declared = node.get('type')
    if isinstance(declared, str):
        return _DECLARED_TYPES.get(declared, NodeType.UNKNOWN)
    return NodeType.UNKNOWN
