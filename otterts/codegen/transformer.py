"""Schema node to TypeScript type expression transformation.

This module provides TypeTransformer, the recursive function at the heart of
the generator. It is total over the schema grammar: any node it does not
recognise yields UNCONSTRAINED instead of raising.
"""

from collections.abc import Mapping
from typing import Any

from otterts.codegen.fields import FieldComposer
from otterts.codegen.node_types import NodeType, node_type
from otterts.codegen.references import ReferenceResolver
from otterts.codegen.ts import (
    ANY,
    OPEN_MAP,
    UNCONSTRAINED,
    ts_array_of,
    ts_intersection_of,
    ts_literal,
    ts_partial,
    ts_record_of,
    ts_tuple_of,
    ts_union_of,
)

__all__ = ['TypeTransformer']


class TypeTransformer:
    """Transforms schema nodes into TypeScript type expressions.

    Example:
        >>> transformer = TypeTransformer(ReferenceResolver())
        >>> transformer.transform({'type': 'array', 'items': {'type': 'integer'}})
        '(number)[]'
        >>> transformer.transform({'enum': ['a', 'b']})
        "('a') | ('b')"

    Attributes:
        resolver: Resolver used for `$ref` nodes. Shared with the other
            composers so that external documents are collected once.
        root: Prefix for internal references, `'schemas/'` in raw-schema mode.
        fields: The FieldComposer used for object properties.
        warnings: Shared list receiving descriptions of degraded input.
    """

    def __init__(
        self,
        resolver: ReferenceResolver,
        root: str = '',
        warnings: list[str] | None = None,
    ):
        self.resolver = resolver
        self.root = root
        self.warnings = warnings if warnings is not None else []
        self.fields = FieldComposer(self)
        self._handlers = {
            NodeType.REF: self._transform_ref,
            NodeType.STRING: self._transform_primitive,
            NodeType.NUMBER: self._transform_primitive,
            NodeType.BOOLEAN: self._transform_primitive,
            NodeType.ENUM: self._transform_enum,
            NodeType.ONE_OF: self._transform_one_of,
            NodeType.ANY_OF: self._transform_any_of,
            NodeType.OBJECT: self._transform_object,
            NodeType.ARRAY: self._transform_array,
        }

    def transform(self, node: Any) -> str:
        """Return the type expression for `node`, or UNCONSTRAINED."""
        handler = self._handlers.get(node_type(node))
        if handler is None:
            return UNCONSTRAINED
        return handler(node)

    def _transform_ref(self, node: Mapping) -> str:
        return self.resolver.resolve_ref(node['$ref'], self.root)

    def _transform_primitive(self, node: Mapping) -> str:
        return node_type(node).value

    def _transform_enum(self, node: Mapping) -> str:
        return ts_union_of(ts_literal(value) for value in node['enum'])

    def _transform_one_of(self, node: Mapping) -> str:
        return ts_union_of(self.transform(member) for member in node['oneOf'])

    def _transform_any_of(self, node: Mapping) -> str:
        # Approximates "any subset of these shapes" by intersecting
        # all-optional copies of each member.
        return ts_intersection_of(
            ts_partial(self.transform(member)) for member in node['anyOf']
        )

    def _transform_object(self, node: Mapping) -> str:
        properties = node.get('properties') or {}
        all_of = node.get('allOf') or []
        additional = node.get('additionalProperties')
        # an empty schema ({}) allows any extra keys, same as true
        has_additional = additional is not None and additional is not False

        if not properties and not all_of and not has_additional:
            return OPEN_MAP

        members = [self.transform(member) for member in all_of]
        if properties:
            members.append(
                f'{{ {self.fields.compose_fields(properties, node.get("required"))} }}'
            )
        if has_additional:
            value_type = ANY if additional is True else self.transform(additional)
            members.append(ts_record_of(value_type or ANY))
        return ts_intersection_of(members)

    def _transform_array(self, node: Mapping) -> str:
        items = node.get('items')
        if isinstance(items, list):
            return ts_tuple_of(self.transform(item) for item in items)
        if items:
            return ts_array_of(self.transform(items) or ANY)
        return ts_array_of(ANY)
