"""Reference handling for schema documents.

This module provides two independent capabilities:

- ReferenceResolver turns a `$ref` string into the TypeScript path expression
  that addresses the referenced declaration, and records every external
  document it sees so that import declarations can be synthesized later.
- ComponentLookup walks a `$ref` pointer through the live input document to
  read fields of the referenced object (a parameter's `in`, `name` and
  `required`, for instance). It never rewrites anything.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

__all__ = ['ComponentLookup', 'ReferenceResolver', 'document_key']

logger = logging.getLogger(__name__)

_SCHEMA_FILE_SUFFIX = re.compile(r'\.(json|ya?ml)$')


def _unescape(segment: str) -> str:
    return segment.replace('~1', '/').replace('~0', '~')


def _index(segments: list[str]) -> str:
    return ''.join(f'["{_unescape(segment)}"]' for segment in segments)


def document_key(document: str) -> str:
    """Strip the schema file extension from an external document name."""
    return _SCHEMA_FILE_SUFFIX.sub('', document)


class ReferenceResolver:
    """Converts `$ref` strings into TypeScript lookup expressions.

    Internal references address the generated declarations:

        >>> resolver = ReferenceResolver()
        >>> resolver.resolve_ref('#/components/schemas/Pet')
        'components["schemas"]["Pet"]'

    External references address the `external` type alias produced by
    `synthesize_imports` and register their document key:

        >>> resolver.resolve_ref('other.json#/Widget')
        'external["other"]["Widget"]'
        >>> resolver.external_keys
        ['other']
    """

    def __init__(self):
        # dict keeps first-discovery order and makes registration idempotent
        self._external_keys: dict[str, None] = {}

    @property
    def external_keys(self) -> list[str]:
        """Distinct external document keys in first-discovery order."""
        return list(self._external_keys)

    def resolve_ref(self, ref: str, root: str = '') -> str:
        """Return the path expression for `ref`.

        Args:
            ref: The `$ref` string.
            root: Prefix placed before the in-document path of internal
                references (`'schemas/'` in raw-schema mode).
        """
        if ref.startswith('#'):
            return self._resolve_internal(ref, root)
        return self._resolve_external(ref)

    def _resolve_internal(self, ref: str, root: str) -> str:
        path = root + ref[1:].lstrip('/')
        head, *rest = path.split('/')
        return head + _index(rest)

    def _resolve_external(self, ref: str) -> str:
        relative_path, _, internal_path = ref.partition('#/')
        key = document_key(relative_path)
        if key not in self._external_keys:
            logger.debug(f'Registered external document: {key}')
            self._external_keys[key] = None

        expression = f'external["{key}"]'
        if internal_path:
            expression += _index(internal_path.split('/'))
        return expression


class ComponentLookup:
    """Read-only access to objects addressed by internal `$ref` pointers.

    Example:
        >>> lookup = ComponentLookup(document)
        >>> lookup.resolve('#/components/parameters/limit')
        {'name': 'limit', 'in': 'query', ...}
    """

    def __init__(self, document: Mapping[str, Any]):
        self.document = document

    def resolve(self, ref: str) -> Any | None:
        """Return the object `ref` points to, or None if it cannot be found.

        External references are never resolved; there is no I/O here.
        """
        if not ref.startswith('#'):
            return None

        current: Any = self.document
        for part in ref[1:].strip('/').split('/'):
            if not part:
                continue
            part = _unescape(part)
            if isinstance(current, Mapping):
                if part not in current:
                    return None
                current = current[part]
            elif isinstance(current, list):
                try:
                    current = current[int(part)]
                except (ValueError, IndexError):
                    return None
            else:
                return None
        return current

    def is_required(self, ref: str) -> bool:
        """Whether the component `ref` points to declares `required: true`."""
        target = self.resolve(ref)
        return isinstance(target, Mapping) and target.get('required') is True
