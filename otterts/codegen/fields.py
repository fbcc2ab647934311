"""Field declaration composition for object-like records."""

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from otterts.codegen.ts import UNCONSTRAINED, comment

if TYPE_CHECKING:
    from otterts.codegen.transformer import TypeTransformer

__all__ = ['FieldComposer']

logger = logging.getLogger(__name__)


class FieldComposer:
    """Turns a name -> schema mapping into TypeScript field declarations.

    Each entry is either a schema node or an object wrapping one in `schema`
    (a parameter component, for instance); both shapes are accepted.

    Example:
        >>> composer.compose_fields(
        ...     {'id': {'type': 'integer'}, 'name': {'type': 'string'}},
        ...     required=['id'],
        ... )
        '"id": number;\\n"name"?: string;\\n'
    """

    def __init__(self, transformer: 'TypeTransformer'):
        self.transformer = transformer

    def compose_fields(
        self,
        properties: Mapping[str, Any],
        required: Iterable[str] | None = None,
    ) -> str:
        """Compose field declarations in the mapping's own order.

        Args:
            properties: Field name to schema (or schema-wrapping object).
            required: Names of required fields. None marks every field
                optional.

        Returns:
            Concatenated declarations, one per line.
        """
        required = set(required) if required is not None else set()
        output = ''

        for name, value in properties.items():
            value = value if isinstance(value, Mapping) else {}

            if value.get('description'):
                output += comment(value['description'])

            output += f'"{name}"{"" if name in required else "?"}: '

            schema = value['schema'] if value.get('schema') is not None else value
            type_ = self.transformer.transform(schema)
            if type_ == UNCONSTRAINED:
                message = f"Field '{name}' has no recognised type"
                logger.debug(message)
                self.transformer.warnings.append(message)

            if value.get('nullable'):
                output += f'({type_}) | null'
            else:
                output += type_

            output += ';\n'

        return output
