"""Parameter block composition for operations and path items.

This module provides the ParameterComposer class that groups OpenAPI
parameter definitions by location (query, path, header, cookie) and renders
them as a nested `parameters` record.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from otterts.codegen.references import ComponentLookup
from otterts.codegen.transformer import TypeTransformer
from otterts.codegen.ts import comment

__all__ = ['ParameterComposer', 'ParameterField']

logger = logging.getLogger(__name__)


@dataclass
class ParameterField:
    """One rendered parameter slot.

    Attributes:
        type: The value type text (a reference expression for `$ref`
            parameters).
        required: Whether the field is emitted without `?`.
        description: Optional doc comment text.
    """

    type: str
    required: bool = False
    description: str | None = None

    def render(self, name: str) -> str:
        output = comment(self.description) if self.description else ''
        return f'{output}"{name}"{"" if self.required else "?"}: {self.type};\n'


class ParameterComposer:
    """Renders parameter lists grouped by their `in` location.

    Referenced parameters (`{'$ref': '#/components/parameters/limit'}`) are
    looked up in the document only to find where they belong and whether
    they are required; the emitted field type stays the reference expression.

    Example:
        >>> composer = ParameterComposer(transformer, ComponentLookup(document))
        >>> print(composer.compose_parameters([
        ...     {'name': 'id', 'in': 'path', 'required': True,
        ...      'schema': {'type': 'string'}},
        ... ]))
        parameters: {
        "path": {
        "id": string;
        }
        }
    """

    def __init__(self, transformer: TypeTransformer, lookup: ComponentLookup):
        self.transformer = transformer
        self.lookup = lookup

    def compose_parameters(self, parameters: Iterable[Any]) -> str:
        """Render `parameters` as a location-grouped `parameters` block.

        Later parameters with the same location and name replace earlier ones.
        """
        grouped = self.group_parameters(parameters)

        output = 'parameters: {\n'
        for location, fields in grouped.items():
            output += f'"{location}": {{\n'
            for name, field in fields.items():
                output += field.render(name)
            output += '}\n'
        output += '}\n'
        return output

    def group_parameters(
        self, parameters: Iterable[Any]
    ) -> dict[str, dict[str, ParameterField]]:
        grouped: dict[str, dict[str, ParameterField]] = {}

        for parameter in parameters or []:
            if not isinstance(parameter, Mapping):
                continue

            if '$ref' in parameter:
                resolved = self._resolve_ref_parameter(parameter['$ref'])
                if resolved is None:
                    continue
                location, name, field = resolved
            else:
                location = parameter.get('in')
                name = parameter.get('name')
                field = ParameterField(
                    type=self.transformer.transform(parameter.get('schema')),
                    required=parameter.get('required') is True,
                    description=parameter.get('description'),
                )

            if not location or not name:
                self._warn(f'Skipping parameter without name or location: {parameter}')
                continue

            grouped.setdefault(location, {})[name] = field

        return grouped

    def _resolve_ref_parameter(
        self, ref: str
    ) -> tuple[str, str, ParameterField] | None:
        target = self.lookup.resolve(ref)
        if not isinstance(target, Mapping) or not target.get('in') or not target.get('name'):
            self._warn(f"Could not resolve parameter reference '{ref}'")
            return None

        field = ParameterField(
            type=self.transformer.resolver.resolve_ref(ref),
            required=self.lookup.is_required(ref),
        )
        return target['in'], target['name'], field

    def _warn(self, message: str) -> None:
        logger.warning(message)
        self.transformer.warnings.append(message)
