"""Top-level assembly of TypeScript declarations from a schema document.

This module ties the transformer and composers together. Every call to
`TypeScriptGenerator.generate` builds a fresh generation context (reference
resolver, operations table, warnings) so that concurrent or repeated calls
never share state, and the input document is only ever read.

Example:
    >>> from otterts.codegen.generator import generate_types
    >>> print(generate_types({'components': {'schemas': {'Id': {'type': 'string'}}}}))
    export interface operations {
    <BLANKLINE>
    }
    <BLANKLINE>
    export interface components {
    schemas: {
    "Id": string;
    }
    }
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from otterts.codegen.imports import synthesize_imports
from otterts.codegen.operations import (
    OperationComposer,
    OperationsTable,
    PathComposer,
)
from otterts.codegen.parameters import ParameterComposer
from otterts.codegen.property_mapper import PropertyMapper, apply_property_mapper
from otterts.codegen.references import ComponentLookup, ReferenceResolver
from otterts.codegen.transformer import TypeTransformer
from otterts.codegen.ts import comment
from otterts.exceptions import InvalidDocumentShape

__all__ = ['GeneratorOptions', 'TypeScriptGenerator', 'generate_types']

logger = logging.getLogger(__name__)

RAW_SCHEMA_ROOT = 'schemas/'


@dataclass
class GeneratorOptions:
    """Options controlling declaration generation.

    Attributes:
        raw_schema: Treat the input as a flat map of schema definitions
            instead of a paths/components document.
        property_mapper: Optional hook applied to the schema map before
            transformation.
    """

    raw_schema: bool = False
    property_mapper: PropertyMapper | None = None


@dataclass
class _GenerationContext:
    """Accumulators owned by a single generate() call."""

    resolver: ReferenceResolver
    transformer: TypeTransformer
    operations: OperationsTable
    operation_composer: OperationComposer
    path_composer: PathComposer
    warnings: list[str] = field(default_factory=list)


class TypeScriptGenerator:
    """Generates TypeScript declaration text from a schema document.

    Generation state lives in a per-call context, so one instance may serve
    several documents. The `warnings` attribute is the exception: it is
    overwritten by every generate() call, so callers sharing an instance
    across threads should use generate_with_warnings() instead.

    Attributes:
        options: The GeneratorOptions in use.
        warnings: Degraded-input notices from the most recent generate() call.
            They never change the generated text.
    """

    def __init__(self, options: GeneratorOptions | None = None):
        self.options = options or GeneratorOptions()
        self.warnings: list[str] = []

    def generate(self, document: Mapping[str, Any], source: str | None = None) -> str:
        """Generate declarations for `document`.

        Args:
            document: The parsed schema document.
            source: Optional document name used in error messages.

        Returns:
            The declaration text.

        Raises:
            InvalidDocumentShape: If, outside raw-schema mode, the document
                has neither `paths` nor `components`.
        """
        output, self.warnings = self.generate_with_warnings(document, source)
        return output

    def generate_with_warnings(
        self, document: Mapping[str, Any], source: str | None = None
    ) -> tuple[str, list[str]]:
        """Like generate(), but return this call's warnings with the text.

        Leaves the `warnings` attribute untouched.
        """
        if self.options.raw_schema:
            if not isinstance(document, Mapping):
                raise InvalidDocumentShape(source)
            context = self._create_context(document, RAW_SCHEMA_ROOT)
            output = self._generate_raw(context, document)
        else:
            if not isinstance(document, Mapping) or (
                document.get('paths') is None and document.get('components') is None
            ):
                raise InvalidDocumentShape(source)
            context = self._create_context(document, '')
            output = self._generate_document(context, document)

        for warning in context.warnings:
            logger.debug(f'Degraded input: {warning}')
        return output, context.warnings

    def _create_context(self, document: Mapping[str, Any], root: str) -> _GenerationContext:
        warnings: list[str] = []
        resolver = ReferenceResolver()
        transformer = TypeTransformer(resolver, root=root, warnings=warnings)
        parameters = ParameterComposer(transformer, ComponentLookup(document))
        operation_composer = OperationComposer(transformer, parameters)
        operations = OperationsTable()
        return _GenerationContext(
            resolver=resolver,
            transformer=transformer,
            operations=operations,
            operation_composer=operation_composer,
            path_composer=PathComposer(operation_composer, operations),
            warnings=warnings,
        )

    def _generate_raw(self, context: _GenerationContext, document: Mapping[str, Any]) -> str:
        schemas = apply_property_mapper(document, self.options.property_mapper)
        fields = context.transformer.fields.compose_fields(schemas, list(schemas))
        return f'export interface schemas {{\n{fields}}}\n'

    def _generate_document(
        self, context: _GenerationContext, document: Mapping[str, Any]
    ) -> str:
        paths = document.get('paths') or {}
        components = document.get('components') or {}
        schemas = apply_property_mapper(
            components.get('schemas') or {}, self.options.property_mapper
        )

        output = ''

        # paths first: walking them fills the operations table
        if paths:
            output += f'export interface paths {{\n{context.path_composer.compose_paths(paths)}}}\n\n'

        output += 'export interface operations {\n'
        for operation_id, operation in context.operations.items():
            if operation.get('description'):
                output += comment(operation['description'])
            output += f'"{operation_id}": {context.operation_composer.compose_operation(operation)}'
        output += '\n}\n\n'

        output += 'export interface components {\n'
        output += self._compose_components(context, components, schemas)
        output += '}\n'

        return synthesize_imports(context.resolver.external_keys) + output

    def _compose_components(
        self,
        context: _GenerationContext,
        components: Mapping[str, Any],
        schemas: Mapping[str, Any],
    ) -> str:
        fields = context.transformer.fields
        composer = context.operation_composer
        output = ''

        parameters = components.get('parameters') or {}
        if parameters:
            output += f'parameters: {{\n{fields.compose_fields(parameters, list(parameters))}}}\n'

        if schemas:
            output += f'schemas: {{\n{fields.compose_fields(schemas, list(schemas))}}}\n'

        responses = components.get('responses') or {}
        if responses:
            output += 'responses: {\n'
            for name, response in responses.items():
                output += self._compose_named_content(composer, name, response)
            output += '}\n'

        request_bodies = components.get('requestBodies') or {}
        if request_bodies:
            output += 'requestBodies: {\n'
            for name, request_body in request_bodies.items():
                output += self._compose_named_content(composer, name, request_body)
            output += '}\n'

        return output

    @staticmethod
    def _compose_named_content(
        composer: OperationComposer, name: str, container: Any
    ) -> str:
        if not isinstance(container, Mapping):
            return ''
        output = comment(container['description']) if container.get('description') else ''
        return f'{output}"{name}": {composer.compose_content(container)}\n'


def generate_types(
    document: Mapping[str, Any],
    raw_schema: bool = False,
    property_mapper: PropertyMapper | None = None,
) -> str:
    """Generate TypeScript declarations for `document`.

    Shorthand for `TypeScriptGenerator(GeneratorOptions(...)).generate(document)`.
    """
    options = GeneratorOptions(raw_schema=raw_schema, property_mapper=property_mapper)
    return TypeScriptGenerator(options).generate(document)
