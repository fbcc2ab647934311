"""Operation and path composition.

This module renders OpenAPI operations (parameters, request body and
responses) and the `paths` record that refers to them. Operations that carry
an `operationId` are hoisted into an OperationsTable and referenced by name
from every path that uses them.
"""

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from otterts.codegen.parameters import ParameterComposer
from otterts.codegen.transformer import TypeTransformer
from otterts.codegen.ts import NEVER, UNKNOWN, comment

__all__ = [
    'HTTP_METHODS',
    'OperationComposer',
    'OperationsTable',
    'PathComposer',
    'status_code_key',
]

logger = logging.getLogger(__name__)

HTTP_METHODS = ('get', 'put', 'post', 'delete', 'options', 'head', 'patch', 'trace')


def status_code_key(status_code: Any) -> int | str:
    """Normalize a response key for use as a property name.

    Numeric codes become ints and `default` stays bare; anything else
    (`2XX`, for instance) is quoted.
    """
    text = str(status_code)
    # non-ASCII digits such as '²' fall through to the quoted form
    if text.isascii() and text.isdigit():
        return int(text)
    if text == 'default':
        return text
    return f'"{text}"'


def _has_no_body(status_code: int | str) -> bool:
    return isinstance(status_code, int) and (
        status_code == 204 or status_code // 100 == 3
    )


class OperationsTable:
    """Named operations collected while paths are walked.

    The first operation registered under an id is kept; later registrations
    with the same id are ignored.
    """

    def __init__(self):
        self._operations: dict[str, Mapping[str, Any]] = {}

    def register(self, operation_id: str, operation: Mapping[str, Any]) -> None:
        if operation_id in self._operations:
            return
        logger.debug(f'Hoisting operation: {operation_id}')
        self._operations[operation_id] = operation

    def __contains__(self, operation_id: str) -> bool:
        return operation_id in self._operations

    def __len__(self) -> int:
        return len(self._operations)

    def __iter__(self) -> Iterator[str]:
        return iter(self._operations)

    def items(self):
        return self._operations.items()


class OperationComposer:
    """Renders a single operation as a TypeScript record type.

    The record always holds, in this order: `parameters` (when declared),
    `requestBody` (when declared) and `responses`.
    """

    def __init__(self, transformer: TypeTransformer, parameters: ParameterComposer):
        self.transformer = transformer
        self.parameters = parameters

    def compose_operation(self, operation: Mapping[str, Any]) -> str:
        output = '{\n'

        if operation.get('parameters'):
            output += self.parameters.compose_parameters(operation['parameters'])

        request_body = operation.get('requestBody')
        if request_body:
            output += f'requestBody: {self.compose_content(request_body)}\n'

        output += 'responses: {\n'
        for status, response in (operation.get('responses') or {}).items():
            output += self.compose_response(status, response)
        output += '}\n'

        output += '}\n'
        return output

    def compose_response(self, status: Any, response: Any) -> str:
        """Render one `<status>: <body>;` entry of a responses record."""
        if not response or not isinstance(response, Mapping):
            return ''

        key = status_code_key(status)
        output = comment(response['description']) if response.get('description') else ''

        if '$ref' in response or response.get('content'):
            return f'{output}{key}: {self.compose_content(response)}\n'

        return f'{output}{key}: {NEVER if _has_no_body(key) else UNKNOWN};\n'

    def compose_content(self, container: Mapping[str, Any]) -> str:
        """Render a request body or response as a content-type keyed record.

        A `$ref` container is rendered as the reference expression itself.
        """
        if '$ref' in container:
            return f'{self.transformer.resolver.resolve_ref(container["$ref"])};'

        output = '{\n'
        for content_type, media_type in (container.get('content') or {}).items():
            schema = media_type.get('schema') if isinstance(media_type, Mapping) else None
            output += f'"{content_type}": {self.transformer.transform(schema)};\n'
        output += '}'
        return output


class PathComposer:
    """Renders the `paths` record.

    Example:
        >>> composer.compose_paths({'/pets': {'get': {'operationId': 'listPets', ...}}})
        '"/pets": {\\n"get": operations["listPets"];\\n}\\n'
    """

    def __init__(self, operations: OperationComposer, table: OperationsTable):
        self.operations = operations
        self.table = table

    def compose_paths(self, paths: Mapping[str, Any]) -> str:
        output = ''
        for path, path_item in paths.items():
            if not isinstance(path_item, Mapping):
                continue
            output += f'"{path}": {{\n'
            output += self.compose_path_item(path_item)
            output += '}\n'
        return output

    def compose_path_item(self, path_item: Mapping[str, Any]) -> str:
        output = ''

        for method, operation in path_item.items():
            if method not in HTTP_METHODS or not isinstance(operation, Mapping):
                continue

            operation_id = operation.get('operationId')
            if operation_id:
                self.table.register(operation_id, operation)
                output += f'"{method}": operations["{operation_id}"];\n'
            else:
                if operation.get('description'):
                    output += comment(operation['description'])
                output += f'"{method}": {self.operations.compose_operation(operation)}'

        # shared parameters always follow the method entries
        if path_item.get('parameters'):
            output += self.operations.parameters.compose_parameters(
                path_item['parameters']
            )

        return output
