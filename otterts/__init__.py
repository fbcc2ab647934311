"""OtterTS - Generate TypeScript declarations from OpenAPI schemas.

OtterTS converts an OpenAPI 3 style document (paths, operations, parameters
and component schemas) into TypeScript `paths`, `operations` and
`components` interfaces, so HTTP clients and servers written against the
contract get compile-time type checking without hand-written types.

Quick Start:
    >>> from otterts import generate_types
    >>>
    >>> document = {'components': {'schemas': {'Pet': {'type': 'object'}}}}
    >>> print(generate_types(document))

    >>> from otterts import Codegen, DocumentConfig
    >>>
    >>> config = DocumentConfig(source='./openapi.yaml', output='./types/api.ts')
    >>> Codegen(config).generate()

CLI Usage:
    $ otterts convert ./openapi.yaml -o ./types/api.ts
    $ otterts convert ./schemas.json --raw-schema
    $ otterts generate --config otterts.yaml
"""

from importlib.metadata import PackageNotFoundError, version

from otterts.codegen.codegen import Codegen
from otterts.codegen.generator import (
    GeneratorOptions,
    TypeScriptGenerator,
    generate_types,
)
from otterts.codegen.references import ComponentLookup, ReferenceResolver
from otterts.codegen.schema_loader import SchemaLoader
from otterts.codegen.transformer import TypeTransformer
from otterts.config import CodegenConfig, DocumentConfig, get_config
from otterts.exceptions import (
    ConfigurationError,
    InvalidDocumentShape,
    OtterTSError,
    OutputError,
    SchemaError,
    SchemaLoadError,
)

__all__ = [
    # Main classes
    'Codegen',
    'TypeScriptGenerator',
    'GeneratorOptions',
    'generate_types',
    'TypeTransformer',
    'ReferenceResolver',
    'ComponentLookup',
    'SchemaLoader',
    # Configuration
    'CodegenConfig',
    'DocumentConfig',
    'get_config',
    # Exceptions
    'OtterTSError',
    'SchemaError',
    'InvalidDocumentShape',
    'SchemaLoadError',
    'ConfigurationError',
    'OutputError',
]

try:
    __version__ = version('otterts')
except PackageNotFoundError:
    __version__ = 'unknown'
