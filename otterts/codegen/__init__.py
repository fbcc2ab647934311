"""Code generation module for OtterTS.

This module provides the declaration generator and the pieces it is built
from.

Main Components:
    - Codegen: Loads a configured document, generates and writes declarations
    - TypeScriptGenerator: Assembles the paths/operations/components output
    - TypeTransformer: Turns a schema node into a type expression
    - FieldComposer, ParameterComposer, OperationComposer, PathComposer:
      Render records, parameter groups, operations and paths
    - ReferenceResolver / ComponentLookup: Address and inspect `$ref` targets
    - SchemaLoader: Loads schema documents from URLs or files
    - CodeEmitter: Handles output of generated code

Example:
    >>> from otterts.codegen import TypeScriptGenerator
    >>> TypeScriptGenerator().generate({'paths': {}})
    'export interface operations {\\n\\n}\\n\\nexport interface components {\\n}\\n'
"""

from otterts.codegen.codegen import Codegen
from otterts.codegen.emitter import CodeEmitter, FileEmitter, StringEmitter
from otterts.codegen.fields import FieldComposer
from otterts.codegen.generator import (
    GeneratorOptions,
    TypeScriptGenerator,
    generate_types,
)
from otterts.codegen.imports import synthesize_imports
from otterts.codegen.node_types import NodeType, node_type
from otterts.codegen.operations import (
    OperationComposer,
    OperationsTable,
    PathComposer,
)
from otterts.codegen.parameters import ParameterComposer
from otterts.codegen.property_mapper import apply_property_mapper, load_property_mapper
from otterts.codegen.references import ComponentLookup, ReferenceResolver
from otterts.codegen.schema_loader import SchemaLoader
from otterts.codegen.transformer import TypeTransformer

__all__ = [
    # Main codegen class
    'Codegen',
    # Declaration generation
    'TypeScriptGenerator',
    'GeneratorOptions',
    'generate_types',
    'TypeTransformer',
    'NodeType',
    'node_type',
    'FieldComposer',
    'ParameterComposer',
    'OperationComposer',
    'OperationsTable',
    'PathComposer',
    # References
    'ReferenceResolver',
    'ComponentLookup',
    'synthesize_imports',
    # Property mapping
    'apply_property_mapper',
    'load_property_mapper',
    # Schema handling
    'SchemaLoader',
    # Code emission
    'CodeEmitter',
    'FileEmitter',
    'StringEmitter',
]
