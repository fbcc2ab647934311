import logging
from pathlib import PurePosixPath

from otterts.codegen.emitter import CodeEmitter, FileEmitter
from otterts.codegen.generator import GeneratorOptions, TypeScriptGenerator
from otterts.codegen.property_mapper import load_property_mapper
from otterts.codegen.schema_loader import SchemaLoader
from otterts.config import DocumentConfig

__all__ = ['Codegen']

logger = logging.getLogger(__name__)


class Codegen:
    """Loads one configured document, generates declarations and writes them.

    Example:
        >>> config = DocumentConfig(source='./openapi.yaml', output='./types/api.ts')
        >>> Codegen(config).generate()
        'types/api.ts'
    """

    def __init__(
        self,
        config: DocumentConfig,
        schema_loader: SchemaLoader | None = None,
        emitter: CodeEmitter | None = None,
    ):
        self.config = config
        self._schema_loader = schema_loader or SchemaLoader()
        output = PurePosixPath(config.output)
        self._output_name = output.name
        self._emitter = emitter or FileEmitter(str(output.parent))
        self.warnings: list[str] = []

    def _create_generator(self) -> TypeScriptGenerator:
        mapper = None
        if self.config.property_mapper:
            mapper = load_property_mapper(self.config.property_mapper)
        return TypeScriptGenerator(
            GeneratorOptions(raw_schema=self.config.raw_schema, property_mapper=mapper)
        )

    def render(self) -> str:
        """Load the source document and return the generated declarations."""
        generator = self._create_generator()
        document = self._schema_loader.load(self.config.source)
        source, self.warnings = generator.generate_with_warnings(
            document, source=self.config.source
        )
        for warning in self.warnings:
            logger.warning(f'{self.config.source}: {warning}')
        return source

    def generate(self) -> str:
        """Generate declarations and emit them; returns the emitted path."""
        source = self.render()
        path = self._emitter.emit(source, self._output_name)
        logger.info(f'Generated {path} from {self.config.source}')
        return path
