"""Custom exceptions for OtterTS.

This module defines the exceptions raised by OtterTS. The declaration
generator itself only ever raises InvalidDocumentShape; the other errors
belong to the loading, configuration and output layers around it.
"""


class OtterTSError(Exception):
    """Base exception for all OtterTS errors.

    All exceptions raised by OtterTS inherit from this class, making it easy
    to catch all OtterTS-related errors with a single except clause.

    Example:
        try:
            codegen.generate()
        except OtterTSError as e:
            print(f"OtterTS error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class SchemaError(OtterTSError):
    """Base exception for schema-related errors."""

    pass


class InvalidDocumentShape(SchemaError):
    """The input document has neither `paths` nor `components`.

    Raised before any output is produced. Documents that are a flat map of
    schema definitions must be converted in raw-schema mode instead.

    Attributes:
        source: Optional name of the document that was rejected.
    """

    def __init__(self, source: str | None = None):
        self.source = source
        message = 'No components or paths found'
        if source:
            message += f" in '{source}'"
        message += '. Specify --raw-schema to load a raw schema.'
        super().__init__(message)


class SchemaLoadError(SchemaError):
    """Failed to load a schema document from a source.

    Attributes:
        source: The source path or URL that failed to load.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load schema from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class ConfigurationError(OtterTSError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class OutputError(OtterTSError):
    """Error writing generated output.

    Attributes:
        output_path: The path where output was being written.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, output_path: str, cause: Exception | None = None):
        self.output_path = output_path
        self.cause = cause
        message = f"Failed to write output to '{output_path}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)
