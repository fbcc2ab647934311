import json
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from otterts.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['otterts.yaml', 'otterts.yml', 'otterts.json']


class DocumentConfig(BaseModel):
    """Represents a single document to be processed."""

    source: str = Field(..., description='Path or URL to the schema document.')

    output: str = Field(
        ..., description='Path of the TypeScript declaration file to write.'
    )

    raw_schema: bool = Field(
        False,
        description='Treat the document as a flat map of schema definitions.',
    )

    property_mapper: str | None = Field(
        None,
        description="Optional 'module:function' import path of a property mapper.",
    )


class CodegenConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='OTTERTS_')

    documents: list[DocumentConfig] = Field(
        ..., description='List of schema documents to process.'
    )


def load_yaml(path: str | Path) -> dict:
    return yaml.safe_load(Path(path).read_text(encoding='utf-8'))


def load_json(path: str | Path) -> dict:
    return json.loads(Path(path).read_text(encoding='utf-8'))


def _load_file(path: str | Path) -> CodegenConfig:
    path = Path(path)
    if not path.exists():
        raise ConfigurationError('Configuration file not found', config_path=str(path))

    try:
        data = load_json(path) if path.suffix.lower() == '.json' else load_yaml(path)
        return CodegenConfig.model_validate(data or {})
    except ValidationError as e:
        raise ConfigurationError(
            f'Invalid configuration: {e}', config_path=str(path)
        ) from e
    except (ValueError, yaml.YAMLError) as e:
        raise ConfigurationError(
            f'Cannot parse configuration: {e}', config_path=str(path)
        ) from e


def get_config(path: str | None = None) -> CodegenConfig:
    """Load configuration from a file, the working directory or pyproject.toml."""
    if path:
        return _load_file(path)

    cwd = Path(os.getcwd())

    for filename in DEFAULT_FILENAMES:
        candidate = cwd / filename
        if candidate.exists():
            return _load_file(candidate)

    pyproject_path = cwd / 'pyproject.toml'

    if pyproject_path.exists():
        import tomllib

        pyproject = tomllib.loads(pyproject_path.read_text())
        tools = pyproject.get('tool', {})

        if 'otterts' in tools:
            try:
                return CodegenConfig.model_validate(tools['otterts'])
            except ValidationError as e:
                raise ConfigurationError(
                    f'Invalid configuration: {e}', config_path=str(pyproject_path)
                ) from e

    raise ConfigurationError('Configuration not found')
