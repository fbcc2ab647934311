"""Test configuration for otterts package."""

import json
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from otterts.config import (
    CodegenConfig,
    DocumentConfig,
    get_config,
    load_json,
    load_yaml,
)
from otterts.exceptions import ConfigurationError


class TestDocumentConfig:
    """Test DocumentConfig model."""

    def test_valid_document_config(self):
        """Test creating a valid DocumentConfig."""
        config = DocumentConfig(
            source='https://api.example.com/openapi.json', output='./types/api.ts'
        )
        assert config.source == 'https://api.example.com/openapi.json'
        assert config.output == './types/api.ts'
        assert config.raw_schema is False
        assert config.property_mapper is None

    def test_document_config_with_optional_fields(self):
        """Test DocumentConfig with all optional fields."""
        config = DocumentConfig(
            source='./schemas.yaml',
            output='./types/schemas.ts',
            raw_schema=True,
            property_mapper='myapp.mappers:camel_case',
        )
        assert config.raw_schema is True
        assert config.property_mapper == 'myapp.mappers:camel_case'

    def test_document_config_validation(self):
        """Test DocumentConfig validation."""
        with pytest.raises(ValueError):
            DocumentConfig()  # missing required fields


class TestCodegenConfig:
    """Test CodegenConfig model."""

    def test_valid_codegen_config(self):
        """Test creating a valid CodegenConfig."""
        config = CodegenConfig(
            documents=[DocumentConfig(source='api.json', output='api.ts')]
        )
        assert len(config.documents) == 1
        assert config.documents[0].source == 'api.json'

    def test_documents_from_dicts(self):
        """Test validating documents given as plain mappings."""
        config = CodegenConfig.model_validate(
            {
                'documents': [
                    {'source': 'a.json', 'output': 'a.ts'},
                    {'source': 'b.yaml', 'output': 'b.ts', 'raw_schema': True},
                ]
            }
        )
        assert [d.output for d in config.documents] == ['a.ts', 'b.ts']
        assert config.documents[1].raw_schema is True

    def test_documents_required(self):
        with pytest.raises(ValueError):
            CodegenConfig()


class TestLoaders:
    """Test the raw file loaders."""

    @pytest.fixture
    def temp_dir(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            yield Path(tmpdir)

    def test_load_yaml(self, temp_dir):
        path = temp_dir / 'config.yaml'
        path.write_text(yaml.dump({'documents': []}))
        assert load_yaml(path) == {'documents': []}

    def test_load_json(self, temp_dir):
        path = temp_dir / 'config.json'
        path.write_text(json.dumps({'documents': []}))
        assert load_json(str(path)) == {'documents': []}


class TestGetConfig:
    """Test get_config function."""

    def test_get_config_from_yaml_file(self):
        """Test loading config from an explicit YAML file."""
        config_data = {
            'documents': [{'source': './openapi.yaml', 'output': './types/api.ts'}]
        }

        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            yaml.dump(config_data, f)
            temp_path = f.name

        try:
            config = get_config(temp_path)
            assert len(config.documents) == 1
            assert config.documents[0].output == './types/api.ts'
        finally:
            os.unlink(temp_path)

    def test_get_config_from_json_file(self):
        """Test loading config from an explicit JSON file."""
        config_data = {
            'documents': [
                {'source': 'schemas.json', 'output': 'schemas.ts', 'raw_schema': True}
            ]
        }

        with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
            json.dump(config_data, f)
            temp_path = f.name

        try:
            config = get_config(temp_path)
            assert config.documents[0].raw_schema is True
        finally:
            os.unlink(temp_path)

    def test_get_config_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match='Configuration file not found'):
            get_config(str(tmp_path / 'nope.yaml'))

    def test_get_config_invalid_content(self, tmp_path):
        path = tmp_path / 'otterts.yaml'
        path.write_text('documents:\n  - source: api.json\n')

        with pytest.raises(ConfigurationError, match='Invalid configuration') as exc_info:
            get_config(str(path))
        assert exc_info.value.config_path == str(path)

    def test_get_config_unparseable_json(self, tmp_path):
        path = tmp_path / 'otterts.json'
        path.write_text('{not json')

        with pytest.raises(ConfigurationError, match='Cannot parse configuration'):
            get_config(str(path))

    def test_get_config_unparseable_yaml(self, tmp_path):
        path = tmp_path / 'otterts.yaml'
        path.write_text('documents: [unclosed\n')

        with pytest.raises(ConfigurationError, match='Cannot parse configuration'):
            get_config(str(path))

    def test_get_config_default_file(self, tmp_path):
        """Test discovery of a default config file in the working directory."""
        (tmp_path / 'otterts.yml').write_text(
            'documents:\n  - source: api.json\n    output: api.ts\n'
        )

        with patch('os.getcwd', return_value=str(tmp_path)):
            config = get_config()

        assert config.documents[0].source == 'api.json'

    def test_get_config_default_file_precedence(self, tmp_path):
        (tmp_path / 'otterts.yaml').write_text(
            'documents:\n  - source: from-yaml.json\n    output: api.ts\n'
        )
        (tmp_path / 'otterts.json').write_text(
            json.dumps({'documents': [{'source': 'from-json.json', 'output': 'api.ts'}]})
        )

        with patch('os.getcwd', return_value=str(tmp_path)):
            config = get_config()

        assert config.documents[0].source == 'from-yaml.json'

    def test_get_config_from_pyproject(self, tmp_path):
        """Test loading config from the [tool.otterts] table."""
        (tmp_path / 'pyproject.toml').write_text(
            '[tool.otterts]\n'
            'documents = [{ source = "api.json", output = "types/api.ts" }]\n'
        )

        with patch('os.getcwd', return_value=str(tmp_path)):
            config = get_config()

        assert config.documents[0].output == 'types/api.ts'

    def test_get_config_pyproject_without_table(self, tmp_path):
        (tmp_path / 'pyproject.toml').write_text('[tool.other]\nkey = 1\n')

        with patch('os.getcwd', return_value=str(tmp_path)):
            with pytest.raises(ConfigurationError, match='Configuration not found'):
                get_config()

    def test_get_config_invalid_pyproject_table(self, tmp_path):
        (tmp_path / 'pyproject.toml').write_text('[tool.otterts]\nother = 1\n')

        with patch('os.getcwd', return_value=str(tmp_path)):
            with pytest.raises(ConfigurationError, match='Invalid configuration'):
                get_config()

    def test_get_config_not_found(self, tmp_path):
        with patch('os.getcwd', return_value=str(tmp_path)):
            with pytest.raises(ConfigurationError, match='Configuration not found'):
                get_config()
