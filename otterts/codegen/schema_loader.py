"""Schema loading utilities.

This module provides the SchemaLoader class for reading schema documents from
local files or http(s) URLs, in JSON or YAML. The documents are returned as
plain Python data; no OpenAPI validation is performed.
"""

import json
import logging
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import httpx
import yaml

from otterts.exceptions import SchemaLoadError

__all__ = ['SchemaLoader']

logger = logging.getLogger(__name__)

YAML_SUFFIXES = ('.yaml', '.yml')


class SchemaLoader:
    """Loads schema documents from URLs or file paths.

    Example:
        >>> loader = SchemaLoader()
        >>> document = loader.load('https://api.example.com/openapi.json')
        >>> # or
        >>> document = loader.load('/path/to/openapi.yaml')
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        base_path: str | Path | None = None,
    ):
        """Initialize the schema loader.

        Args:
            http_client: Optional HTTP client to use for URL requests.
                        If not provided, `httpx.get` is used.
            base_path: Base path for resolving relative file paths.
                      Defaults to the current working directory.
        """
        self._http_client = http_client
        self._base_path = Path(base_path) if base_path else Path.cwd()

    def load(self, source: str) -> Any:
        """Load a schema document from a URL or file path.

        Args:
            source: URL or file path of the document.

        Returns:
            The parsed document.

        Raises:
            SchemaLoadError: If the document cannot be fetched, read or parsed.
        """
        logger.debug(f'Loading schema from {source}')
        try:
            if self._is_url(source):
                return self._load_from_url(source)
            return self._load_from_file(source)
        except SchemaLoadError:
            raise
        except Exception as e:
            raise SchemaLoadError(source, cause=e)

    def _is_url(self, text: str) -> bool:
        """Check if a string is an http(s) URL."""
        try:
            result = urlparse(text)
            return result.scheme in ('http', 'https')
        except ValueError:
            return False

    def _load_from_url(self, url: str) -> Any:
        """Load document content from a URL."""
        try:
            if self._http_client:
                response = self._http_client.get(url)
            else:
                response = httpx.get(url, follow_redirects=True, timeout=30.0)

            response.raise_for_status()
            content_type = response.headers.get('content-type', '')

            if 'yaml' in content_type or url.endswith(YAML_SUFFIXES):
                return yaml.safe_load(response.text)
            return json.loads(response.text)

        except httpx.HTTPError as e:
            raise SchemaLoadError(url, cause=e)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SchemaLoadError(url, cause=e)

    def _load_from_file(self, file_path: str) -> Any:
        """Load document content from a file."""
        path = Path(file_path)
        if not path.is_absolute():
            path = self._base_path / path

        if not path.exists():
            raise SchemaLoadError(
                str(file_path), cause=FileNotFoundError(f'File not found: {path}')
            )

        try:
            content = path.read_text(encoding='utf-8')
            if path.suffix.lower() in YAML_SUFFIXES:
                return yaml.safe_load(content)
            return json.loads(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SchemaLoadError(str(file_path), cause=e)
        except OSError as e:
            raise SchemaLoadError(str(file_path), cause=e)
