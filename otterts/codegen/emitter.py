"""Code emitter interfaces and implementations for generated declarations.

This module provides the CodeEmitter interface with a file-backed and an
in-memory implementation.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from upath import UPath

from otterts.exceptions import OutputError

__all__ = ['CodeEmitter', 'FileEmitter', 'StringEmitter']

logger = logging.getLogger(__name__)

HEADER = (
    '/**\n'
    ' * This file was auto-generated by otterts.\n'
    ' * Do not make direct changes to the file.\n'
    ' */\n\n'
)


class CodeEmitter(ABC):
    """Abstract base class for code emitters.

    A CodeEmitter takes generated declaration text and outputs it somewhere
    (files, strings, ...).
    """

    @abstractmethod
    def emit(self, source: str, name: str) -> str:
        """Emit generated declarations.

        Args:
            source: The declaration text.
            name: File name (or identifier) for the output.

        Returns:
            The path to the emitted file, or the emitted text, depending
            on the implementation.
        """
        pass


class FileEmitter(CodeEmitter):
    """Writes generated declarations to files under an output directory.

    Local paths and any fsspec-backed location understood by `UPath` are
    supported.
    """

    def __init__(self, output_dir: str | Path | UPath, add_header: bool = True):
        """Initialize the file emitter.

        Args:
            output_dir: Directory where files will be written.
            add_header: Whether to prefix files with a generated-code banner.
        """
        self.output_dir = UPath(output_dir)
        self.add_header = add_header
        self._written_files: list[str] = []

    def emit(self, source: str, name: str) -> str:
        path = self.output_dir / name
        content = (HEADER + source) if self.add_header else source

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding='utf-8')
        except OSError as e:
            raise OutputError(str(path), cause=e)

        logger.debug(f'Wrote {path}')
        self._written_files.append(str(path))
        return str(path)

    def get_written_files(self) -> list[str]:
        """Paths written by this emitter so far."""
        return self._written_files.copy()


class StringEmitter(CodeEmitter):
    """Collects generated declarations in memory, keyed by name."""

    def __init__(self):
        self.outputs: dict[str, str] = {}

    def emit(self, source: str, name: str) -> str:
        self.outputs[name] = source
        return source
