"""
File System Gateway - Wrapper for directory listing and raw file reads
Provides a unified interface for enumerating crash report sources.
"""

import os
import logging
from typing import List, Optional
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class FileReadResult:
    """Result of reading one file."""
    path: str
    content: str
    success: bool
    error: Optional[str] = None


class FileSystemGateway:
    """Gateway for listing directories and reading files."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def _list_entries(self, directory: str) -> List[str]:
        """Full paths of the immediate entries of a directory, sorted."""
        try:
            names = sorted(os.listdir(directory))
        except OSError as e:
            logger.debug(f"Cannot list {directory}: {e}")
            return []
        return [os.path.join(directory, name) for name in names]

    def list_files(self, directory: str) -> List[str]:
        """List the regular files directly inside a directory."""
        return [p for p in self._list_entries(directory) if os.path.isfile(p)]

    def list_directories(self, directory: str) -> List[str]:
        """List the subdirectories directly inside a directory."""
        return [p for p in self._list_entries(directory) if os.path.isdir(p)]

    def read_file(self, path: str) -> FileReadResult:
        """Read the whole content of a text file."""
        try:
            with open(path, 'r', encoding=self.encoding, errors='ignore') as f:
                content = f.read()
        except OSError as e:
            logger.warning(f"Failed to read {path}: {e}")
            return FileReadResult(
                path=path,
                content="",
                success=False,
                error=str(e)
            )

        return FileReadResult(path=path, content=content, success=True)
