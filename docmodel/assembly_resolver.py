"""Resolution of referenced metadata modules from explicit search directories."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from docmodel.errors import AssemblyReadError, AssemblyResolutionError

if TYPE_CHECKING:
    from docmodel.assembly_definition import AssemblyDefinition
    from docmodel.assembly_reader import AssemblyReader

logger = logging.getLogger(__name__)


class AssemblyResolver:
    """Finds referenced modules in an ordered list of directories.

    Only the given directories are searched, never system or framework
    locations, so a build resolves the same way on every machine.
    """

    def __init__(
        self,
        reader: AssemblyReader,
        search_directories: list[Path],
        extensions: list[str],
        fallback_extensions: list[str] | None = None,
    ) -> None:
        """Initialize the resolver with a reader and the directories to search."""
        self.reader = reader
        self.search_directories: list[Path] = []
        for directory in search_directories:
            if directory not in self.search_directories:
                self.search_directories.append(directory)
        self.extensions = extensions
        self.fallback_extensions = fallback_extensions or []
        self._cache: dict[str, AssemblyDefinition] = {}
        self._loading: set[str] = set()

    def resolve(self, name: str) -> AssemblyDefinition | None:
        """Load the module called ``name``.

        Returns None when the module is already being read further up the
        reference chain. Raises ``AssemblyResolutionError`` when no candidate
        file could be read.
        """
        if name in self._cache:
            return self._cache[name]
        if name in self._loading:
            return None

        self._loading.add(name)
        try:
            assembly = self._find(name, self.extensions)
            if assembly is None:
                assembly = self._find(name, self.fallback_extensions)
        finally:
            self._loading.discard(name)

        if assembly is None:
            logger.error("Failed to resolve %s", name)
            raise AssemblyResolutionError(
                name, [str(d) for d in self.search_directories]
            )
        self._cache[name] = assembly
        return assembly

    def _find(self, name: str, extensions: list[str]) -> AssemblyDefinition | None:
        for directory in self.search_directories:
            for extension in extensions:
                candidate = directory / f"{name}{extension}"
                if not candidate.is_file():
                    continue
                try:
                    return self.reader.read(candidate, self)
                except AssemblyResolutionError:
                    raise
                except AssemblyReadError as exc:
                    # Try the next candidate.
                    logger.debug("Skipping %s: %s", candidate, exc)
        return None
