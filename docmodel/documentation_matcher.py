"""Strategies deciding whether a doc-comment file documents a metadata module."""

from typing import Protocol

from docmodel.assembly_definition import AssemblyDefinition
from docmodel.documentation_file import DocumentationFile


class DocumentationMatcher(Protocol):
    """Pairs metadata modules with candidate documentation files."""

    def matches(
        self, assembly: AssemblyDefinition, document: DocumentationFile
    ) -> bool:
        """Return True if ``document`` documents ``assembly``."""
        ...


class AssemblyNameMatcher:
    """Matches on the assembly name declared in the documentation file.

    The comparison is exact and case sensitive after trimming whitespace.
    """

    def matches(
        self, assembly: AssemblyDefinition, document: DocumentationFile
    ) -> bool:
        """Compare ``/doc/assembly/name`` with the module's own name."""
        return assembly.name.strip() == document.assembly_name
