"""A metadata module and/or doc-comment file read from one source descriptor."""

from dataclasses import dataclass
from pathlib import Path

from docmodel.assembly_definition import AssemblyDefinition
from docmodel.documentation_file import DocumentationFile
from docmodel.source_group import DEFAULT_MERGE_GROUP


@dataclass
class LoadedSource:
    """Loading result, paired with its documentation by the reconciler."""

    assembly: AssemblyDefinition | None = None
    document: DocumentationFile | None = None
    merge_group: str = DEFAULT_MERGE_GROUP
    filename: Path | None = None

    @property
    def name(self) -> str:
        """Assembly name, or the declared name of a doc-only source."""
        if self.assembly is not None:
            return self.assembly.name
        if self.document is not None:
            return self.document.assembly_name
        return ""
