"""Loading of metadata modules and doc-comment files for every source group."""

import logging
from pathlib import Path

from docmodel.assembly_reader import AssemblyReader, YamlAssemblyReader
from docmodel.assembly_resolver import AssemblyResolver
from docmodel.build_config import BuildConfig
from docmodel.diagnostics import Diagnostics
from docmodel.documentation_file import DocumentationFile
from docmodel.errors import (
    AssemblyReadError,
    AssemblyResolutionError,
    DocumentationFormatError,
)
from docmodel.loaded_source import LoadedSource
from docmodel.source_descriptor import SourceDescriptor
from docmodel.source_group import DEFAULT_MERGE_GROUP, SourceGroup

logger = logging.getLogger(__name__)

CONFIGURATION = "configuration"
DEPENDENCY = "dependency"


class AssemblyLoader:
    """Reads every configured source into ``LoadedSource`` entries.

    Problems are reported to ``diagnostics`` and loading carries on with the
    next source, so a single run surfaces every configuration error.
    """

    def __init__(
        self,
        diagnostics: Diagnostics,
        reader: AssemblyReader | None = None,
        *,
        assembly_extensions: list[str] | None = None,
        documentation_extension: str = ".xml",
        fallback_extensions: list[str] | None = None,
    ) -> None:
        """Initialize the loader with a metadata reader and file conventions."""
        self.diagnostics = diagnostics
        self.reader = reader or YamlAssemblyReader()
        self.assembly_extensions = assembly_extensions or [".dll", ".exe"]
        self.documentation_extension = documentation_extension
        self.fallback_extensions = fallback_extensions or []
        self.sources: list[LoadedSource] = []

    @classmethod
    def for_config(
        cls,
        config: BuildConfig,
        diagnostics: Diagnostics,
        reader: AssemblyReader | None = None,
    ) -> "AssemblyLoader":
        """Create a loader using the file conventions of ``config``."""
        return cls(
            diagnostics,
            reader,
            assembly_extensions=config.assembly_extensions,
            documentation_extension=config.documentation_extension,
            fallback_extensions=config.fallback_extensions,
        )

    def load(self, config: BuildConfig) -> list[LoadedSource]:
        """Load all groups of ``config``, in order."""
        base_dir = config.base_dir
        for group in config.groups:
            group.merge_group = group.merge_group or DEFAULT_MERGE_GROUP
            group.search_directories = [
                d if d.is_absolute() else (base_dir / d).resolve()
                for d in group.search_directories
            ]
            for descriptor in group.sources:
                self.load_source(group, descriptor.resolved(base_dir))
        return self.sources

    def load_source(self, group: SourceGroup, descriptor: SourceDescriptor) -> None:
        """Load one descriptor; paths are expected to be absolute."""
        if descriptor.is_empty:
            self.diagnostics.error(
                CONFIGURATION,
                "Source in group [%s] has neither an assembly nor a documentation path",
                group.merge_group,
            )
            return

        source: LoadedSource | None = None
        assembly_path = descriptor.assembly_path
        if assembly_path is not None:
            if not assembly_path.is_file():
                self.diagnostics.error(
                    CONFIGURATION, "Assembly file [%s] not found", assembly_path
                )
            elif assembly_path.suffix.lower() not in self.assembly_extensions:
                self.diagnostics.fatal(
                    CONFIGURATION,
                    "Invalid assembly source [%s]. Must be one of %s",
                    assembly_path,
                    ", ".join(self.assembly_extensions),
                )
            else:
                source = self._load_assembly(group, assembly_path)
                if source is None:
                    return
                self.sources.append(source)

        doc_path = descriptor.default_documentation_path(self.documentation_extension)
        if doc_path is None:
            return
        if not doc_path.is_file():
            self.diagnostics.error(
                CONFIGURATION, "Documentation file [%s] not found", doc_path
            )
            return
        if doc_path.suffix.lower() != self.documentation_extension:
            self.diagnostics.fatal(
                CONFIGURATION,
                "Invalid documentation source [%s]. Must be a %s comment file",
                doc_path,
                self.documentation_extension,
            )
            return

        try:
            document = DocumentationFile.load(doc_path)
        except DocumentationFormatError as exc:
            self.diagnostics.fatal(CONFIGURATION, "%s", exc)
            return

        if source is None:
            source = LoadedSource(merge_group=group.merge_group, filename=doc_path)
            self.sources.append(source)
        source.document = document

    def _load_assembly(self, group: SourceGroup, path: Path) -> LoadedSource | None:
        # The module's own directory first, then the group's directories.
        resolver = AssemblyResolver(
            self.reader,
            [path.parent, *group.search_directories],
            self.assembly_extensions,
            self.fallback_extensions,
        )
        try:
            assembly = self.reader.read(path, resolver)
        except AssemblyResolutionError as exc:
            self.diagnostics.fatal(
                DEPENDENCY, "Unable to load assembly [%s]: %s", path, exc
            )
            return None
        except AssemblyReadError as exc:
            self.diagnostics.error(CONFIGURATION, "%s", exc)
            return None

        logger.info("Loaded assembly %s from %s", assembly.name, path)
        return LoadedSource(
            assembly=assembly, merge_group=group.merge_group, filename=path
        )
