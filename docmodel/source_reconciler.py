"""Pairing of every loaded metadata module with exactly one documentation file."""

import logging

from docmodel.diagnostics import Diagnostics
from docmodel.documentation_file import DocumentationFile
from docmodel.documentation_matcher import AssemblyNameMatcher, DocumentationMatcher
from docmodel.loaded_source import LoadedSource

logger = logging.getLogger(__name__)

RECONCILIATION = "reconciliation"


class SourceReconciler:
    """Checks that each assembly has exactly one matching documentation file.

    Candidates for an assembly are its own documentation plus every doc-only
    source of any group. All assemblies are checked before the caller decides
    to stop, so every failure is reported in the same run.
    """

    def __init__(
        self, diagnostics: Diagnostics, matcher: DocumentationMatcher | None = None
    ) -> None:
        """Initialize the reconciler with the matching strategy to use."""
        self.diagnostics = diagnostics
        self.matcher = matcher or AssemblyNameMatcher()

    def reconcile(self, sources: list[LoadedSource]) -> list[LoadedSource]:
        """Return the assembly sources, each with its matched documentation."""
        doc_only = [
            s.document
            for s in sources
            if s.assembly is None and s.document is not None
        ]

        paired: list[LoadedSource] = []
        for source in sources:
            assembly = source.assembly
            if assembly is None:
                continue

            candidates: list[DocumentationFile] = []
            if source.document is not None:
                candidates.append(source.document)
            candidates.extend(doc_only)

            found = [d for d in candidates if self.matcher.matches(assembly, d)]
            if not found:
                self.diagnostics.fatal(
                    RECONCILIATION,
                    "No documentation found for assembly [%s]",
                    assembly.name,
                )
            elif len(found) > 1:
                self.diagnostics.fatal(
                    RECONCILIATION,
                    "Cannot resolve: multiple documentation sources ([%d]) match "
                    "assembly [%s]",
                    len(found),
                    assembly.name,
                )
            else:
                source.document = found[0]
                logger.debug(
                    "Assembly %s documented by %s", assembly.name, found[0].path
                )
            paired.append(source)
        return paired
