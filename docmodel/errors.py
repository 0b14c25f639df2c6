"""Exception types raised while reading sources."""


class DocModelError(Exception):
    """Base class for errors raised by the model builder."""


class ConfigurationError(DocModelError):
    """Raised when a configuration entry cannot be used."""


class AssemblyReadError(DocModelError):
    """Raised when a metadata module cannot be read."""


class AssemblyResolutionError(AssemblyReadError):
    """Raised when a referenced module cannot be found in any search directory."""

    def __init__(self, reference: str, searched: list[str]) -> None:
        """Record the unresolved reference and the directories tried."""
        self.reference = reference
        self.searched = searched
        super().__init__(
            f"Failed to resolve {reference} (searched: {', '.join(searched) or '-'})"
        )


class DocumentationFormatError(DocModelError):
    """Raised when a documentation file is not a valid doc-comment file."""
