"""Configuration record naming one metadata module and/or one doc-comment file."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class SourceDescriptor:
    """A ``<source>`` entry of a source group.

    Either path may be missing (doc-only or metadata-only source); a descriptor
    without any path is rejected by the loader.
    """

    assembly_path: Path | None = None
    documentation_path: Path | None = None

    @classmethod
    def from_config(cls, entry: Any) -> "SourceDescriptor":
        """Build a descriptor from a config entry (mapping or bare assembly path)."""
        if isinstance(entry, str):
            return cls(assembly_path=Path(entry))
        if not isinstance(entry, dict):
            return cls()
        assembly = entry.get("assembly")
        documentation = entry.get("documentation")
        return cls(
            assembly_path=Path(assembly) if assembly else None,
            documentation_path=Path(documentation) if documentation else None,
        )

    @property
    def is_empty(self) -> bool:
        """Whether neither path was given."""
        return self.assembly_path is None and self.documentation_path is None

    def resolved(self, base_dir: Path) -> "SourceDescriptor":
        """Return a copy with both paths made absolute against ``base_dir``."""
        return SourceDescriptor(
            assembly_path=_absolute(base_dir, self.assembly_path),
            documentation_path=_absolute(base_dir, self.documentation_path),
        )

    def default_documentation_path(self, extension: str) -> Path | None:
        """Return the explicit doc path, or the assembly path with ``extension``."""
        if self.documentation_path is not None:
            return self.documentation_path
        if self.assembly_path is not None:
            return self.assembly_path.with_suffix(extension)
        return None


def _absolute(base_dir: Path, path: Path | None) -> Path | None:
    if path is None:
        return None
    return path if path.is_absolute() else (base_dir / path).resolve()
