"""A list of sources loaded into the same API merge group."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from docmodel.as_string_list import as_string_list
from docmodel.errors import ConfigurationError
from docmodel.source_descriptor import SourceDescriptor

DEFAULT_MERGE_GROUP = "default"


@dataclass
class SourceGroup:
    """Sources sharing a merge group and extra directories for module references."""

    merge_group: str = DEFAULT_MERGE_GROUP
    search_directories: list[Path] = field(default_factory=list)
    sources: list[SourceDescriptor] = field(default_factory=list)

    @classmethod
    def from_config(cls, entry: Any) -> "SourceGroup":
        """Build a group from its ``api``, ``searchdir`` and ``source`` keys."""
        if not isinstance(entry, dict):
            msg = f"Source group must be a mapping, got {entry!r}"
            raise ConfigurationError(msg)
        search = as_string_list(entry.get("searchdir"), "searchdir")
        sources = entry.get("source") or []
        if not isinstance(sources, list):
            sources = [sources]
        return cls(
            merge_group=str(entry.get("api") or DEFAULT_MERGE_GROUP),
            search_directories=[Path(s) for s in search],
            sources=[SourceDescriptor.from_config(s) for s in sources],
        )
