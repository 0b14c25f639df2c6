"""Typed view over the configuration consumed by the model builder."""

import hashlib
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from docmodel.as_string_list import as_string_list
from docmodel.errors import ConfigurationError
from docmodel.load_config import load_config
from docmodel.source_group import SourceGroup


@dataclass
class BuildConfig:
    """Source groups and loader settings for one documentation run."""

    groups: list[SourceGroup] = field(default_factory=list)
    file_path: Path | None = None
    assembly_extensions: list[str] = field(default_factory=lambda: [".dll", ".exe"])
    documentation_extension: str = ".xml"
    fallback_extensions: list[str] = field(default_factory=lambda: [".winmd"])
    topics: list[dict[str, Any]] = field(default_factory=list)
    raw: dict[str, Any] = field(default_factory=dict)

    @property
    def base_dir(self) -> Path:
        """Directory relative paths are resolved against."""
        if self.file_path is not None:
            return self.file_path.resolve().parent
        return Path.cwd()

    def fingerprint(self) -> str:
        """SHA-256 of the merged settings and the directory paths resolve against.

        Key order does not matter; paths and other non-JSON values are hashed
        through their string form.
        """
        payload = {"base_dir": str(self.base_dir), "settings": self.raw}
        canonical = json.dumps(payload, sort_keys=True, ensure_ascii=True, default=str)
        return hashlib.sha256(canonical.encode("utf-8")).hexdigest()

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], file_path: Path | None = None
    ) -> "BuildConfig":
        """Build the typed config from a merged configuration mapping."""
        entries = data.get("groups") or []
        if not isinstance(entries, list):
            msg = "Configuration key [groups] must be a list of source groups"
            raise ConfigurationError(msg)
        topics = data.get("topics") or []
        if not isinstance(topics, list):
            msg = "Configuration key [topics] must be a list"
            raise ConfigurationError(msg)

        groups = [SourceGroup.from_config(g) for g in entries]
        shared = [
            Path(p)
            for p in as_string_list(
                data.get("search_directories"), "search_directories"
            )
        ]
        for group in groups:
            group.search_directories.extend(
                p for p in shared if p not in group.search_directories
            )
        return cls(
            groups=groups,
            file_path=file_path,
            assembly_extensions=_extensions(data, "assembly_extensions"),
            documentation_extension=str(
                data.get("documentation_extension") or ".xml"
            ).lower(),
            fallback_extensions=_extensions(data, "fallback_extensions"),
            topics=topics,
            raw=data,
        )

    @classmethod
    def load(cls, path: str | Path) -> "BuildConfig":
        """Load a configuration file and return its typed view."""
        p = Path(path)
        return cls.from_dict(load_config(p), file_path=p)


def _extensions(data: dict[str, Any], key: str) -> list[str]:
    return [e.lower() for e in as_string_list(data.get(key), key)]
