"""Logic for writing a JSON summary of a model build."""

import json
import time
from dataclasses import asdict
from pathlib import Path
from typing import Any

from docmodel.diagnostics import Diagnostics
from docmodel.documentation_model import DocumentationModel
from docmodel.inheritance_resolver import InheritedDocResolver
from docmodel.model_builder import ModelBuilder
from docmodel.model_node import TypeNode

REPORT_SCHEMA_VERSION = 1


class BuildReport:
    """Collects the outcome of a build and writes it as JSON."""

    def __init__(
        self, config_hash: str, schema_version: int = REPORT_SCHEMA_VERSION
    ) -> None:
        """Initialize the report with metadata."""
        self.config_hash = config_hash
        self.schema_version = schema_version
        self.start_time = time.time()
        self.model: DocumentationModel | None = None
        self.builder: ModelBuilder | None = None
        self.resolver: InheritedDocResolver | None = None

    def generate_report(self, path: str | Path, diagnostics: Diagnostics) -> None:
        """Write the summary report to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "schema_version": self.schema_version,
                "succeeded": not diagnostics.has_fatal,
            },
            "groups": self._group_stats(),
            "documentation": self._documentation_stats(),
            "diagnostics": {
                "counts": diagnostics.counts(),
                "entries": [asdict(d) for d in diagnostics.entries],
            },
        }
        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def _group_stats(self) -> dict[str, Any]:
        if self.model is None:
            return {}
        stats: dict[str, Any] = {}
        for group in self.model.merge_groups:
            namespaces = self.model.namespaces_for(group)
            types = [
                t for ns in namespaces for t in _walk_types(ns.types_for(group))
            ]
            stats[group] = {
                "namespaces": len(namespaces),
                "types": len(types),
                "members": sum(len(t.members) for t in types),
                "assemblies": sorted({t.assembly for t in types}),
            }
        return stats

    def _documentation_stats(self) -> dict[str, Any]:
        stats: dict[str, Any] = {}
        if self.builder is not None:
            stats["missing"] = len(self.builder.missing_documentation)
            stats["orphans"] = {
                name: len(ids)
                for name, ids in self.builder.orphan_documentation.items()
            }
            stats["symbols"] = dict(self.builder.symbol_counts)
        if self.resolver is not None:
            stats["inherited"] = {
                "resolved": len(self.resolver.resolved),
                "unresolved": len(self.resolver.unresolved),
            }
        return stats


def _walk_types(types: list[TypeNode]) -> list[TypeNode]:
    result = []
    for t in types:
        result.append(t)
        result.extend(_walk_types(t.nested_types))
    return result

