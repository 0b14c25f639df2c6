"""Readers turning a metadata module into an ``AssemblyDefinition`` tree.

The shipped reader consumes the symbol manifest emitted for each module by the
metadata extraction step. A manifest is YAML stored under the module's own file
name so the configured paths do not change::

    ### YamlMime:AssemblyManifest
    name: Acme.Core
    references: [Acme.Base]
    namespaces:
      - name: Acme.Core
        types:
          - name: Widget
            kind: class
            base: T:Acme.Base.Component
            members:
              - name: Render
                kind: method
                parameters: [{name: scale, type: System.Int32}]
                type: System.String
                overrides: M:Acme.Base.Component.Render(System.Int32)
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

import yaml

from docmodel.assembly_definition import (
    MEMBER_KINDS,
    TYPE_KINDS,
    AssemblyDefinition,
    MemberDefinition,
    NamespaceDefinition,
    ParameterDefinition,
    TypeDefinition,
)
from docmodel.errors import AssemblyReadError
from docmodel.manifest_header import MANIFEST_KIND, split_manifest_header

if TYPE_CHECKING:
    from docmodel.assembly_resolver import AssemblyResolver


class AssemblyReader(Protocol):
    """Reads one metadata module, resolving its references through ``resolver``."""

    def read(self, path: Path, resolver: AssemblyResolver | None) -> AssemblyDefinition:
        """Read the module at ``path``. Raises ``AssemblyReadError`` on failure."""
        ...


class YamlAssemblyReader:
    """Reads YAML symbol manifests."""

    def read(self, path: Path, resolver: AssemblyResolver | None) -> AssemblyDefinition:
        """Read the manifest at ``path`` and resolve every referenced module."""
        try:
            kind, raw = split_manifest_header(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Unable to read assembly [{path}]: {exc}"
            raise AssemblyReadError(msg) from exc
        if kind is not None and kind != MANIFEST_KIND:
            msg = f"Assembly [{path}] is a {kind} document, not a symbol manifest"
            raise AssemblyReadError(msg)
        try:
            doc = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            msg = f"Assembly [{path}] is not a valid symbol manifest: {exc}"
            raise AssemblyReadError(msg) from exc
        if not isinstance(doc, dict) or not doc.get("name"):
            msg = f"Assembly [{path}] does not declare a name"
            raise AssemblyReadError(msg)

        try:
            namespaces = [_namespace(ns, path) for ns in doc.get("namespaces") or []]
        except (KeyError, TypeError, AttributeError) as exc:
            msg = f"Assembly [{path}] has a malformed symbol entry: {exc!r}"
            raise AssemblyReadError(msg) from exc

        assembly = AssemblyDefinition(
            name=str(doc["name"]).strip(),
            file=path,
            references=[str(r) for r in doc.get("references") or []],
            namespaces=namespaces,
        )
        # Immediate mode: every reference must resolve while the module is read.
        if resolver is not None:
            for reference in assembly.references:
                resolved = resolver.resolve(reference)
                if resolved is not None:
                    assembly.resolved_references[reference] = resolved
        return assembly


def _namespace(raw: dict[str, Any], path: Path) -> NamespaceDefinition:
    return NamespaceDefinition(
        name=str(raw.get("name") or ""),
        types=[_type(t, path) for t in raw.get("types") or []],
    )


def _type(raw: dict[str, Any], path: Path) -> TypeDefinition:
    kind = str(raw.get("kind") or "class").lower()
    if kind not in TYPE_KINDS:
        msg = f"Unknown type kind [{kind}] for [{raw.get('name')}] in [{path}]"
        raise AssemblyReadError(msg)
    return TypeDefinition(
        name=str(raw["name"]),
        kind=kind,
        base_type=raw.get("base"),
        interfaces=[str(i) for i in raw.get("interfaces") or []],
        generic_parameters=[str(g) for g in raw.get("generic_parameters") or []],
        members=[_member(m, path) for m in raw.get("members") or []],
        nested_types=[_type(t, path) for t in raw.get("nested") or []],
        obsolete=raw.get("obsolete"),
    )


def _member(raw: dict[str, Any], path: Path) -> MemberDefinition:
    kind = str(raw.get("kind") or "").lower()
    if kind not in MEMBER_KINDS:
        msg = f"Unknown member kind [{kind}] for [{raw.get('name')}] in [{path}]"
        raise AssemblyReadError(msg)
    return MemberDefinition(
        name=str(raw["name"]),
        kind=kind,
        parameters=[
            ParameterDefinition(name=str(p["name"]), type=str(p["type"]))
            for p in raw.get("parameters") or []
        ],
        type=raw.get("type"),
        overrides=raw.get("overrides"),
        implements=[str(i) for i in raw.get("implements") or []],
        obsolete=raw.get("obsolete"),
        is_static=bool(raw.get("static", False)),
        is_virtual=bool(raw.get("virtual", False)),
        accessors=[str(a) for a in raw.get("accessors") or []],
        constant_value=None if raw.get("value") is None else str(raw["value"]),
    )
