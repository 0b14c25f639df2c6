"""Construction of the model graph from paired sources."""

import logging
from collections import Counter
from typing import Any

from docmodel.assembly_definition import (
    METHOD_KINDS,
    AssemblyDefinition,
    MemberDefinition,
    NamespaceDefinition,
    TypeDefinition,
)
from docmodel.diagnostics import Diagnostics
from docmodel.doc_content import DocContent
from docmodel.identifiers import make_id, qualify
from docmodel.loaded_source import LoadedSource
from docmodel.member_registry import MemberRegistry
from docmodel.model_node import (
    EventNode,
    FieldNode,
    MemberNode,
    MethodNode,
    ModelNode,
    NamespaceNode,
    Parameter,
    PropertyNode,
    TypeNode,
)
from docmodel.parse_doc_content import parse_doc_content

logger = logging.getLogger(__name__)

COLLISION = "collision"
CONSTRUCTOR_NAME = "#ctor"


class ModelBuilder:
    """Creates and registers namespace, type and member nodes.

    Namespaces of the same merge group are merged, so types from several
    modules end up under one node. Nodes are registered as they are created.
    """

    def __init__(self, registry: MemberRegistry, diagnostics: Diagnostics) -> None:
        """Initialize the builder with the registry that receives every node."""
        self.registry = registry
        self.diagnostics = diagnostics
        self.missing_documentation: list[str] = []
        self.orphan_documentation: dict[str, list[str]] = {}
        self.symbol_counts: Counter[str] = Counter()
        self._used: set[str] = set()
        self._source = LoadedSource()

    def build(self, sources: list[LoadedSource]) -> None:
        """Add the symbols of every paired source to the graph."""
        for source in sources:
            assembly = source.assembly
            if assembly is None:
                continue
            self._add_source(source, assembly)

    def _add_source(
        self, source: LoadedSource, assembly: AssemblyDefinition
    ) -> None:
        self._used = set()
        self._source = source

        for ns_def in assembly.namespaces:
            namespace = self._namespace(ns_def, source)
            if namespace is None:
                continue
            if assembly.name not in namespace.assemblies:
                namespace.assemblies.append(assembly.name)
            for type_def in ns_def.types:
                node = self._add_type(type_def, ns_def.name, namespace.id)
                if node is not None:
                    namespace.types.append(node)

        if source.document is not None:
            orphans = [
                ident
                for ident in source.document.members
                if ident not in self._used and not ident.startswith("N:")
            ]
            if orphans:
                logger.debug(
                    "%d documentation entries of %s match no symbol",
                    len(orphans),
                    assembly.name,
                )
                self.orphan_documentation[assembly.name] = orphans

    def _namespace(
        self, ns_def: NamespaceDefinition, source: LoadedSource
    ) -> NamespaceNode | None:
        ident = make_id("namespace", ns_def.name)
        existing = self.registry.find_by_id(ident)
        if isinstance(existing, NamespaceNode):
            # Shared across merge groups; each type keeps its own group.
            doc = self._doc_for(ident, None, required=False)
            if existing.doc is None:
                existing.doc = doc
            else:
                existing.doc.copy_missing_from(doc)
            return existing

        node = NamespaceNode(
            id=ident,
            name=ns_def.name,
            full_name=ns_def.name,
            merge_group=source.merge_group,
            doc=self._doc_for(ident, None, required=False),
        )
        if not self._register(node):
            return None
        return node

    def _add_type(
        self, type_def: TypeDefinition, container: str, parent_id: str
    ) -> TypeNode | None:
        full_name = qualify(container, type_def.name)
        ident = make_id(type_def.kind, full_name)
        node = TypeNode(
            id=ident,
            name=type_def.name,
            full_name=full_name,
            parent_id=parent_id,
            merge_group=self._source.merge_group,
            doc=self._doc_for(ident, type_def.obsolete),
            assembly=self._source.name,
            kind=type_def.kind,
            base_type_id=type_def.base_type,
            interface_ids=list(type_def.interfaces),
            generic_parameters=list(type_def.generic_parameters),
        )
        if not self._register(node):
            return None

        for member_def in type_def.members:
            member = self._add_member(member_def, node)
            if member is not None:
                node.members.append(member)
        for nested_def in type_def.nested_types:
            nested = self._add_type(nested_def, full_name, node.id)
            if nested is not None:
                node.nested_types.append(nested)
        return node

    def _add_member(
        self, member_def: MemberDefinition, owner: TypeNode
    ) -> MemberNode | None:
        kind = member_def.kind
        parameters = [Parameter(p.name, p.type) for p in member_def.parameters]
        id_name = CONSTRUCTOR_NAME if kind == "constructor" else member_def.name
        ident = make_id(
            kind,
            qualify(owner.full_name, id_name),
            [p.type for p in parameters],
        )
        common: dict[str, Any] = {
            "id": ident,
            "name": owner.name if kind == "constructor" else member_def.name,
            "full_name": qualify(owner.full_name, member_def.name),
            "parent_id": owner.id,
            "merge_group": owner.merge_group,
            "doc": self._doc_for(ident, member_def.obsolete),
            "assembly": owner.assembly,
            "overrides_id": member_def.overrides,
            "implements_ids": list(member_def.implements),
            "is_static": member_def.is_static,
        }

        node: MemberNode
        if kind in METHOD_KINDS:
            node = MethodNode(
                **common,
                parameters=parameters,
                return_type=member_def.type,
                is_constructor=kind == "constructor",
                is_virtual=member_def.is_virtual,
            )
        elif kind == "property":
            node = PropertyNode(
                **common,
                property_type=member_def.type,
                parameters=parameters,
                has_getter="get" in member_def.accessors,
                has_setter="set" in member_def.accessors,
                is_virtual=member_def.is_virtual,
            )
        elif kind == "field":
            node = FieldNode(
                **common,
                field_type=member_def.type,
                constant_value=member_def.constant_value,
            )
        else:
            node = EventNode(**common, event_type=member_def.type)

        if not self._register(node):
            return None
        return node

    def _doc_for(
        self, ident: str, obsolete: str | None, *, required: bool = True
    ) -> DocContent:
        document = self._source.document
        element = document.find_member(ident) if document is not None else None
        if element is not None:
            self._used.add(ident)
        elif required:
            self.missing_documentation.append(ident)
            logger.debug("Missing documentation for %s", ident)
        doc = parse_doc_content(element)
        if obsolete:
            doc.obsolete_message = str(obsolete)
        return doc

    def _register(self, node: ModelNode) -> bool:
        if self.registry.register(node):
            self.symbol_counts[node.category] += 1
            return True
        # Lenient: the first definition keeps the identifier.
        self.diagnostics.warning(
            COLLISION,
            "Identifier [%s] from [%s] is already registered, keeping the first "
            "definition",
            node.id,
            self._source.filename,
        )
        return False
