"""Nodes of the documentation model graph.

Ownership is a tree (namespace -> types -> members). Upward links are kept as
identifiers and followed through the ``MemberRegistry``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from docmodel.doc_content import DocContent, InheritDoc
from docmodel.source_group import DEFAULT_MERGE_GROUP

if TYPE_CHECKING:
    from docmodel.member_registry import MemberRegistry


@dataclass(eq=False)
class ModelNode:
    """Base of every registered node."""

    id: str
    name: str
    full_name: str = ""
    parent_id: str | None = None
    merge_group: str = DEFAULT_MERGE_GROUP
    doc: DocContent | None = None

    category: ClassVar[str] = "Node"

    def parent(self, registry: MemberRegistry) -> ModelNode | None:
        """Return the containing node."""
        if self.parent_id is None:
            return None
        return registry.find_by_id(self.parent_id)

    @property
    def inherit_doc(self) -> InheritDoc | None:
        """The inheritance pointer of the documentation, if any."""
        return self.doc.inherit_doc if self.doc is not None else None

    @property
    def has_documentation(self) -> bool:
        """Whether the node carries any prose of its own."""
        return self.doc is not None and not self.doc.is_empty()


@dataclass(eq=False)
class NamespaceNode(ModelNode):
    """A namespace, merged over every module declaring it.

    ``merge_group`` is the group of the first declaring module; types from
    other groups join the same node and keep their own group.
    """

    types: list[TypeNode] = field(default_factory=list)
    assemblies: list[str] = field(default_factory=list)

    category: ClassVar[str] = "Namespace"

    @property
    def merge_groups(self) -> list[str]:
        """Groups contributing to this namespace, in order of appearance."""
        groups = [self.merge_group]
        for t in self.types:
            if t.merge_group not in groups:
                groups.append(t.merge_group)
        return groups

    def types_for(self, merge_group: str) -> list[TypeNode]:
        """Top-level types contributed by one merge group."""
        return [t for t in self.types if t.merge_group == merge_group]


@dataclass(eq=False)
class SymbolNode(ModelNode):
    """A type or member: something documentation can be inherited into."""

    assembly: str = ""

    def base_ids(self) -> list[str]:
        """Identifiers to walk when inheriting documentation automatically."""
        return []

    def copy_documentation(self, other: ModelNode) -> None:
        """Fill the empty documentation fields of this node from ``other``."""
        if other.doc is None:
            return
        if self.doc is None:
            self.doc = DocContent()
        self.doc.copy_missing_from(other.doc)


@dataclass(eq=False)
class TypeNode(SymbolNode):
    """A class, struct, interface, enum or delegate."""

    kind: str = "class"
    base_type_id: str | None = None
    interface_ids: list[str] = field(default_factory=list)
    generic_parameters: list[str] = field(default_factory=list)
    members: list[MemberNode] = field(default_factory=list)
    nested_types: list[TypeNode] = field(default_factory=list)

    category: ClassVar[str] = "Type"

    def base_ids(self) -> list[str]:
        """The base type first, then implemented interfaces."""
        ids = [self.base_type_id] if self.base_type_id else []
        return ids + self.interface_ids


@dataclass(frozen=True)
class Parameter:
    """A parameter of a method or indexer."""

    name: str
    type: str


@dataclass(eq=False)
class MemberNode(SymbolNode):
    """A member of a type."""

    overrides_id: str | None = None
    implements_ids: list[str] = field(default_factory=list)
    is_static: bool = False

    category: ClassVar[str] = "Member"

    def base_ids(self) -> list[str]:
        """The overridden member first, then implemented interface members."""
        ids = [self.overrides_id] if self.overrides_id else []
        return ids + self.implements_ids


@dataclass(eq=False)
class MethodNode(MemberNode):
    """A method, constructor or operator."""

    parameters: list[Parameter] = field(default_factory=list)
    return_type: str | None = None
    is_constructor: bool = False
    is_virtual: bool = False

    category: ClassVar[str] = "Method"

    def copy_documentation(self, other: ModelNode) -> None:
        """Also fill parameter and return descriptions."""
        super().copy_documentation(other)
        if self.doc is None or other.doc is None:
            return
        other_params = getattr(other, "parameters", [])
        self.doc.copy_parameters_from(
            other.doc,
            [p.name for p in self.parameters],
            [p.name for p in other_params],
        )
        if not self.doc.returns and other.doc.returns:
            self.doc.returns = other.doc.returns


@dataclass(eq=False)
class PropertyNode(MemberNode):
    """A property or indexer."""

    property_type: str | None = None
    parameters: list[Parameter] = field(default_factory=list)
    has_getter: bool = False
    has_setter: bool = False
    is_virtual: bool = False

    category: ClassVar[str] = "Property"

    @property
    def value_description(self) -> str:
        """The ``<value>`` text of the property."""
        return self.doc.value if self.doc is not None else ""

    def copy_documentation(self, other: ModelNode) -> None:
        """Also fill the value description and indexer parameters."""
        super().copy_documentation(other)
        if self.doc is None or other.doc is None or not isinstance(other, PropertyNode):
            return
        if not self.doc.value and other.doc.value:
            self.doc.value = other.doc.value
        self.doc.copy_parameters_from(
            other.doc,
            [p.name for p in self.parameters],
            [p.name for p in other.parameters],
        )


@dataclass(eq=False)
class FieldNode(MemberNode):
    """A field or enum value."""

    field_type: str | None = None
    constant_value: str | None = None

    category: ClassVar[str] = "Field"


@dataclass(eq=False)
class EventNode(MemberNode):
    """An event."""

    event_type: str | None = None

    category: ClassVar[str] = "Event"
