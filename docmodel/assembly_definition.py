"""Symbol tree of a metadata module, as handed over by an ``AssemblyReader``."""

from dataclasses import dataclass, field
from pathlib import Path

METHOD_KINDS = {"method", "constructor", "operator"}
MEMBER_KINDS = METHOD_KINDS | {"property", "field", "event"}
TYPE_KINDS = {"class", "struct", "interface", "enum", "delegate"}


@dataclass
class ParameterDefinition:
    """A declared parameter: its name and fully qualified type name."""

    name: str
    type: str


@dataclass
class MemberDefinition:
    """A method, constructor, operator, property, field or event."""

    name: str
    kind: str
    parameters: list[ParameterDefinition] = field(default_factory=list)
    type: str | None = None  # return/property/field/event type
    overrides: str | None = None  # identifier of the overridden member
    implements: list[str] = field(default_factory=list)
    obsolete: str | None = None
    is_static: bool = False
    is_virtual: bool = False
    accessors: list[str] = field(default_factory=list)  # property get/set
    constant_value: str | None = None


@dataclass
class TypeDefinition:
    """A type with its members and nested types."""

    name: str
    kind: str = "class"
    base_type: str | None = None
    interfaces: list[str] = field(default_factory=list)
    generic_parameters: list[str] = field(default_factory=list)
    members: list[MemberDefinition] = field(default_factory=list)
    nested_types: list["TypeDefinition"] = field(default_factory=list)
    obsolete: str | None = None


@dataclass
class NamespaceDefinition:
    """A namespace declared by a module. The global namespace has an empty name."""

    name: str
    types: list[TypeDefinition] = field(default_factory=list)


@dataclass
class AssemblyDefinition:
    """A loaded metadata module."""

    name: str
    file: Path | None = None
    references: list[str] = field(default_factory=list)
    namespaces: list[NamespaceDefinition] = field(default_factory=list)
    resolved_references: dict[str, "AssemblyDefinition"] = field(default_factory=dict)
