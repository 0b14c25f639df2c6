"""The resolved model handed to renderers."""

from dataclasses import dataclass, field

from docmodel.diagnostics import Diagnostics
from docmodel.loaded_source import LoadedSource
from docmodel.member_registry import MemberRegistry
from docmodel.model_node import NamespaceNode
from docmodel.topic import Topic


@dataclass
class DocumentationModel:
    """Registry, namespaces per merge group, topics and the loaded sources."""

    registry: MemberRegistry
    diagnostics: Diagnostics
    sources: list[LoadedSource] = field(default_factory=list)
    topics: list[Topic] = field(default_factory=list)

    @property
    def merge_groups(self) -> list[str]:
        """Merge group names, in the order they first contribute to a namespace."""
        groups: list[str] = []
        for ns in self.registry.namespaces:
            for group in ns.merge_groups:
                if group not in groups:
                    groups.append(group)
        return groups

    def namespaces_for(self, merge_group: str) -> list[NamespaceNode]:
        """Namespaces holding types of one merge group, in registration order.

        A namespace shared by several groups is listed for each of them; use
        ``NamespaceNode.types_for`` to get one group's types.
        """
        return [
            ns for ns in self.registry.namespaces if merge_group in ns.merge_groups
        ]
