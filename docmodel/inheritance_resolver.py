"""Resolution of ``<inheritdoc/>`` pointers over the completed registry."""

import logging

from docmodel.diagnostics import Diagnostics
from docmodel.member_registry import MemberRegistry
from docmodel.model_node import ModelNode, SymbolNode

logger = logging.getLogger(__name__)

INHERITANCE = "inheritance"


class InheritedDocResolver:
    """Copies documentation into symbols that inherit it.

    Must run after every node is registered. Each queued symbol is resolved
    once; a base that inherits its own documentation is resolved first.
    """

    def __init__(self, registry: MemberRegistry, diagnostics: Diagnostics) -> None:
        """Initialize the resolver over a fully populated registry."""
        self.registry = registry
        self.diagnostics = diagnostics
        self.resolved: list[str] = []
        self.unresolved: list[str] = []
        self._done: set[str] = set()

    def resolve_all(self) -> None:
        """Resolve every symbol queued by the registry."""
        for member in self.registry.inherited_doc_members:
            self.resolve(member)

    def resolve(self, member: SymbolNode) -> None:
        """Inherit documentation into ``member``, unless already done."""
        if member.id in self._done:
            return
        self._done.add(member.id)

        pointer = member.inherit_doc
        if pointer is None:
            return

        source: ModelNode | None
        if pointer.cref is not None:
            source = self.registry.find_by_id(pointer.cref)
            if source is None:
                self._unresolved(
                    member,
                    "Unable to resolve inherited documentation [%s] for [%s]",
                    pointer.cref,
                )
                return
            self._resolve_pending(source)
        else:
            source = self._nearest_documented_base(member)
            if source is None:
                self._unresolved(
                    member, "No documented base found to inherit from for [%s]"
                )
                return

        member.copy_documentation(source)
        self.resolved.append(member.id)
        logger.debug("Inherited documentation of %s from %s", member.id, source.id)

    def _nearest_documented_base(self, member: SymbolNode) -> ModelNode | None:
        visited = {member.id}
        pending = list(member.base_ids())
        while pending:
            ident = pending.pop(0)
            node = self.registry.find_by_id(ident)
            if node is None or node.id in visited:
                continue
            visited.add(node.id)
            self._resolve_pending(node)
            if node.has_documentation:
                return node
            if isinstance(node, SymbolNode):
                # The base's own base comes before the next interface.
                pending[:0] = node.base_ids()
        return None

    def _resolve_pending(self, node: ModelNode) -> None:
        if isinstance(node, SymbolNode) and node.inherit_doc is not None:
            self.resolve(node)

    def _unresolved(self, member: SymbolNode, message: str, *args: object) -> None:
        self.unresolved.append(member.id)
        self.diagnostics.warning(INHERITANCE, message, *args, member.id)
