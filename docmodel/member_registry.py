"""Identifier index over the documentation model."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from docmodel.identifiers import EXTERNAL_PREFIX
from docmodel.model_node import ModelNode, NamespaceNode, SymbolNode
from docmodel.topic import Topic

if TYPE_CHECKING:
    from docmodel.diagnostics import Diagnostics

logger = logging.getLogger(__name__)


class MemberRegistry:
    """Maps identifiers to model nodes for one documentation run.

    The first node registered under an identifier keeps it for the rest of the
    run. Namespaces are listed in registration order, and every symbol whose
    documentation points elsewhere (``<inheritdoc/>``) is queued for the
    inheritance resolver when it is registered.
    """

    def __init__(self, diagnostics: Diagnostics | None = None) -> None:
        """Initialize an empty registry."""
        self.diagnostics = diagnostics
        self._by_id: dict[str, ModelNode] = {}
        self.namespaces: list[NamespaceNode] = []
        self.inherited_doc_members: list[SymbolNode] = []

    def __contains__(self, ident: object) -> bool:
        return ident in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[ModelNode]:
        return iter(self._by_id.values())

    def find_by_id(self, ident: str) -> ModelNode | None:
        """Return the node registered under ``ident``.

        External references (``X:...``) that are not registered as such are
        looked up again without the marker.
        """
        node = self._by_id.get(ident)
        if node is None and ident.startswith(EXTERNAL_PREFIX):
            node = self._by_id.get(ident[len(EXTERNAL_PREFIX) :])
        return node

    def register(self, node: ModelNode) -> bool:
        """Register ``node``. Returns False if its identifier is already taken."""
        if node.id in self._by_id:
            return False
        self._by_id[node.id] = node

        if node.inherit_doc is not None and isinstance(node, SymbolNode):
            self.inherited_doc_members.append(node)

        if isinstance(node, NamespaceNode):
            self.namespaces.append(node)
        return True

    def register_topic(self, topic: Topic | None) -> bool:
        """Register ``topic`` and all its sub-topics.

        A topic sharing its identifier with a code symbol documents that symbol
        and is not registered. Declaring the same topic twice is an error.
        """
        if topic is None:
            return False

        previous = self.find_by_id(topic.id)
        if isinstance(previous, Topic):
            if self.diagnostics is not None:
                self.diagnostics.error(
                    "topic", "The topic [%s] is already declared", previous.id
                )
            else:
                logger.error("The topic [%s] is already declared", previous.id)
            return False
        if previous is not None:
            return False

        self.register(topic)
        for sub_topic in topic.sub_topics:
            self.register_topic(sub_topic)
        return True
