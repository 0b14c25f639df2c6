"""Hand-authored documentation topics."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import ClassVar

from docmodel.model_node import ModelNode


@dataclass(eq=False)
class Topic(ModelNode):
    """A topic and the sub-topics it owns."""

    title: str = ""
    content: str = ""
    sub_topics: list[Topic] = field(default_factory=list)

    category: ClassVar[str] = "Topic"

    def add(self, sub_topic: Topic) -> Topic:
        """Append ``sub_topic`` as the last child of this topic."""
        sub_topic.parent_id = self.id
        self.sub_topics.append(sub_topic)
        return sub_topic

    def walk(self) -> Iterator[Topic]:
        """Yield this topic and its descendants, depth-first, parents first."""
        yield self
        for sub_topic in self.sub_topics:
            yield from sub_topic.walk()
