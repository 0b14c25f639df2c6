"""Logic for loading hand-authored topics from the configuration."""

from pathlib import Path
from typing import Any

from docmodel.diagnostics import Diagnostics
from docmodel.topic import Topic

TOPIC = "topic"


def load_topics(
    entries: list[Any], base_dir: Path, diagnostics: Diagnostics
) -> list[Topic]:
    """Build the topic trees declared under ``topics``.

    A topic's ``content`` is taken as is; ``file`` is read relative to
    ``base_dir``. Invalid entries are reported and skipped with their subtree.
    """
    topics = []
    for entry in entries:
        topic = _topic(entry, base_dir, diagnostics)
        if topic is not None:
            topics.append(topic)
    return topics


def _topic(entry: Any, base_dir: Path, diagnostics: Diagnostics) -> Topic | None:
    if not isinstance(entry, dict) or not entry.get("id"):
        diagnostics.error(TOPIC, "Topic entry without an id: %r", entry)
        return None

    ident = str(entry["id"])
    content = str(entry.get("content") or "")
    if entry.get("file"):
        path = Path(entry["file"])
        if not path.is_absolute():
            path = base_dir / path
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            diagnostics.error(
                TOPIC, "Unable to read topic [%s] file [%s]: %s", ident, path, exc
            )

    topic = Topic(
        id=ident,
        name=str(entry.get("name") or ident),
        full_name=ident,
        title=str(entry.get("title") or ident),
        content=content,
    )
    for child in entry.get("subtopics") or []:
        sub_topic = _topic(child, base_dir, diagnostics)
        if sub_topic is not None:
            topic.add(sub_topic)
    return topic
