"""Access to an XML documentation-comment file."""

import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path

from docmodel.errors import DocumentationFormatError

logger = logging.getLogger(__name__)

ASSEMBLY_NAME_PATH = "assembly/name"

_INDENT_RE = re.compile(r"\n[ \t]+")


class DocumentationFile:
    """A parsed ``<doc>`` file: declared assembly name and ``<member>`` entries."""

    def __init__(self, path: Path | None, root: ET.Element) -> None:
        """Wrap an already parsed ``<doc>`` root element."""
        self.path = path
        self.root = root
        self.members: dict[str, ET.Element] = {}
        for member in root.iter("member"):
            name = member.get("name")
            if not name:
                continue
            if name in self.members:
                logger.debug("Duplicate documentation entry %s in %s", name, path)
                continue
            self.members[name] = member

    @classmethod
    def load(cls, path: Path) -> "DocumentationFile":
        """Parse ``path``. Raises ``DocumentationFormatError`` on invalid files."""
        try:
            root = ET.parse(path).getroot()
        except (OSError, ET.ParseError) as exc:
            msg = f"Unable to read documentation [{path}]: {exc}"
            raise DocumentationFormatError(msg) from exc
        return cls.from_root(root, path)

    @classmethod
    def from_string(cls, text: str, path: Path | None = None) -> "DocumentationFile":
        """Parse documentation held in memory."""
        try:
            root = ET.fromstring(text)
        except ET.ParseError as exc:
            msg = f"Unable to parse documentation [{path}]: {exc}"
            raise DocumentationFormatError(msg) from exc
        return cls.from_root(root, path)

    @classmethod
    def from_root(cls, root: ET.Element, path: Path | None) -> "DocumentationFile":
        """Validate the root element and wrap it."""
        if root.tag != "doc" or root.find(ASSEMBLY_NAME_PATH) is None:
            msg = f"Not valid xml documentation for source [{path}]"
            raise DocumentationFormatError(msg)
        return cls(path, root)

    @property
    def assembly_name(self) -> str:
        """The assembly name declared under ``/doc/assembly/name``, trimmed."""
        return (self.root.findtext(ASSEMBLY_NAME_PATH) or "").strip()

    def find_member(self, ident: str) -> ET.Element | None:
        """Return the ``<member>`` element documenting ``ident``."""
        return self.members.get(ident)


def get_tag(node: ET.Element | None, tag: str) -> str:
    """Return the inner markup of the first ``tag`` child of ``node``."""
    if node is None:
        return ""
    child = node.find(tag)
    if child is None:
        return ""
    return inner_xml(child)


def inner_xml(node: ET.Element) -> str:
    """Serialize the content of ``node`` (text and child markup), dedented."""
    parts = [node.text or ""]
    for child in node:
        # tostring includes the child's tail text.
        parts.append(ET.tostring(child, encoding="unicode"))
    text = "".join(parts).strip()
    return _INDENT_RE.sub("\n", text)
