"""Logic for turning a ``<member>`` element into ``DocContent``."""

import xml.etree.ElementTree as ET

from docmodel.doc_content import DocContent, InheritDoc
from docmodel.documentation_file import get_tag, inner_xml


def parse_doc_content(node: ET.Element | None) -> DocContent:
    """Parse the documentation tags of a ``<member>`` element."""
    doc = DocContent()
    if node is None:
        return doc

    doc.summary = get_tag(node, "summary")
    doc.remarks = get_tag(node, "remarks")
    doc.example = get_tag(node, "example")
    doc.returns = get_tag(node, "returns")
    doc.value = get_tag(node, "value")
    doc.parameters = _named(node, "param", "name")
    doc.type_parameters = _named(node, "typeparam", "name")
    doc.exceptions = _named(node, "exception", "cref")
    doc.see_also = [s.get("cref", "") for s in node.findall("seealso") if s.get("cref")]

    inherit = node.find("inheritdoc")
    if inherit is not None:
        doc.inherit_doc = InheritDoc(cref=inherit.get("cref") or None)
    return doc


def _named(node: ET.Element, tag: str, attribute: str) -> dict[str, str]:
    result: dict[str, str] = {}
    for child in node.findall(tag):
        key = child.get(attribute)
        if key and key not in result:
            result[key] = inner_xml(child)
    return result
