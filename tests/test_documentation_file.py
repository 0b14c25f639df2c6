"""Tests for doc-comment files and documentation parsing."""

import pytest

from docmodel.documentation_file import DocumentationFile, get_tag
from docmodel.errors import DocumentationFormatError
from docmodel.parse_doc_content import parse_doc_content

DOC = """<?xml version="1.0"?>
<doc>
    <assembly>
        <name>  Acme.Core  </name>
    </assembly>
    <members>
        <member name="T:Acme.Core.Widget">
            <summary>A widget.</summary>
            <remarks>Use <see cref="T:Acme.Core.Gadget"/> for
            larger parts.</remarks>
        </member>
        <member name="M:Acme.Core.Widget.Render(System.Int32)">
            <summary>Renders the widget.</summary>
            <param name="scale">The scale.</param>
            <returns>The markup.</returns>
            <exception cref="T:System.ArgumentException">Bad scale.</exception>
            <seealso cref="T:Acme.Core.Gadget"/>
        </member>
        <member name="P:Acme.Core.Widget.Size">
            <inheritdoc/>
            <value>The size.</value>
        </member>
        <member name="M:Acme.Core.Widget.Stop">
            <inheritdoc cref="M:Acme.Core.Gadget.Stop"/>
        </member>
        <member name="T:Acme.Core.Widget">
            <summary>Duplicate entry.</summary>
        </member>
    </members>
</doc>
"""


def test_load_documentation(tmp_path):
    path = tmp_path / "Acme.Core.xml"
    path.write_text(DOC, encoding="utf-8")

    doc = DocumentationFile.load(path)

    assert doc.path == path
    assert doc.assembly_name == "Acme.Core"
    assert len(doc.members) == 4
    assert get_tag(doc.find_member("T:Acme.Core.Widget"), "summary") == "A widget."
    assert doc.find_member("T:Missing") is None


@pytest.mark.parametrize(
    "text",
    [
        "<doc><members/></doc>",
        "<notdoc><assembly><name>A</name></assembly></notdoc>",
        "<doc><assembly>",
    ],
)
def test_invalid_documentation(text):
    with pytest.raises(DocumentationFormatError):
        DocumentationFile.from_string(text)


def test_load_missing_file(tmp_path):
    with pytest.raises(DocumentationFormatError, match="Unable to read"):
        DocumentationFile.load(tmp_path / "missing.xml")


def test_parse_doc_content():
    doc = DocumentationFile.from_string(DOC)

    widget = parse_doc_content(doc.find_member("T:Acme.Core.Widget"))
    assert widget.summary == "A widget."
    assert widget.remarks == (
        'Use <see cref="T:Acme.Core.Gadget" /> for\nlarger parts.'
    )
    assert widget.inherit_doc is None

    render = parse_doc_content(
        doc.find_member("M:Acme.Core.Widget.Render(System.Int32)")
    )
    assert render.parameters == {"scale": "The scale."}
    assert render.returns == "The markup."
    assert render.exceptions == {"T:System.ArgumentException": "Bad scale."}
    assert render.see_also == ["T:Acme.Core.Gadget"]


def test_parse_inheritdoc():
    doc = DocumentationFile.from_string(DOC)

    size = parse_doc_content(doc.find_member("P:Acme.Core.Widget.Size"))
    assert size.inherit_doc is not None
    assert size.inherit_doc.automatic
    assert size.value == "The size."

    stop = parse_doc_content(doc.find_member("M:Acme.Core.Widget.Stop"))
    assert stop.inherit_doc is not None
    assert stop.inherit_doc.cref == "M:Acme.Core.Gadget.Stop"
    assert stop.is_empty()


def test_parse_missing_member():
    assert parse_doc_content(None).is_empty()
