"""Tests for the member registry."""

import logging

import pytest

from docmodel.diagnostics import Diagnostics
from docmodel.doc_content import DocContent, InheritDoc
from docmodel.member_registry import MemberRegistry
from docmodel.model_node import MethodNode, NamespaceNode, TypeNode
from docmodel.topic import Topic


def test_register_keeps_first_node():
    registry = MemberRegistry()
    first = TypeNode(id="T:Acme.Widget", name="Widget")
    second = TypeNode(id="T:Acme.Widget", name="Other")

    assert registry.register(first) is True
    assert registry.register(second) is False
    assert registry.find_by_id("T:Acme.Widget") is first
    assert len(registry) == 1


def test_find_by_id_external_fallback():
    registry = MemberRegistry()
    node = TypeNode(id="Foo", name="Foo")
    registry.register(node)

    assert registry.find_by_id("X:Foo") is node
    assert registry.find_by_id("X:Bar") is None
    assert registry.find_by_id("Y:Foo") is None


def test_find_by_id_prefers_registered_external():
    registry = MemberRegistry()
    plain = TypeNode(id="T:Foo", name="Foo")
    external = TypeNode(id="X:T:Foo", name="Foo")
    registry.register(plain)
    registry.register(external)

    assert registry.find_by_id("X:T:Foo") is external


def test_namespaces_in_registration_order():
    registry = MemberRegistry()
    for name in ["Zeta", "Alpha", "Mid"]:
        registry.register(NamespaceNode(id=f"N:{name}", name=name))
    registry.register(TypeNode(id="T:Alpha.Foo", name="Foo"))

    assert [ns.name for ns in registry.namespaces] == ["Zeta", "Alpha", "Mid"]


def test_inherited_doc_members_recorded_once():
    registry = MemberRegistry()
    inheriting = MethodNode(
        id="M:Acme.Widget.Run",
        name="Run",
        doc=DocContent(inherit_doc=InheritDoc()),
    )
    plain = MethodNode(id="M:Acme.Widget.Stop", name="Stop", doc=DocContent())

    registry.register(inheriting)
    registry.register(inheriting)
    registry.register(plain)

    assert registry.inherited_doc_members == [inheriting]

    # Later changes to the documentation do not touch the queue.
    inheriting.doc = DocContent()
    assert registry.inherited_doc_members == [inheriting]


def test_register_topic_with_sub_topics():
    registry = MemberRegistry()
    root = Topic(id="guide", name="guide")
    intro = root.add(Topic(id="guide.intro", name="intro"))
    intro.add(Topic(id="guide.intro.setup", name="setup"))
    root.add(Topic(id="guide.faq", name="faq"))

    assert registry.register_topic(root) is True
    assert [n.id for n in registry] == [
        "guide",
        "guide.intro",
        "guide.intro.setup",
        "guide.faq",
    ]
    assert registry.find_by_id("guide.intro.setup").parent(registry) is intro


def test_register_topic_skips_code_symbol():
    registry = MemberRegistry()
    symbol = TypeNode(id="T:Acme.Widget", name="Widget")
    registry.register(symbol)
    topic = Topic(id="T:Acme.Widget", name="Widget")
    topic.add(Topic(id="widget.usage", name="usage"))

    assert registry.register_topic(topic) is False
    assert registry.find_by_id("T:Acme.Widget") is symbol
    assert "widget.usage" not in registry


def test_register_duplicate_topic_is_an_error(caplog):
    diagnostics = Diagnostics()
    registry = MemberRegistry(diagnostics)
    first = Topic(id="guide", name="guide")
    registry.register_topic(first)

    with caplog.at_level(logging.ERROR):
        assert registry.register_topic(Topic(id="guide", name="again")) is False

    assert registry.find_by_id("guide") is first
    assert len(diagnostics.by_category("topic")) == 1
    assert "already declared" in caplog.text


def test_register_topic_none():
    assert MemberRegistry().register_topic(None) is False
