"""Tests for resolving inherited documentation."""

from docmodel.diagnostics import Diagnostics
from docmodel.doc_content import DocContent, InheritDoc
from docmodel.inheritance_resolver import InheritedDocResolver
from docmodel.member_registry import MemberRegistry
from docmodel.model_node import MethodNode, Parameter, PropertyNode, TypeNode


def _method(
    ident: str,
    doc: DocContent,
    overrides: str | None = None,
    implements: list[str] | None = None,
    parameters: list[str] | None = None,
) -> MethodNode:
    return MethodNode(
        id=ident,
        name=ident.rsplit(".", 1)[-1],
        doc=doc,
        overrides_id=overrides,
        implements_ids=implements or [],
        parameters=[Parameter(p, "System.Int32") for p in parameters or []],
    )


def _resolve(*nodes: object) -> tuple[InheritedDocResolver, Diagnostics]:
    diagnostics = Diagnostics()
    registry = MemberRegistry(diagnostics)
    for node in nodes:
        registry.register(node)  # type: ignore[arg-type]
    resolver = InheritedDocResolver(registry, diagnostics)
    resolver.resolve_all()
    return resolver, diagnostics


def test_only_empty_fields_are_filled() -> None:
    """Verify that a member keeps its own summary and gains missing remarks."""
    base = _method(
        "M:Base.Run",
        DocContent(summary="Base summary.", remarks="Base remarks.", returns="R."),
    )
    derived = _method(
        "M:Derived.Run",
        DocContent(summary="Own summary.", inherit_doc=InheritDoc()),
        overrides="M:Base.Run",
    )
    resolver, diagnostics = _resolve(derived, base)

    assert derived.doc.summary == "Own summary."
    assert derived.doc.remarks == "Base remarks."
    assert derived.doc.returns == "R."
    assert resolver.resolved == ["M:Derived.Run"]
    assert not diagnostics.entries


def test_nearest_documented_base() -> None:
    """Verify that undocumented bases are skipped along the override chain."""
    root = _method("M:Root.Run", DocContent(summary="Root."))
    middle = _method("M:Middle.Run", DocContent(), overrides="M:Root.Run")
    leaf = _method(
        "M:Leaf.Run", DocContent(inherit_doc=InheritDoc()), overrides="M:Middle.Run"
    )
    _resolve(root, middle, leaf)
    assert leaf.doc.summary == "Root."


def test_interface_member_after_override_chain() -> None:
    """Verify that implemented interface members are used when no base documents."""
    iface = _method("M:IRunner.Run", DocContent(summary="Runs."))
    impl = _method(
        "M:Runner.Run",
        DocContent(inherit_doc=InheritDoc()),
        implements=["M:IRunner.Run"],
    )
    _resolve(iface, impl)
    assert impl.doc.summary == "Runs."


def test_explicit_cref() -> None:
    """Verify that an explicit pointer is resolved through the registry."""
    other = _method("M:Other.Stop", DocContent(summary="Stops."))
    member = _method("M:Widget.Halt", DocContent(inherit_doc=InheritDoc("M:Other.Stop")))
    _resolve(other, member)
    assert member.doc.summary == "Stops."


def test_explicit_external_cref() -> None:
    """Verify that an external pointer falls back to the loaded symbol."""
    other = _method("M:Other.Stop", DocContent(summary="Stops."))
    member = _method(
        "M:Widget.Halt", DocContent(inherit_doc=InheritDoc("X:M:Other.Stop"))
    )
    _resolve(other, member)
    assert member.doc.summary == "Stops."


def test_dangling_pointer_is_a_warning() -> None:
    """Verify that an unresolvable pointer only warns."""
    member = _method(
        "M:Widget.Halt",
        DocContent(summary="Own.", inherit_doc=InheritDoc("M:Missing.Stop")),
    )
    resolver, diagnostics = _resolve(member)

    assert member.doc.summary == "Own."
    assert resolver.unresolved == ["M:Widget.Halt"]
    (entry,) = diagnostics.by_category("inheritance")
    assert entry.severity == "warning"
    assert "M:Missing.Stop" in entry.message
    assert not diagnostics.has_fatal


def test_base_resolved_before_derived() -> None:
    """Verify that a base inheriting from elsewhere is resolved first."""
    source = _method("M:Docs.Run", DocContent(summary="From docs."))
    base = _method("M:Base.Run", DocContent(inherit_doc=InheritDoc("M:Docs.Run")))
    derived = _method(
        "M:Derived.Run", DocContent(inherit_doc=InheritDoc()), overrides="M:Base.Run"
    )
    # Derived is queued before its base.
    resolver, _ = _resolve(derived, base, source)

    assert derived.doc.summary == "From docs."
    assert sorted(resolver.resolved) == ["M:Base.Run", "M:Derived.Run"]


def test_override_cycle_terminates() -> None:
    """Verify that a malformed override cycle ends without documentation."""
    a = _method("M:A.Run", DocContent(inherit_doc=InheritDoc()), overrides="M:B.Run")
    b = _method("M:B.Run", DocContent(inherit_doc=InheritDoc()), overrides="M:A.Run")
    resolver, diagnostics = _resolve(a, b)

    assert a.doc.summary == ""
    assert sorted(resolver.unresolved) == ["M:A.Run", "M:B.Run"]
    assert len(diagnostics.by_category("inheritance")) == 2


def test_parameters_matched_by_name_then_position() -> None:
    """Verify that parameter descriptions are copied by name, then by position."""
    base = _method(
        "M:Base.Move(System.Int32,System.Int32)",
        DocContent(parameters={"x": "Horizontal.", "y": "Vertical."}),
        parameters=["x", "y"],
    )
    derived = _method(
        "M:Derived.Move(System.Int32,System.Int32)",
        DocContent(parameters={"dy": "Own."}, inherit_doc=InheritDoc()),
        overrides="M:Base.Move(System.Int32,System.Int32)",
        parameters=["x", "dy"],
    )
    _resolve(base, derived)
    assert derived.doc.parameters == {"dy": "Own.", "x": "Horizontal."}

    renamed = _method(
        "M:Other.Move(System.Int32,System.Int32)",
        DocContent(inherit_doc=InheritDoc()),
        overrides="M:Base.Move(System.Int32,System.Int32)",
        parameters=["left", "top"],
    )
    _resolve(base, renamed)
    assert renamed.doc.parameters == {"left": "Horizontal.", "top": "Vertical."}


def test_property_value_and_obsolete() -> None:
    """Verify property value descriptions and obsolete messages are inherited."""
    base = PropertyNode(
        id="P:Base.Size",
        name="Size",
        doc=DocContent(value="The size.", obsolete_message="Use Extent."),
    )
    derived = PropertyNode(
        id="P:Derived.Size",
        name="Size",
        doc=DocContent(inherit_doc=InheritDoc()),
        overrides_id="P:Base.Size",
    )
    _resolve(base, derived)
    assert derived.value_description == "The size."
    assert derived.doc.obsolete_message == "Use Extent."


def test_type_inherits_from_base_type() -> None:
    """Verify that types walk their base type and interfaces."""
    iface = TypeNode(id="T:IShape", name="IShape", doc=DocContent(summary="A shape."))
    shape = TypeNode(
        id="T:Circle",
        name="Circle",
        doc=DocContent(inherit_doc=InheritDoc()),
        base_type_id="T:System.Object",
        interface_ids=["T:IShape"],
    )
    _resolve(iface, shape)
    assert shape.doc.summary == "A shape."
