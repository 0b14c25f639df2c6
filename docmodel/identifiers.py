"""Helpers for doc-comment identifiers such as ``M:Foo.Bar.Baz(System.Int32)``."""

EXTERNAL_PREFIX = "X:"

KIND_PREFIXES = {
    "namespace": "N",
    "class": "T",
    "struct": "T",
    "interface": "T",
    "enum": "T",
    "delegate": "T",
    "method": "M",
    "constructor": "M",
    "operator": "M",
    "property": "P",
    "field": "F",
    "event": "E",
}


def make_id(kind: str, qualified_name: str, parameters: list[str] | None = None) -> str:
    """Build the identifier of a symbol from its kind, name and parameter types."""
    prefix = KIND_PREFIXES.get(kind.lower())
    if prefix is None:
        msg = f"Unknown symbol kind: {kind}"
        raise ValueError(msg)
    ident = f"{prefix}:{qualified_name}"
    if parameters:
        ident += "(" + ",".join(parameters) + ")"
    return ident


def is_external(ident: str) -> bool:
    """Check if the identifier refers to a symbol outside the loaded sources."""
    return ident.startswith(EXTERNAL_PREFIX)


def strip_external(ident: str) -> str:
    """Remove the external marker from an identifier, if present."""
    if is_external(ident):
        return ident[len(EXTERNAL_PREFIX) :]
    return ident


def qualify(container: str, name: str) -> str:
    """Join a container name and a member name."""
    return f"{container}.{name}" if container else name
