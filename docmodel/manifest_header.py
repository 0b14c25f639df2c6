"""Parsing of the ``### YamlMime:<Kind>`` line heading symbol manifests."""

import re

MANIFEST_KIND = "AssemblyManifest"

_HEADER = re.compile(r"\A###\s*YamlMime:\s*(?P<kind>\S+)[^\n]*\n?")


def split_manifest_header(text: str) -> tuple[str | None, str]:
    """Return the declared kind (or None) and the YAML body after the header."""
    m = _HEADER.match(text)
    if m is None:
        return None, text
    return m.group("kind"), text[m.end() :]
