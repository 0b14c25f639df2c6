"""Parsed documentation attached to model nodes."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class InheritDoc:
    """Pointer to the node documentation is inherited from.

    A missing ``cref`` means the nearest documented base member.
    """

    cref: str | None = None

    @property
    def automatic(self) -> bool:
        """Whether the source is found by walking the override chain."""
        return self.cref is None


@dataclass
class DocContent:
    """Documentation of one node."""

    summary: str = ""
    remarks: str = ""
    example: str = ""
    returns: str = ""
    value: str = ""
    parameters: dict[str, str] = field(default_factory=dict)
    type_parameters: dict[str, str] = field(default_factory=dict)
    exceptions: dict[str, str] = field(default_factory=dict)
    see_also: list[str] = field(default_factory=list)
    obsolete_message: str = ""
    inherit_doc: InheritDoc | None = None

    def is_empty(self) -> bool:
        """Whether no prose was written (obsolete message and pointer ignored)."""
        return not (
            self.summary
            or self.remarks
            or self.example
            or self.returns
            or self.value
            or any(self.parameters.values())
            or any(self.type_parameters.values())
        )

    def copy_missing_from(self, other: "DocContent") -> None:
        """Fill summary, remarks and obsolete message when they are empty."""
        if not self.summary and other.summary:
            self.summary = other.summary
        if not self.remarks and other.remarks:
            self.remarks = other.remarks
        if not self.obsolete_message and other.obsolete_message:
            self.obsolete_message = other.obsolete_message

    def copy_parameters_from(
        self,
        other: "DocContent",
        own_names: list[str],
        other_names: list[str],
    ) -> None:
        """Fill empty parameter descriptions by name, then by position."""
        for position, name in enumerate(own_names):
            if self.parameters.get(name):
                continue
            text = other.parameters.get(name, "")
            if not text and position < len(other_names):
                text = other.parameters.get(other_names[position], "")
            if text:
                self.parameters[name] = text
