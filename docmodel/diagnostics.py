"""Collects errors reported while building the documentation model."""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

WARNING = "warning"
ERROR = "error"
FATAL = "fatal"

_LEVELS = {
    WARNING: logging.WARNING,
    ERROR: logging.ERROR,
    FATAL: logging.CRITICAL,
}


@dataclass(frozen=True)
class Diagnostic:
    """A single reported problem."""

    category: str  # configuration/reconciliation/dependency/collision/...
    severity: str
    message: str


class Diagnostics:
    """Logs reported problems and keeps them for the exit decision."""

    def __init__(self) -> None:
        """Initialize an empty collector."""
        self.entries: list[Diagnostic] = []

    def report(self, category: str, severity: str, message: str, *args: object) -> None:
        """Record and log a problem. ``message`` uses %-style formatting."""
        text = message % args if args else message
        self.entries.append(Diagnostic(category, severity, text))
        logger.log(_LEVELS[severity], "[%s] %s", category, text)

    def warning(self, category: str, message: str, *args: object) -> None:
        """Record a problem that does not affect the outcome of the run."""
        self.report(category, WARNING, message, *args)

    def error(self, category: str, message: str, *args: object) -> None:
        """Record a problem that skips part of the input."""
        self.report(category, ERROR, message, *args)

    def fatal(self, category: str, message: str, *args: object) -> None:
        """Record a problem that makes the run fail."""
        self.report(category, FATAL, message, *args)

    @property
    def has_fatal(self) -> bool:
        """Whether any fatal problem was recorded."""
        return any(d.severity == FATAL for d in self.entries)

    def by_category(self, category: str) -> list[Diagnostic]:
        """Return the recorded problems of one category."""
        return [d for d in self.entries if d.category == category]

    def counts(self) -> dict[str, int]:
        """Count the recorded problems per severity."""
        result: dict[str, int] = {}
        for d in self.entries:
            result[d.severity] = result.get(d.severity, 0) + 1
        return result
