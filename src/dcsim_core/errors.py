# src/dcsim_core/errors.py
"""
Error types shared across the engine, and the one report layout they all render to.

Only `CircuitLoadError` is meant to reach application code: the analysis path
degrades to a zero result instead of raising. The stage-level errors (component
models, MNA assembly, the solver, the document loader) derive from
`DiagnosableError`, so whoever catches one can show the user a report naming the
component, file or system size involved.
"""
from abc import abstractmethod
from typing import Any, Dict, Protocol, runtime_checkable


class DCSimError(Exception):
    """Root of the errors application code is expected to catch."""


class CircuitLoadError(DCSimError):
    """
    A circuit document could not be turned into a CircuitData snapshot. The
    message is the rendered diagnostic report of the underlying loader error.
    """


@runtime_checkable
class Diagnosable(Protocol):
    """Anything that can describe itself as a diagnostic report."""
    def get_diagnostic_report(self) -> str:
        ...


class DiagnosableError(Exception, Diagnosable):
    """Base for the engine's stage errors; subclasses render their own report."""
    @abstractmethod
    def get_diagnostic_report(self) -> str:
        raise NotImplementedError


# Context key -> report label, in display order.
_CONTEXT_LABELS = (
    ('component_id', "Component"),
    ('source_file', "Source File"),
    ('unknowns', "Unknowns"),
)

_RULE_WIDTH = 74


def _indented(text: str):
    return [f"  {line}" for line in text.splitlines()]


def format_diagnostic_report(
    error_type: str,
    details: str,
    suggestion: str,
    context: Dict[str, Any]
) -> str:
    """
    Renders a boxed report: the error type, whichever of the component id, source
    file and unknown count are present in `context`, then the details and the
    suggestion. An empty suggestion omits its section.
    """
    title = " DCSim Core: Actionable Diagnostic Report "
    lines = ["\n", title.center(_RULE_WIDTH, "="), f"Error Type:     {error_type}"]
    for key, label in _CONTEXT_LABELS:
        value = context.get(key)
        if value:
            lines.append(f"{label + ':':<16}{value}")

    lines.append("\nDetails:")
    lines.extend(_indented(details))
    if suggestion:
        lines.append("\nSuggestion:")
        lines.extend(_indented(suggestion))

    lines.append("=" * _RULE_WIDTH)
    return "\n".join(lines)
