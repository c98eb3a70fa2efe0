# src/dcsim_core/parser/exceptions.py
"""
Defines custom, diagnosable exceptions for loading and validating circuit documents.

`ParsingError` covers file-level and syntax problems; `SchemaValidationError` covers
documents that load but do not match the circuit schema. Both derive from
`DiagnosableError`, so `load_circuit` can turn either into one actionable report.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any

from ..errors import DiagnosableError, format_diagnostic_report


class BaseParsingError(DiagnosableError):
    """
    A local, concrete base class for all circuit document loading errors.
    """
    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Generic Parsing Error",
            details=str(self),
            suggestion="Please check the format and content of the circuit document.",
            context={}
        )


@dataclass(frozen=True)
class ParsingError(BaseParsingError):
    """
    Raised when a circuit file is missing, unreadable, or not valid YAML/JSON, or
    when a document's root is not a mapping.
    """
    details: str
    file_path: Path

    def __str__(self):
        return f"Parsing error in '{self.file_path}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Circuit File Error",
            details=self.details,
            suggestion="Ensure the file exists, has the correct read permissions, and contains a valid YAML or JSON mapping.",
            context={'source_file': self.file_path}
        )


@dataclass(frozen=True)
class SchemaValidationError(BaseParsingError):
    """
    Raised when a document loads but violates the circuit schema (missing keys,
    wrong types, duplicate ids, connections to unknown nodes).
    """
    errors: Dict[str, Any]
    file_path: Path

    def _error_lines(self, prefix: str):
        return [f"  - {prefix} '{field}': {messages[0]}" for field, messages in sorted(self.errors.items())]

    def __str__(self):
        return f"Circuit schema validation failed for '{self.file_path}':\n" + "\n".join(self._error_lines("In field"))

    def get_diagnostic_report(self) -> str:
        error_list_str = "\n".join(self._error_lines("Field"))
        details = (
            "The structure of the circuit document does not conform to the required schema.\n"
            f"See details for {len(self.errors)} issue(s) below:\n\n{error_list_str}"
        )
        return format_diagnostic_report(
            error_type="Circuit Schema Validation Error",
            details=details,
            suggestion="Correct the specified fields. Every node needs an 'id' and 'type', ids must be unique, and connections may only reference existing node ids.",
            context={'source_file': self.file_path}
        )
