# src/dcsim_core/simulation/exceptions.py
"""
Defines custom, diagnosable exceptions specific to system assembly and solving.

These never escape `run_advanced_simulation`: the engine catches them at its call
boundary and degrades to an all-zero result. They are raised so that callers using
the assembler and solver directly get an actionable report.
"""
from dataclasses import dataclass

import numpy as np

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass()
class MnaInputError(DiagnosableError):
    """
    Raised for structural errors encountered while assembling the MNA system.
    """
    component_id: str
    details: str

    def __str__(self):
        return f"MNA input error for component '{self.component_id}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="MNA Input Error",
            details=self.details,
            suggestion="Resolve the nets and assemble the system from the same circuit snapshot.",
            context={'component_id': self.component_id}
        )


@dataclass()
class SingularMatrixError(DiagnosableError, np.linalg.LinAlgError):
    """
    Raised when elimination produces a non-finite solution.

    This class uses multiple inheritance to be catchable both as our custom
    `DiagnosableError` and as a standard `LinAlgError`.
    """
    details: str
    size: int = 0

    def __str__(self):
        return f"Singular system of {self.size} unknowns: {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Singular Matrix Encountered",
            details=self.details,
            suggestion="This is often caused by a loop of voltage sources or a source shorted by a wire. Check the circuit topology.",
            context={'unknowns': str(self.size)}
        )
