# src/dcsim_core/components/exceptions.py
"""
Defines the diagnosable exception for the component models.
"""
from dataclasses import dataclass

from ..errors import DiagnosableError, format_diagnostic_report

@dataclass()
class ComponentError(DiagnosableError):
    """
    Raised when a component model is asked for a quantity its kind does not have,
    such as the resistance of a voltage source.
    """
    component_id: str
    details: str

    def __str__(self):
        return f"Component '{self.component_id}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Component Model Error",
            details=self.details,
            suggestion="Only resistors, LEDs and switches have a resistive model, and only sources have a voltage.",
            context={'component_id': self.component_id}
        )
