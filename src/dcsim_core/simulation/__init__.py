# src/dcsim_core/simulation/__init__.py
from .exceptions import MnaInputError, SingularMatrixError
from .mna import MnaAssembler, MnaSystem, build_mna_system
from .solver import solve_linear_system
from .engine import extract_results, run_advanced_simulation, run_simulation

__all__ = [
    # Exceptions
    "MnaInputError",
    "SingularMatrixError",
    # Core Classes
    "MnaAssembler",
    "MnaSystem",
    "build_mna_system",
    "solve_linear_system",
    "extract_results",
    "run_advanced_simulation",
    "run_simulation",
]
