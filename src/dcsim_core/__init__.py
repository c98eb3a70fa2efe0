# src/dcsim_core/__init__.py
import logging
from .log_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
logger.info("DCSim Core package initialized.")

from .units import ureg, pint, Quantity
from .components import ComponentKind, ComponentError, parse_value
from .data_structures import CircuitData, Component, Wire
from .parser import CircuitParser, load_circuit, ParsingError, SchemaValidationError
from .analysis import (
    NetResolution, SimulationResult, Verdict, VerdictState,
    resolve_nets, evaluate_verdict, multimeter_reading, wire_current, wire_activity, WireActivity,
)
from .simulation import (
    MnaAssembler, MnaSystem, build_mna_system, solve_linear_system,
    run_advanced_simulation, run_simulation, MnaInputError, SingularMatrixError,
)
from .errors import DCSimError, CircuitLoadError

__all__ = [
    # Units
    "ureg", "pint", "Quantity",
    # Data Structures
    "CircuitData", "Component", "Wire", "ComponentKind",
    # Value Parsing
    "parse_value",
    # Loading
    "CircuitParser", "load_circuit",
    # Analysis Stages
    "resolve_nets", "NetResolution",
    "MnaAssembler", "MnaSystem", "build_mna_system",
    "solve_linear_system",
    "run_advanced_simulation", "run_simulation", "SimulationResult",
    # Classification & Readouts
    "evaluate_verdict", "Verdict", "VerdictState",
    "multimeter_reading", "wire_current", "wire_activity", "WireActivity",
    # Errors
    "DCSimError", "CircuitLoadError", "ComponentError",
    "ParsingError", "SchemaValidationError", "MnaInputError", "SingularMatrixError",
]
