# src/dcsim_core/analysis/__init__.py
"""
Public interface of the analysis services: net resolution, result contracts, the
verdict classifier and the derived readouts.
"""
from .results import NetResolution, PinPair, SimulationResult, Verdict, VerdictState
from .nets import resolve_nets
from .verdict import evaluate_verdict, NEUTRAL_VERDICT
from .readouts import (
    MultimeterReading, WireActivity, multimeter_reading, wire_activity, wire_current, wire_currents
)

__all__ = [
    # Formal Result Contracts
    "NetResolution",
    "PinPair",
    "SimulationResult",
    "Verdict",
    "VerdictState",
    # Services
    "resolve_nets",
    "evaluate_verdict",
    "NEUTRAL_VERDICT",
    # Readouts
    "MultimeterReading",
    "WireActivity",
    "multimeter_reading",
    "wire_activity",
    "wire_current",
    "wire_currents",
]
