# src/dcsim_core/analysis/readouts.py
"""
Derived readouts the board renders from a simulation result: per-wire current with
its activity bucket, and the multimeter panel for a selected component.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from ..components.base_enums import ComponentKind
from ..constants import WIRE_IDLE_CURRENT_AMPS, WIRE_LOW_CURRENT_AMPS, WIRE_MEDIUM_CURRENT_AMPS
from ..data_structures import CircuitData, Component, Wire
from ..units import Quantity, format_quantity
from .results import SimulationResult


class WireActivity(Enum):
    IDLE = "idle"       # below 1 uA
    LOW = "low"         # below 10 mA
    MEDIUM = "medium"   # below 100 mA
    HIGH = "high"


def wire_current(result: SimulationResult, wire: Wire) -> float:
    """A wire carries the larger current magnitude of its two endpoint components."""
    return max(abs(result.current(wire.source_id)), abs(result.current(wire.target_id)))


def wire_activity(current: float) -> WireActivity:
    magnitude = abs(current)
    if magnitude < WIRE_IDLE_CURRENT_AMPS:
        return WireActivity.IDLE
    if magnitude < WIRE_LOW_CURRENT_AMPS:
        return WireActivity.LOW
    if magnitude < WIRE_MEDIUM_CURRENT_AMPS:
        return WireActivity.MEDIUM
    return WireActivity.HIGH


def wire_currents(circuit: CircuitData, result: SimulationResult) -> Dict[str, float]:
    """Wire id -> current, for every wire in the snapshot."""
    return {wire.id: wire_current(result, wire) for wire in circuit.wires}


@dataclass(frozen=True)
class MultimeterReading:
    """Probe values for one component, as unit-carrying quantities."""
    label: str
    voltage: Quantity
    current: Quantity
    power: Quantity

    def format(self) -> str:
        return " | ".join([
            f"V: {format_quantity(self.voltage, 'V', 2)}",
            f"I: {format_quantity(self.current, 'mA', 1)}",
            f"P: {format_quantity(self.power, 'mW', 1)}",
        ])


def multimeter_reading(result: SimulationResult, component: Component) -> Optional[MultimeterReading]:
    """Returns the probe reading of a component; ground points have none."""
    if component.kind is ComponentKind.GROUND:
        return None
    return MultimeterReading(
        label=component.label,
        voltage=Quantity(result.voltage(component.id), 'V'),
        current=Quantity(result.current(component.id), 'A'),
        power=Quantity(result.power(component.id), 'W'),
    )
