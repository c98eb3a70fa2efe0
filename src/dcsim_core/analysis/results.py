# src/dcsim_core/analysis/results.py
"""
Defines the formal, type-safe data contracts produced by the analysis stages.

Every stage of the engine hands the next one a frozen dataclass instead of loose
dictionaries or tuples. Results are created fresh for every analysis call and are
never mutated afterwards, so a result can be shared with the rendering layer
without copying.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Tuple


@dataclass(frozen=True)
class PinPair:
    """The net representatives of a component's two pins."""
    p1: int
    p2: int


@dataclass(frozen=True)
class NetResolution:
    """
    The result of net resolution for one circuit snapshot.

    Attributes:
        pin_of: Component id -> net representatives of its p1 and p2 pins.
        ground_net: Representative of the ground reference net, or None when the
                    circuit has neither a ground component nor a voltage source.
        nets: Every net touched by a component, in first-touched order, each with the
              sorted synthetic pin ids it contains.
    """
    pin_of: Mapping[str, PinPair]
    ground_net: Optional[int]
    nets: Mapping[int, Tuple[int, ...]]

    @property
    def net_count(self) -> int:
        return len(self.nets)

    def is_ground(self, net: int) -> bool:
        return self.ground_net is not None and net == self.ground_net


@dataclass(frozen=True)
class SimulationResult:
    """
    The read-only snapshot produced by one DC analysis.

    Attributes:
        node_voltages: Component id -> voltage of its p1 net (volts, ground referenced).
        component_currents: Component id -> signed current (amps). For sources this is
                            the current flowing out of the positive terminal.
        component_power: Component id -> dissipated power (watts), never negative.
        powered: Ids of sources and of every component with a pin above 0.1 V.
        solved: False when the solver failed and the result degraded to all zeros.
    """
    node_voltages: Mapping[str, float]
    component_currents: Mapping[str, float]
    component_power: Mapping[str, float]
    powered: FrozenSet[str]
    solved: bool = True

    def __post_init__(self):
        object.__setattr__(self, "node_voltages", MappingProxyType(dict(self.node_voltages)))
        object.__setattr__(self, "component_currents", MappingProxyType(dict(self.component_currents)))
        object.__setattr__(self, "component_power", MappingProxyType(dict(self.component_power)))
        object.__setattr__(self, "powered", frozenset(self.powered))

    def is_powered(self, component_id: str) -> bool:
        return component_id in self.powered

    def voltage(self, component_id: str) -> float:
        return self.node_voltages.get(component_id, 0.0)

    def current(self, component_id: str) -> float:
        return self.component_currents.get(component_id, 0.0)

    def power(self, component_id: str) -> float:
        return self.component_power.get(component_id, 0.0)


class VerdictState(Enum):
    NEUTRAL = "neutral"
    SUCCESS = "success"
    DANGER = "danger"


@dataclass(frozen=True)
class Verdict:
    """The classifier's single verdict on a simulation result."""
    state: VerdictState
    message: str
    details: Optional[str] = None
    component_id: Optional[str] = None
