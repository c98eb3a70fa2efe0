# src/dcsim_core/simulation/mna.py

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from ..analysis.results import NetResolution
from ..components.base_enums import ComponentKind
from ..components.elements import equivalent_resistance, source_voltage
from ..data_structures import CircuitData, Component
from .exceptions import MnaInputError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MnaSystem:
    """
    An assembled MNA system `matrix @ x = rhs`.

    Attributes:
        matrix: Square conductance matrix, one row per non-ground net followed by
                one row per voltage source.
        rhs: Right-hand-side vector of the same dimension.
        net_index: Net representative -> unknown index. The ground net is absent.
        source_index: Source component id -> index of its branch-current unknown.
    """
    matrix: np.ndarray
    rhs: np.ndarray
    net_index: Dict[int, int]
    source_index: Dict[str, int]

    @property
    def size(self) -> int:
        return self.rhs.shape[0]


class MnaAssembler:
    """
    Constructs the Modified Nodal Analysis (MNA) system for one circuit snapshot.

    It is responsible for:
    1.  Assigning a column to every net a component touches, skipping the ground net.
    2.  Appending one branch-current unknown per voltage source, in component order.
    3.  Stamping each component's contribution into the matrix and right-hand side.

    Every stamp is symmetric, so the assembled matrix is symmetric by construction.
    """
    def __init__(self, circuit: CircuitData, resolution: NetResolution):
        """
        Initializes the MnaAssembler and assigns all unknown indices.

        Args:
            circuit: The graph snapshot being analyzed.
            resolution: The nets resolved for that same snapshot.
        """
        self.circuit: CircuitData = circuit
        self.resolution: NetResolution = resolution

        self.net_index: Dict[int, int] = {}
        self.source_index: Dict[str, int] = {}
        self._assign_unknown_indices()

        logger.debug(
            f"MNA assembler initialized: {len(self.net_index)} net unknowns, "
            f"{len(self.source_index)} source unknowns."
        )

    @property
    def size(self) -> int:
        return len(self.net_index) + len(self.source_index)

    def _assign_unknown_indices(self):
        idx = 0
        for net in self.resolution.nets:
            if not self.resolution.is_ground(net):
                self.net_index[net] = idx
                idx += 1
        for component in self.circuit.iter_kind(ComponentKind.SOURCE):
            if component.id in self.source_index:
                raise MnaInputError(
                    component_id=component.id,
                    details="Two voltage sources share this id; each needs its own branch-current unknown."
                )
            self.source_index[component.id] = idx
            idx += 1

    def index_of_net(self, net: int) -> Optional[int]:
        """Returns the unknown index of a net, or None for the ground net."""
        if self.resolution.is_ground(net):
            return None
        return self.net_index.get(net)

    def _pin_indices(self, component: Component):
        pins = self.resolution.pin_of.get(component.id)
        if pins is None:
            raise MnaInputError(
                component_id=component.id,
                details="Component has no resolved pins; the net resolution belongs to a different circuit."
            )
        return self.index_of_net(pins.p1), self.index_of_net(pins.p2)

    def assemble(self) -> MnaSystem:
        """
        Assembles the full MNA system.

        Returns:
            The MnaSystem with a freshly allocated matrix and right-hand side.
        """
        n = self.size
        matrix = np.zeros((n, n), dtype=float)
        rhs = np.zeros(n, dtype=float)

        for component in self.circuit.components:
            kind = component.kind
            if kind.is_resistive:
                self._stamp_conductance(matrix, component)
            elif kind is ComponentKind.SOURCE:
                self._stamp_voltage_source(matrix, rhs, component)
            # Ground and unmodeled components contribute no stamp.

        return MnaSystem(matrix=matrix, rhs=rhs, net_index=dict(self.net_index), source_index=dict(self.source_index))

    def _stamp_conductance(self, matrix: np.ndarray, component: Component):
        idx1, idx2 = self._pin_indices(component)
        g = 1.0 / equivalent_resistance(component)
        if idx1 is not None:
            matrix[idx1, idx1] += g
        if idx2 is not None:
            matrix[idx2, idx2] += g
        if idx1 is not None and idx2 is not None:
            matrix[idx1, idx2] -= g
            matrix[idx2, idx1] -= g

    def _stamp_voltage_source(self, matrix: np.ndarray, rhs: np.ndarray, component: Component):
        idx1, idx2 = self._pin_indices(component)
        k = self.source_index[component.id]
        # Branch current leaves p1 (+) and enters p2 (-).
        if idx1 is not None:
            matrix[idx1, k] += 1.0
            matrix[k, idx1] += 1.0
        if idx2 is not None:
            matrix[idx2, k] -= 1.0
            matrix[k, idx2] -= 1.0
        rhs[k] = source_voltage(component)


def build_mna_system(circuit: CircuitData, resolution: NetResolution) -> MnaSystem:
    """Assembles the MNA system of a circuit from its resolved nets."""
    return MnaAssembler(circuit, resolution).assemble()
