# src/dcsim_core/simulation/engine.py
"""
The DC analysis pipeline: graph -> nets -> MNA system -> solution -> per-component results.

Each call allocates its own pins, nets and matrices and returns a fresh, immutable
SimulationResult; nothing is cached or shared between calls, so concurrent calls on
different snapshots are independent. Any failure inside the solver degrades to an
all-zero solution instead of reaching the caller.
"""
import logging
from typing import Any, Dict, FrozenSet, Mapping, Set, Tuple, Union

import numpy as np

from ..analysis.nets import resolve_nets
from ..analysis.results import NetResolution, SimulationResult
from ..components.base_enums import ComponentKind
from ..components.elements import equivalent_resistance
from ..constants import POWERED_VOLTAGE_THRESHOLD_VOLTS
from ..data_structures import CircuitData
from .mna import MnaSystem, build_mna_system
from .solver import solve_linear_system

logger = logging.getLogger(__name__)

CircuitInput = Union[CircuitData, Mapping[str, Any]]


def _as_circuit(circuit: CircuitInput) -> CircuitData:
    if isinstance(circuit, CircuitData):
        return circuit
    if isinstance(circuit, Mapping):
        return CircuitData.from_dict(circuit)
    raise TypeError(f"Expected CircuitData or a circuit mapping, got '{type(circuit).__name__}'.")


def _drop_duplicate_ids(circuit: CircuitData) -> CircuitData:
    """Keeps the first component of each id; later components reusing an id are skipped."""
    seen: Set[str] = set()
    kept = []
    for component in circuit.components:
        if component.id in seen:
            logger.warning(f"Duplicate component id '{component.id}' ({component.label!r}); ignoring it.")
            continue
        seen.add(component.id)
        kept.append(component)
    if len(kept) == len(circuit.components):
        return circuit
    return CircuitData(components=kept, wires=circuit.wires)


def _solve_or_zero(system: MnaSystem) -> Tuple[np.ndarray, bool]:
    """Solves the system, degrading to an all-zero vector on any failure."""
    try:
        return solve_linear_system(system.matrix, system.rhs), True
    except Exception as e:
        logger.error(f"Solver failed for a system of {system.size} unknowns; reporting no activity: {e}", exc_info=True)
        return np.zeros(system.size, dtype=float), False


def extract_results(
    circuit: CircuitData,
    resolution: NetResolution,
    system: MnaSystem,
    solution: np.ndarray,
    solved: bool = True,
) -> SimulationResult:
    """
    Maps a solution vector back to per-component voltage, current, power and the
    powered set.

    Args:
        circuit: The analyzed snapshot.
        resolution: Its resolved nets.
        system: The assembled system whose unknown layout the solution follows.
        solution: The solution vector.
        solved: Whether the solution came from a successful solve.

    Returns:
        A new SimulationResult.
    """
    def net_voltage(net: int) -> float:
        if resolution.is_ground(net):
            return 0.0
        idx = system.net_index.get(net)
        return 0.0 if idx is None else float(solution[idx])

    voltages: Dict[str, float] = {}
    currents: Dict[str, float] = {}
    power: Dict[str, float] = {}
    powered: Set[str] = set()

    for component in circuit.components:
        pins = resolution.pin_of[component.id]
        v1, v2 = net_voltage(pins.p1), net_voltage(pins.p2)
        voltages[component.id] = v1

        if component.kind.is_resistive:
            current = (v1 - v2) / equivalent_resistance(component)
        elif component.kind is ComponentKind.SOURCE:
            current = float(solution[system.source_index[component.id]])
        else:
            current = 0.0

        currents[component.id] = current
        power[component.id] = abs(current * (v1 - v2))

        if (component.kind is ComponentKind.SOURCE
                or abs(v1) > POWERED_VOLTAGE_THRESHOLD_VOLTS
                or abs(v2) > POWERED_VOLTAGE_THRESHOLD_VOLTS):
            powered.add(component.id)

    return SimulationResult(
        node_voltages=voltages,
        component_currents=currents,
        component_power=power,
        powered=frozenset(powered),
        solved=solved,
    )


def run_advanced_simulation(circuit: CircuitInput) -> SimulationResult:
    """
    Runs a full DC operating-point analysis of one circuit snapshot.

    Components reusing an earlier component's id are skipped with a warning.

    Args:
        circuit: A CircuitData snapshot, or a mapping in the application's
                 `{nodes: [...], connections: [...]}` shape.

    Returns:
        The per-component voltages, currents, power and powered set.
    """
    snapshot = _drop_duplicate_ids(_as_circuit(circuit))
    logger.info(
        f"Starting DC analysis: {len(snapshot.components)} components, {len(snapshot.wires)} wires."
    )

    resolution = resolve_nets(snapshot)
    system = build_mna_system(snapshot, resolution)
    solution, solved = _solve_or_zero(system)
    result = extract_results(snapshot, resolution, system, solution, solved)

    logger.info(
        f"DC analysis complete: {system.size} unknowns, {len(result.powered)} powered components."
    )
    return result


def run_simulation(circuit: CircuitInput) -> FrozenSet[str]:
    """Backward-compatible entry point: returns only the set of powered component ids."""
    return run_advanced_simulation(circuit).powered
