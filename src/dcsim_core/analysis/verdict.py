# src/dcsim_core/analysis/verdict.py
"""
Classifies a simulation result into the single verdict the board displays.

Overheating always outranks a lit LED: the whole failure scan runs before the
success scan, and the first hit of either scan wins.
"""
import logging

from ..components.base_enums import ComponentKind
from ..constants import LED_ACTIVE_CURRENT, MAX_SAFE_POWER
from ..data_structures import CircuitData
from ..units import Quantity
from .results import SimulationResult, Verdict, VerdictState

logger = logging.getLogger(__name__)

# Kinds that never count as overheating.
_NON_DISSIPATING_KINDS = (ComponentKind.SOURCE, ComponentKind.GROUND, ComponentKind.SWITCH)

NEUTRAL_VERDICT = Verdict(
    state=VerdictState.NEUTRAL,
    message="SIMULATING...",
    details="Analyzing current flow...",
)


def evaluate_verdict(circuit: CircuitData, result: SimulationResult) -> Verdict:
    """
    Returns the danger verdict for the first overheating component, otherwise the
    success verdict for the first LED carrying more than 5 mA, otherwise neutral.
    """
    max_power = MAX_SAFE_POWER.to('W').magnitude
    for component_id, power in result.component_power.items():
        if power <= max_power:
            continue
        component = circuit.get_component(component_id)
        if component is not None and component.kind not in _NON_DISSIPATING_KINDS:
            milliwatts = Quantity(power, 'W').to('mW').magnitude
            logger.debug(f"'{component_id}' dissipates {power:.4f} W, above the {max_power} W ceiling.")
            return Verdict(
                state=VerdictState.DANGER,
                message="CIRCUIT FAILURE",
                details=f"{component.label} is overheating ({milliwatts:.0f}mW)",
                component_id=component_id,
            )

    min_current = LED_ACTIVE_CURRENT.to('A').magnitude
    for component_id, current in result.component_currents.items():
        component = circuit.get_component(component_id)
        if component is not None and component.kind is ComponentKind.LED and abs(current) > min_current:
            return Verdict(
                state=VerdictState.SUCCESS,
                message="CIRCUIT FUNCTIONAL",
                details=f"{component.label} is active",
                component_id=component_id,
            )

    return NEUTRAL_VERDICT
