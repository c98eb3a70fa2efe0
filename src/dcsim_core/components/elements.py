# src/dcsim_core/components/elements.py
"""
Electrical models for the modeled component kinds. Every resistive kind is reduced
to one fixed equivalent resistance; the voltage source to one fixed voltage.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..constants import (
    DEFAULT_RESISTANCE_OHMS,
    DEFAULT_SOURCE_VOLTAGE_VOLTS,
    LED_RESISTANCE_OHMS,
    SWITCH_CLOSED_RESISTANCE_OHMS,
    SWITCH_CLOSED_VALUE,
    SWITCH_OPEN_RESISTANCE_OHMS,
)
from .base_enums import ComponentKind
from .exceptions import ComponentError
from .values import parse_value

if TYPE_CHECKING:
    from ..data_structures import Component

logger = logging.getLogger(__name__)


def equivalent_resistance(component: Component) -> float:
    """
    Returns the fixed resistance (ohms) a resistive component is modeled as.

    Raises:
        ComponentError: If the component's kind has no resistive model.
    """
    kind = component.kind
    if kind is ComponentKind.RESISTOR:
        return parse_value(component.value) or DEFAULT_RESISTANCE_OHMS
    if kind is ComponentKind.LED:
        return LED_RESISTANCE_OHMS
    if kind is ComponentKind.SWITCH:
        if component.value == SWITCH_CLOSED_VALUE:
            return SWITCH_CLOSED_RESISTANCE_OHMS
        return SWITCH_OPEN_RESISTANCE_OHMS
    raise ComponentError(
        component_id=component.id,
        details=f"Component kind '{kind.value}' has no resistive model."
    )


def source_voltage(component: Component) -> float:
    """Returns the voltage (volts) of a voltage source, defaulting to 9 V."""
    if component.kind is not ComponentKind.SOURCE:
        raise ComponentError(
            component_id=component.id,
            details=f"Component kind '{component.kind.value}' is not a voltage source."
        )
    return parse_value(component.value) or DEFAULT_SOURCE_VOLTAGE_VOLTS
