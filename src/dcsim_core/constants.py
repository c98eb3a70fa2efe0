# --- src/dcsim_core/constants.py ---
import logging
from .units import Quantity

logger = logging.getLogger(__name__)

# --- Component Model Constants ---

#: Resistance used for a resistor whose value string parses to zero or nothing.
DEFAULT_RESISTANCE_OHMS: float = 1000.0

#: Fixed resistance of the simplified LED model (no forward-voltage knee, no reverse blocking).
LED_RESISTANCE_OHMS: float = 50.0

#: Switch resistances. Only the literal value "closed" selects the closed resistance.
SWITCH_CLOSED_RESISTANCE_OHMS: float = 0.01
SWITCH_OPEN_RESISTANCE_OHMS: float = 1.0e9
SWITCH_CLOSED_VALUE: str = "closed"

#: Voltage used for a source whose value string parses to zero or nothing.
DEFAULT_SOURCE_VOLTAGE_VOLTS: float = 9.0

# --- Numerical Constants for the Solver ---

#: Pivots with a smaller magnitude are treated as singular; the unknown resolves to 0.
PIVOT_EPSILON: float = 1.0e-10

# --- Result Classification Thresholds ---

#: A pin above this magnitude marks its component as powered.
POWERED_VOLTAGE_THRESHOLD_VOLTS: float = 0.1

#: Power above which a dissipating component is reported as overheating.
MAX_SAFE_POWER_WATTS: float = 0.25
MAX_SAFE_POWER = Quantity(MAX_SAFE_POWER_WATTS, 'W')

#: LED current above which the LED counts as lit.
LED_ACTIVE_CURRENT_AMPS: float = 0.005
LED_ACTIVE_CURRENT = Quantity(LED_ACTIVE_CURRENT_AMPS, 'A')

# --- Wire Activity Buckets (amps) ---
WIRE_IDLE_CURRENT_AMPS: float = 1.0e-6
WIRE_LOW_CURRENT_AMPS: float = 0.01
WIRE_MEDIUM_CURRENT_AMPS: float = 0.1

logger.debug("Defined core constants: model resistances, solver epsilon, classification thresholds")
