# --- src/dcsim_core/units.py ---
import pint
import logging

logger = logging.getLogger(__name__)
ureg = pint.UnitRegistry()
Quantity = ureg.Quantity
logger.debug("Pint Unit Registry initialized.")


def format_quantity(qty: Quantity, display_unit: str, decimals: int) -> str:
    """
    Formats a quantity in a display unit, e.g. (0.0237 A, "mA", 1) -> "23.7 mA".
    """
    converted = qty.to(display_unit)
    return f"{converted.magnitude:.{decimals}f} {display_unit}"
