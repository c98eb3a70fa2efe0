# src/dcsim_core/components/__init__.py
from .base_enums import ComponentKind
from .exceptions import ComponentError
from .values import parse_value
from .elements import equivalent_resistance, source_voltage

__all__ = [
    "ComponentKind",
    "ComponentError",
    "parse_value",
    "equivalent_resistance",
    "source_voltage",
]
