# src/dcsim_core/parser/__init__.py
from .parser import CircuitParser, IN_MEMORY_SOURCE, load_circuit
from .exceptions import BaseParsingError, ParsingError, SchemaValidationError

__all__ = [
    "CircuitParser",
    "IN_MEMORY_SOURCE",
    "load_circuit",
    "BaseParsingError",
    "ParsingError",
    "SchemaValidationError",
]
