# src/dcsim_core/parser/parser.py
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import cerberus
import yaml

from ..data_structures import CircuitData
from ..errors import CircuitLoadError
from .exceptions import BaseParsingError, ParsingError, SchemaValidationError

logger = logging.getLogger(__name__)

# Marker used as `file_path` for documents that did not come from a file.
IN_MEMORY_SOURCE = Path("<in-memory>")


class EnhancedValidator(cerberus.Validator):
    """Custom Cerberus validator adding the circuit document's cross-item rules."""
    def __init__(self, *args, **kwargs):
        super(EnhancedValidator, self).__init__(*args, **kwargs)
        self.rules['unique_elements_by_key'] = {'schema': {'type': 'string'}}
        self.rules['known_endpoints'] = {'schema': {'type': 'boolean'}}

    def _validate_unique_elements_by_key(self, key_for_uniqueness: str, field: str, value: List[Dict]):
        """
        Validates that all dictionaries in a list have a unique value for a given key.
        The rule's arguments are validated against this schema:
        {'type': 'string'}
        """
        if not isinstance(value, list):
            return # Let the 'type: list' rule handle this.

        seen_keys = set()
        duplicates = []
        for item in value:
            if not isinstance(item, dict):
                continue # Let sub-schema validation handle this.

            item_key = item.get(key_for_uniqueness)
            if item_key is not None:
                if item_key in seen_keys:
                    duplicates.append(item_key)
                else:
                    seen_keys.add(item_key)

        if duplicates:
            unique_duplicates = sorted(set(duplicates))
            self._error(field, f"Duplicate values found for key '{key_for_uniqueness}': {unique_duplicates}")

    def _validate_known_endpoints(self, constraint: bool, field: str, value: List[Dict]):
        """
        Validates that every connection names node ids present in the document.
        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if not constraint or not isinstance(value, list):
            return
        nodes = self.root_document.get('nodes')
        if not isinstance(nodes, list):
            return # Let the 'nodes' rules report this.

        node_ids = {n.get('id') for n in nodes if isinstance(n, dict)}
        unknown = []
        for item in value:
            if not isinstance(item, dict):
                continue
            for endpoint_key in ('sourceId', 'targetId'):
                endpoint = item.get(endpoint_key)
                if isinstance(endpoint, str) and endpoint not in node_ids:
                    unknown.append(f"{item.get('id')}.{endpoint_key}={endpoint}")
        if unknown:
            self._error(field, f"Connections reference unknown node ids: {unknown}")


class CircuitParser:
    """
    Loads and validates circuit documents in the application's JSON shape:
    `{nodes: [{id, type, label, x, y, value?}], connections: [{id, sourceId, targetId}]}`.

    YAML is a superset of JSON, so one loader reads both file formats. Node type tags
    are free-form; tags without an electrical model are accepted.
    """
    _id_rule = {"type": "string", "required": True, "empty": False}

    _node_schema = {
        "id": _id_rule,
        "type": {"type": "string", "required": True, "empty": False},
        "label": {"type": "string", "required": False, "default": ""},
        "x": {"type": "number", "required": False, "default": 0},
        "y": {"type": "number", "required": False, "default": 0},
        "value": {"type": ["string", "number"], "required": False, "nullable": True},
    }

    _connection_schema = {
        "id": _id_rule,
        "sourceId": _id_rule,
        "targetId": _id_rule,
    }

    _schema = {
        "nodes": {
            "type": "list", "required": True, "unique_elements_by_key": "id",
            "schema": {"type": "dict", "schema": _node_schema},
        },
        "connections": {
            "type": "list", "required": False, "default": [],
            "unique_elements_by_key": "id", "known_endpoints": True,
            "schema": {"type": "dict", "schema": _connection_schema},
        },
    }

    def __init__(self):
        self._validator = EnhancedValidator(self._schema)
        self._validator.allow_unknown = False
        logger.debug("CircuitParser initialized with strict structural validation rules.")

    def parse_dict(self, document: Mapping[str, Any], source: Path = IN_MEMORY_SOURCE) -> CircuitData:
        """Validates an already-loaded circuit document and converts it to a CircuitData snapshot."""
        if not isinstance(document, Mapping):
            raise ParsingError(details="The root of a circuit document must be a mapping.", file_path=source)
        if not self._validator.validate(dict(document)):
            raise SchemaValidationError(self._validator.errors, source)

        circuit = CircuitData.from_dict(self._validator.document)
        logger.info(
            f"Parsed circuit from {source}: {len(circuit.components)} components, {len(circuit.wires)} wires."
        )
        return circuit

    def parse_file(self, path: Union[str, Path]) -> CircuitData:
        """Loads a YAML or JSON circuit file and validates it."""
        resolved_path = Path(path).resolve()
        return self.parse_dict(self._load_document(resolved_path), source=resolved_path)

    def _load_document(self, source: Path) -> Dict[str, Any]:
        """Loads and performs basic sanity checks on a YAML/JSON file."""
        if not source.is_file():
            raise ParsingError(details=f"Circuit file not found at path: {source}", file_path=source)
        try:
            with source.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except PermissionError as e:
            raise ParsingError(details=f"Permission denied when trying to read file: {e}", file_path=source) from e
        except yaml.YAMLError as e:
            raise ParsingError(details=f"Invalid YAML/JSON syntax: {e}", file_path=source) from e

        if content is None:
            raise ParsingError(details="The file is empty or contains no valid content.", file_path=source)
        if not isinstance(content, dict):
            raise ParsingError(details="The root of the circuit file must be a mapping.", file_path=source)
        return content


def load_circuit(source: Union[str, Path, Mapping[str, Any]], parser: Optional[CircuitParser] = None) -> CircuitData:
    """
    User-facing facade: loads a circuit from a file path or an in-memory document.

    Raises:
        CircuitLoadError: With a formatted diagnostic report if loading or validation fails.
    """
    circuit_parser = parser if parser is not None else CircuitParser()
    try:
        if isinstance(source, Mapping):
            return circuit_parser.parse_dict(source)
        return circuit_parser.parse_file(source)
    except BaseParsingError as e:
        logger.error(f"Failed to load circuit: {e}")
        raise CircuitLoadError(e.get_diagnostic_report()) from e
