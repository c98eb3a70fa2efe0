# tests/test_parser.py
import json
import logging

import pytest
import yaml

from dcsim_core import (
    CircuitData, CircuitLoadError, CircuitParser, ComponentKind, ParsingError, SchemaValidationError,
    load_circuit, run_advanced_simulation,
)
from dcsim_core.parser import IN_MEMORY_SOURCE


@pytest.fixture
def parser():
    return CircuitParser()


@pytest.fixture
def led_document():
    """The 'Simple LED Circuit' preset in the application's JSON shape."""
    return {
        "nodes": [
            {"id": "n1", "type": "source", "label": "9V Battery", "x": 100, "y": 300, "value": "9V"},
            {"id": "n2", "type": "resistor", "label": "330Ω", "x": 300, "y": 300, "value": "330Ω"},
            {"id": "n3", "type": "led", "label": "Red LED", "x": 500, "y": 300, "value": "Red"},
            {"id": "n4", "type": "ground", "label": "GND", "x": 700, "y": 300},
        ],
        "connections": [
            {"id": "e1", "sourceId": "n1", "targetId": "n2"},
            {"id": "e2", "sourceId": "n2", "targetId": "n3"},
            {"id": "e3", "sourceId": "n3", "targetId": "n4"},
        ],
    }


class TestValidDocuments:

    def test_parse_dict(self, parser, led_document):
        circuit = parser.parse_dict(led_document)
        assert isinstance(circuit, CircuitData)
        assert [c.id for c in circuit.components] == ["n1", "n2", "n3", "n4"]
        assert circuit.get_component("n3").kind is ComponentKind.LED
        assert circuit.get_component("n4").value is None
        assert circuit.wires[0].source_id == "n1" and circuit.wires[0].target_id == "n2"

    def test_parsed_circuit_simulates(self, parser, led_document):
        result = run_advanced_simulation(parser.parse_dict(led_document))
        assert result.current("n3") == pytest.approx(9.0 / 380.0)

    def test_optional_fields_get_defaults(self, parser):
        circuit = parser.parse_dict({"nodes": [{"id": "a", "type": "resistor"}]})
        component = circuit.get_component("a")
        assert component.label == ""
        assert (component.x, component.y) == (0.0, 0.0)
        assert circuit.wires == ()

    def test_numeric_value_becomes_text(self, parser):
        circuit = parser.parse_dict({"nodes": [{"id": "a", "type": "resistor", "value": 330}]})
        assert circuit.get_component("a").value == "330"

    def test_unknown_type_is_accepted_as_unmodeled(self, parser):
        circuit = parser.parse_dict({"nodes": [{"id": "u1", "type": "ic", "label": "555"}]})
        component = circuit.get_component("u1")
        assert component.kind is ComponentKind.UNMODELED
        assert component.type_tag == "ic"

    def test_yaml_file(self, parser, led_document, tmp_path):
        path = tmp_path / "led.yaml"
        path.write_text(yaml.safe_dump(led_document, allow_unicode=True), encoding="utf-8")
        circuit = parser.parse_file(path)
        assert len(circuit.components) == 4
        assert circuit.get_component("n2").label == "330Ω"

    def test_json_file(self, parser, led_document, tmp_path):
        path = tmp_path / "led.json"
        path.write_text(json.dumps(led_document), encoding="utf-8")
        assert parser.parse_file(str(path)) == parser.parse_dict(led_document)

    def test_parse_logs_summary(self, parser, led_document, caplog):
        with caplog.at_level(logging.INFO, logger="dcsim_core.parser.parser"):
            parser.parse_dict(led_document)
        assert "4 components, 3 wires" in caplog.text


class TestFileErrors:

    def test_missing_file(self, parser, tmp_path):
        with pytest.raises(ParsingError, match="not found"):
            parser.parse_file(tmp_path / "absent.yaml")

    def test_invalid_syntax(self, parser, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("nodes: [\n  - id: a\n", encoding="utf-8")
        with pytest.raises(ParsingError, match="Invalid YAML/JSON syntax"):
            parser.parse_file(path)

    def test_empty_file(self, parser, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ParsingError, match="empty"):
            parser.parse_file(path)

    def test_root_must_be_mapping(self, parser, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ParsingError, match="mapping") as excinfo:
            parser.parse_file(path)
        assert excinfo.value.file_path == path.resolve()

    def test_in_memory_root_must_be_mapping(self, parser):
        with pytest.raises(ParsingError) as excinfo:
            parser.parse_dict(["not", "a", "mapping"])
        assert excinfo.value.file_path == IN_MEMORY_SOURCE


class TestSchemaErrors:

    def test_nodes_required(self, parser):
        with pytest.raises(SchemaValidationError) as excinfo:
            parser.parse_dict({"connections": []})
        assert "nodes" in excinfo.value.errors

    def test_duplicate_node_ids(self, parser):
        document = {"nodes": [{"id": "a", "type": "resistor"}, {"id": "a", "type": "led"}]}
        with pytest.raises(SchemaValidationError, match="Duplicate values found for key 'id'"):
            parser.parse_dict(document)

    def test_duplicate_connection_ids(self, parser, led_document):
        led_document["connections"][1]["id"] = "e1"
        with pytest.raises(SchemaValidationError) as excinfo:
            parser.parse_dict(led_document)
        assert "connections" in excinfo.value.errors

    def test_connection_to_unknown_node(self, parser, led_document):
        led_document["connections"].append({"id": "e9", "sourceId": "n1", "targetId": "ghost"})
        with pytest.raises(SchemaValidationError, match="unknown node ids") as excinfo:
            parser.parse_dict(led_document)
        assert "e9.targetId=ghost" in str(excinfo.value)

    def test_node_type_required(self, parser):
        with pytest.raises(SchemaValidationError) as excinfo:
            parser.parse_dict({"nodes": [{"id": "a"}]})
        assert "nodes" in excinfo.value.errors

    def test_unknown_top_level_key(self, parser, led_document):
        led_document["viewport"] = {"zoom": 1}
        with pytest.raises(SchemaValidationError) as excinfo:
            parser.parse_dict(led_document)
        assert "viewport" in excinfo.value.errors


class TestLoadCircuitFacade:

    def test_loads_mapping(self, led_document):
        assert len(load_circuit(led_document).wires) == 3

    def test_loads_path(self, led_document, tmp_path):
        path = tmp_path / "led.yaml"
        path.write_text(yaml.safe_dump(led_document, allow_unicode=True), encoding="utf-8")
        assert load_circuit(path) == load_circuit(led_document)

    def test_schema_failure_becomes_report(self):
        with pytest.raises(CircuitLoadError) as excinfo:
            load_circuit({"nodes": "not-a-list"})
        report = str(excinfo.value)
        assert "DCSim Core: Actionable Diagnostic Report" in report
        assert "Circuit Schema Validation Error" in report
        assert isinstance(excinfo.value.__cause__, SchemaValidationError)

    def test_file_failure_becomes_report(self, tmp_path):
        with pytest.raises(CircuitLoadError, match="Circuit File Error"):
            load_circuit(tmp_path / "absent.json")
